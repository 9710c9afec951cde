"""FastAPI dependencies for ordering directives."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import Query, Request

from queryorder.config.settings import Settings, get_settings
from queryorder.order import FieldSet, OrderBy, parse


def get_app_settings(request: Request) -> Settings:
    """
    Return the settings the handling app was created with.

    Apps built by ``create_app`` keep their settings on ``app.state``; any
    other app falls back to the environment-loaded settings.
    """
    app_settings = getattr(request.app.state, "settings", None)
    if isinstance(app_settings, Settings):
        return app_settings
    return get_settings()


def order_by_param(
    fields: FieldSet,
    default: OrderBy,
    *,
    alias: str | None = None,
) -> Callable[..., Awaitable[OrderBy]]:
    """
    Build a dependency that parses the ordering query parameter.

    Without ``alias`` the parameter name is the app's
    ``settings.order_query_param`` (``orderBy`` by default), resolved per
    request. With ``alias`` the name is fixed and documented in the OpenAPI
    schema. A rejected directive raises ``MalformedOrderDirective``, which
    the registered exception handler turns into a 400 response.

    Parameters
    ----------
    fields : FieldSet
        The fields the endpoint may be ordered by.
    default : OrderBy
        Ordering used when the parameter is absent or empty.
    alias : str | None, optional
        Fixed query parameter name overriding the settings (default: None).

    Returns
    -------
    Callable[..., Awaitable[OrderBy]]
        A dependency for use with ``Depends``.

    Examples
    --------
    >>> @router.get("/users")
    ... async def list_users(
    ...     order: OrderBy = Depends(order_by_param(USER_ORDERING, USER_DEFAULT)),
    ... ) -> list[User]:
    ...     ...
    """
    if alias is not None:
        param = alias
        description = (
            f"Ordering as 'field[,ASC|DESC]'. Fields: {', '.join(fields.names)}"
        )

        async def aliased_dependency(
            raw: str | None = Query(None, alias=param, description=description),
        ) -> OrderBy:
            return parse(raw, fields, default, param=param)

        return aliased_dependency

    async def dependency(request: Request) -> OrderBy:
        param_name = get_app_settings(request).order_query_param
        raw = request.query_params.get(param_name)
        return parse(raw, fields, default, param=param_name)

    return dependency
