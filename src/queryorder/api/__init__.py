"""HTTP adapter for ordering directives."""
