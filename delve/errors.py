class DelveError(Exception):
    """Base exception for the delve package."""


class ConfigError(DelveError, ValueError):
    """Raised when generation bounds cannot produce a valid map."""


class OutOfBoundsError(DelveError, IndexError):
    """Raised on any grid read or write outside ``[0, width) x [0, height)``."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"cell ({x}, {y}) outside {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class TemplateError(DelveError, ValueError):
    """Raised when monster template data is malformed."""
