"""Exception types raised by the theme converter core."""


class ThemeConverterError(Exception):
    """Base class for converter errors."""


class ColorConversionError(ThemeConverterError, ValueError):
    """A recognized color value could not be reinterpreted numerically."""
