"""
Exceptions raised by utmgrid conversions.

All of them subclass ValueError, so existing `except ValueError` handlers
continue to catch bad inputs.
"""

__all__ = ['ConversionError', 'DomainError', 'FormatError', 'RangeError']


class ConversionError(ValueError):
    """Base class for all coordinate conversion errors"""


class RangeError(ConversionError):
    """Latitude or longitude outside of the valid domain"""


class FormatError(ConversionError):
    """Malformed UTM or MGRS text, or a zone number outside [1, 60]"""


class DomainError(ConversionError):
    """A well-formed value that does not correspond to any table entry"""
