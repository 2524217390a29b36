"""Module for miscellaneous multi-use functions"""

__all__ = ['zero_pad']

from typing import Union


def zero_pad(num: Union[float, int], length: int) -> str:
    """
    Truncates a number to a whole, stringifies it, and pads zeros to the prefix
    until it is `length` characters long. Longer values are not shortened.

    Args:
        num:
            A non-negative number

        length:
            The minimum width of the resulting string

    Returns:
        str
    """
    _ = str(int(num))
    return '0' * (length - len(_)) + _
