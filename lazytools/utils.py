"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler

from .errors import InvalidArgumentError


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def check_length(value, name):
    """Validate a length-like argument.

    Args:
        value (int): The value to check.
        name (str): Argument name used in the error message.

    Return:
        int: `value` converted to a plain int.

    Raises:
        InvalidArgumentError: If `value` is not a non-negative integer,
            floats such as `nan`, `inf` or `3.0` included.
    """
    if not isint(value) or value < 0:
        raise InvalidArgumentError(name + " must be a non-negative integer")

    return int(value)


def as_pool(iterable):
    """Snapshot a finite iterable into an immutable, indexable pool.

    The input is drained immediately, an infinite input never returns.
    """
    return tuple(iterable)


def length(iterable):
    """Return the number of items in an iterable.

    Uses `len()` when the object supports it, otherwise the iterable is
    drained and its items are counted. `None` counts as empty.

    Example:

        >>> length([1, 2, 3])
        3
        >>> length(x for x in "hello")
        5
        >>> length(None)
        0
    """
    if iterable is None:
        return 0

    try:
        return len(iterable)
    except TypeError:  # object has no len
        pass

    count = 0
    for _ in iterable:
        count += 1

    return count
