"""Iterators that may never end."""

from .errors import InvalidArgumentError
from .utils import isint, get_logger


logger = get_logger(__name__)


def repeat(value, times=None):
    """Make an iterator that yields the same object over and over.

    Args:
        value (Any): Object to be yielded, the same reference every time.
        times (Optional[int]): Optional number of repetitions, unbounded by
            default. A negative number produces nothing.

    Raises:
        InvalidArgumentError: If `times` is neither None nor an integer.

    Example:

        >>> list(repeat('x', 3))
        ['x', 'x', 'x']
    """
    if times is None:
        return _repeat_forever(value)

    if not isint(times):
        raise InvalidArgumentError("times must be an integer or None")

    if times < 0:
        logger.warning("repeat() called with times=%d, nothing will be "
                       "produced", times)

    return _repeat(value, max(0, int(times)))


def _repeat_forever(value):
    while True:
        yield value


def _repeat(value, times):
    for _ in range(times):
        yield value


def count(start=0, step=1):
    """Make an iterator of evenly spaced values starting at `start`.

    Example:

        >>> counter = count(10, 2)
        >>> next(counter), next(counter), next(counter)
        (10, 12, 14)
    """
    return _count(start, step)


def _count(n, step):
    while True:
        yield n
        n += step


def cycle(iterable):
    """Cycle through the elements of an iterable indefinitely.

    The first pass is read lazily from `iterable` and saved, subsequent
    passes replay the saved elements. An empty input produces nothing.

    Example:

        >>> cycler = cycle("abc")
        >>> [next(cycler) for _ in range(5)]
        ['a', 'b', 'c', 'a', 'b']
    """
    return _cycle(iter(iterable))


def _cycle(iterator):
    saved = []
    for element in iterator:
        yield element
        saved.append(element)

    if len(saved) == 0:
        return

    while True:
        for element in saved:
            yield element
