"""Iterators that terminate with their shortest input.

The functions check their arguments when they are called and return lazy
iterators. Exceptions raised by user functions while iterating are
reported according to :func:`lazytools.seterr`.
"""

import operator

from .errors import InvalidArgumentError, format_stack, reraise
from .infinite import count, repeat
from .utils import isint


def _check_callable(func, name):
    if not callable(func):
        raise TypeError(name + " must be callable")


def accumulate(iterable, func=None, initial=None):
    """Make an iterator that returns accumulated results.

    Args:
        iterable (Iterable): Input values.
        func (Optional[Callable[[Any, Any], Any]]): Binary function taking
            the running total and the next value, defaults to
            :func:`python:operator.add`.
        initial (Optional[Any]): Optional starting value, yielded first so
            the output has one more item than the input.

    Example:

        >>> list(accumulate([1, 2, 3, 4]))
        [1, 3, 6, 10]
        >>> list(accumulate([1, 2, 3], initial=10))
        [10, 11, 13, 16]
    """
    if func is None:
        func = operator.add
    _check_callable(func, "func")
    return _accumulate(iter(iterable), func, initial, format_stack())


def _accumulate(iterator, func, initial, stack):
    i = 0
    try:
        if initial is None:
            try:
                total = next(iterator)
            except StopIteration:
                return
        else:
            total = initial

        yield total

        for item in iterator:
            i += 1
            total = func(total, item)
            yield total

    except Exception as error:
        reraise(error, i, "accumulate", stack)


def batched(iterable, n, strict=False):
    """Split an iterable into tuples of `n` items.

    The last batch may be shorter unless `strict` is set, in which case
    an incomplete final batch raises :class:`python:ValueError`.

    Raises:
        InvalidArgumentError: If `n` is not a positive integer.

    Example:

        >>> list(batched("ABCDEFG", 3))
        [('A', 'B', 'C'), ('D', 'E', 'F'), ('G',)]
    """
    if not isint(n) or n < 1:
        raise InvalidArgumentError("n must be a positive integer")
    return _batched(iter(iterable), int(n), strict)


def _batched(iterator, n, strict):
    batch = []
    for item in iterator:
        batch.append(item)
        if len(batch) == n:
            yield tuple(batch)
            batch = []

    if len(batch) > 0:
        if strict:
            raise ValueError("batched(): incomplete batch")
        yield tuple(batch)


def chain(*iterables):
    """Iterate over each input in turn.

    Example:

        >>> list(chain("ABC", "DEF"))
        ['A', 'B', 'C', 'D', 'E', 'F']
    """
    return chain_from_iterable(iterables)


def chain_from_iterable(iterables):
    """Alternative to :func:`chain` taking the inputs from one iterable,
    which is read lazily."""
    return _chain(iter(iterables))


def _chain(iterables):
    for iterable in iterables:
        for element in iterable:
            yield element


def compress(data, selectors):
    """Filter `data` with the truth value of the matching `selectors`.

    Stops as soon as either input is exhausted.

    Example:

        >>> list(compress("ABCDEF", [1, 0, 1, 0, 1, 1]))
        ['A', 'C', 'E', 'F']
    """
    return (d for d, s in zip(data, selectors) if s)


def dropwhile(predicate, iterable):
    """Skip items while `predicate` is true, then yield everything.

    Example:

        >>> list(dropwhile(lambda x: x < 5, [1, 4, 6, 3, 8]))
        [6, 3, 8]
    """
    _check_callable(predicate, "predicate")
    return _dropwhile(predicate, iter(iterable), format_stack())


def _dropwhile(predicate, iterator, stack):
    i = 0
    try:
        for item in iterator:
            if not predicate(item):
                yield item
                break
            i += 1

        for item in iterator:
            i += 1
            yield item

    except Exception as error:
        reraise(error, i, "dropwhile", stack)


def takewhile(predicate, iterable):
    """Yield items as long as `predicate` is true.

    The first item failing the predicate is consumed from the input but
    not yielded.

    Example:

        >>> list(takewhile(lambda x: x < 5, [1, 4, 6, 3, 8]))
        [1, 4]
    """
    _check_callable(predicate, "predicate")
    return _takewhile(predicate, iter(iterable), format_stack())


def _takewhile(predicate, iterator, stack):
    i = 0
    try:
        for item in iterator:
            if not predicate(item):
                return
            yield item
            i += 1

    except Exception as error:
        reraise(error, i, "takewhile", stack)


def filterfalse(predicate, iterable):
    """Yield the items for which `predicate` is false.

    If `predicate` is None, yield the items that are false.

    Example:

        >>> list(filterfalse(lambda x: x < 5, [1, 4, 6, 3, 8]))
        [6, 8]
        >>> list(filterfalse(None, [0, 1, "", "a", None]))
        [0, '', None]
    """
    if predicate is None:
        predicate = bool
    _check_callable(predicate, "predicate")
    return _filterfalse(predicate, iter(iterable), format_stack())


def _filterfalse(predicate, iterator, stack):
    i = 0
    try:
        for item in iterator:
            if not predicate(item):
                yield item
            i += 1

    except Exception as error:
        reraise(error, i, "filterfalse", stack)


def islice(iterable, *args):
    """Make an iterator that returns selected elements from the input.

    :code:`islice(iterable, stop)` or
    :code:`islice(iterable, start, stop[, step])`, works like slicing a
    list except that negative values are not supported. A `stop` of
    None iterates until the input is exhausted. Items past `stop` are
    never read from the input.

    Raises:
        InvalidArgumentError: If `start` or `stop` is negative, or `step`
            is not positive.

    Example:

        >>> list(islice("ABCDEFG", 2))
        ['A', 'B']
        >>> list(islice("ABCDEFG", 2, None, 2))
        ['C', 'E', 'G']
    """
    key = slice(*args)
    start = 0 if key.start is None else key.start
    stop = key.stop
    step = 1 if key.step is None else key.step

    if not isint(start) or start < 0 \
            or stop is not None and (not isint(stop) or stop < 0) \
            or not isint(step) or step < 1:
        raise InvalidArgumentError(
            "islice() arguments must be non-negative and step must be "
            "positive")

    return _islice(iter(iterable), start, stop, step)


def _islice(iterator, start, stop, step):
    positions = count() if stop is None else range(stop)
    wanted = start
    for i, element in zip(positions, iterator):
        if i == wanted:
            yield element
            wanted += step


def pairwise(iterable):
    """Return successive overlapping pairs.

    Example:

        >>> list(pairwise("ABCD"))
        [('A', 'B'), ('B', 'C'), ('C', 'D')]
    """
    return _pairwise(iter(iterable))


def _pairwise(iterator):
    try:
        previous = next(iterator)
    except StopIteration:
        return

    for item in iterator:
        yield previous, item
        previous = item


def starmap(func, iterable):
    """Call `func` with arguments unpacked from each item.

    An iterator equivalent of :func:`python:itertools.starmap`.

    Example:

        >>> list(starmap(pow, [(2, 5), (3, 2)]))
        [32, 9]
    """
    _check_callable(func, "func")
    return _starmap(func, iter(iterable), format_stack())


def _starmap(func, iterator, stack):
    i = 0
    try:
        for args in iterator:
            yield func(*args)
            i += 1

    except Exception as error:
        reraise(error, i, "starmap", stack)


def zip_longest(iterables, fillvalue=None):
    """Aggregate items from several iterables, padding the shorter ones.

    Args:
        iterables (Sequence[Iterable]): Inputs to aggregate.
        fillvalue (Any): Value used in place of the missing items of
            exhausted inputs (default None).

    Example:

        >>> list(zip_longest(["ABCD", "xy"], fillvalue="-"))
        [('A', 'x'), ('B', 'y'), ('C', '-'), ('D', '-')]
    """
    return _zip_longest([iter(it) for it in iterables], fillvalue)


def _zip_longest(iterators, fillvalue):
    n_active = len(iterators)
    if n_active == 0:
        return

    while True:
        values = []
        for k, iterator in enumerate(iterators):
            try:
                value = next(iterator)
            except StopIteration:
                n_active -= 1
                if n_active == 0:
                    return
                iterators[k] = repeat(fillvalue)
                value = fillvalue
            values.append(value)

        yield tuple(values)
