"""Iterators sharing one cursor over their source."""

from collections import deque
import copy
import numbers
import weakref

from .errors import format_stack, reraise
from .utils import check_length


_MISSING = object()

_SCALARS = (numbers.Number, str, bytes)


def same_key(a, b):
    """Return wether two group keys are the same.

    Numbers, strings and bytes are compared by value, any other key is
    only the same as itself. Booleans are not numbers here: `True` never
    matches `1`.
    """
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return False

    return isinstance(a, _SCALARS) and isinstance(b, _SCALARS) and a == b


class GroupCursor:
    """Read position in the source shared by :class:`GroupBy` and its
    groups.

    `generation` is bumped each time the outer iterator moves on to a new
    group, which invalidates any group from a previous generation.
    """
    def __init__(self, iterable, key, stack):
        self.iterator = iter(iterable)
        self.key = key
        self.stack = stack
        self.current_value = _MISSING
        self.current_key = _MISSING
        self.generation = 0
        self.n_read = 0
        self.exhausted = False

    def fetch(self):
        """Read the next item, return False if the source is exhausted."""
        if self.exhausted:
            return False

        try:
            value = next(self.iterator)
        except StopIteration:
            self.exhausted = True
            return False

        try:
            key = value if self.key is None else self.key(value)
        except Exception as error:
            reraise(error, self.n_read, "groupby", self.stack)

        self.current_value = value
        self.current_key = key
        self.n_read += 1
        return True


class Group:
    def __init__(self, cursor, key):
        self.cursor = cursor
        self.key = key
        self.generation = cursor.generation
        self.started = False
        self.done = False

    def __iter__(self):
        return self

    def __next__(self):
        cursor = self.cursor
        if self.done or cursor.generation != self.generation:
            self.done = True
            raise StopIteration

        # the first item was read by the outer iterator
        if self.started and not cursor.fetch():
            self.done = True
            raise StopIteration
        self.started = True

        if not same_key(cursor.current_key, self.key):
            self.done = True
            raise StopIteration

        return cursor.current_value


class GroupBy:
    def __init__(self, iterable, key, stack):
        self.cursor = GroupCursor(iterable, key, stack)
        self.target_key = _MISSING

    def __iter__(self):
        return self

    def __next__(self):
        cursor = self.cursor
        cursor.generation += 1

        # skip what remains of the current group
        while cursor.current_value is _MISSING \
                or same_key(cursor.current_key, self.target_key):
            if not cursor.fetch():
                raise StopIteration

        self.target_key = cursor.current_key
        return self.target_key, Group(cursor, self.target_key)


def groupby(iterable, key=None):
    """Make an iterator returning consecutive keys and groups.

    Args:
        iterable (Iterable): Input items, usually sorted by `key`.
        key (Optional[Callable[[Any], Any]]): Function computing the key
            of an item, defaults to the item itself.

    Return:
        Iterator[Tuple[Any, Iterator]]: pairs of a key and an iterator
        over the consecutive items with that key.

    Notes:
        The groups share the source with the outer iterator: moving on
        to the next key abandons the rest of the current group, which
        then yields nothing more. Copy a group (ex: with :code:`list`)
        before advancing if its content is needed later.

        Numbers, strings and bytes keys are compared by value, other keys
        by identity, so that two distinct but equal lists start two
        groups.

    Example:

        >>> [(k, list(g)) for k, g in groupby("AAABBC")]
        [('A', ['A', 'A', 'A']), ('B', ['B', 'B']), ('C', ['C'])]
    """
    if key is not None and not callable(key):
        raise TypeError("key must be callable")
    return GroupBy(iterable, key, format_stack())


class TeeSource:
    """Source iterator shared by several :class:`TeeIterator`.

    Each value read from the source is appended to the buffer of every
    live consumer.
    """
    def __init__(self, iterator):
        self.iterator = iterator
        self.consumers = weakref.WeakSet()
        self.exhausted = False

    def fetch(self):
        if self.exhausted:
            return False

        try:
            value = next(self.iterator)
        except StopIteration:
            self.exhausted = True
            return False

        for consumer in list(self.consumers):
            consumer.buffer.append(value)

        return True


class TeeIterator:
    def __init__(self, source, buffer=()):
        self.source = source
        self.buffer = deque(buffer)
        source.consumers.add(self)

    def __iter__(self):
        return self

    def __next__(self):
        if len(self.buffer) == 0 and not self.source.fetch():
            raise StopIteration

        return self.buffer.popleft()

    def __copy__(self):
        return TeeIterator(self.source, self.buffer)


def tee(iterable, n=2):
    """Return `n` independent iterators from a single iterable.

    Once split, the original iterable should not be used anywhere else,
    otherwise the tee iterators miss the items read elsewhere. Items are
    buffered until every tee iterator has read them.

    Teeing a tee iterator gives copies that start at its current
    position.

    Raises:
        InvalidArgumentError: If `n` is not a non-negative integer.

    Example:

        >>> a, b = tee([1, 2, 3])
        >>> list(a), list(b)
        ([1, 2, 3], [1, 2, 3])
    """
    n = check_length(n, "n")

    if isinstance(iterable, TeeIterator):
        return tuple(copy.copy(iterable) for _ in range(n))

    source = TeeSource(iter(iterable))
    return tuple(TeeIterator(source) for _ in range(n))
