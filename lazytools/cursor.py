"""Pull-based cursors over the index state of combinatorial generators."""

from abc import ABC, abstractmethod

from .utils import as_pool, get_logger


logger = get_logger(__name__)


class Exhausted:
    """Marker returned by :meth:`IndexCursor.try_next` after the last item."""

    def __repr__(self):
        return "EXHAUSTED"

    def __reduce__(self):
        return "EXHAUSTED"


EXHAUSTED = Exhausted()

INITIALIZED = "initialized"
PRODUCING = "producing"
FINISHED = "exhausted"


class IndexCursor(ABC):
    """Iterator over tuples selected from a pool by an array of indices.

    Subclasses own the index state and implement the rule that moves it
    to the next selection. The output tuple for the current state is
    always :code:`tuple(pool[i] for i in indices[:r])`.

    The cursor walks through ``initialized -> producing -> exhausted``
    and never goes back, once exhausted it stays exhausted.

    Args:
        iterable (Iterable): Finite input, drained immediately.
        r (Optional[int]): Validated selection length, `None` selects
            as many items as there are in the pool.
    """
    def __init__(self, iterable, r=None):
        self.pool = as_pool(iterable)
        self.r = len(self.pool) if r is None else r
        self.indices = []
        self.state = INITIALIZED
        self.produced = 0
        self._total = None

    @property
    def total(self):
        """Number of tuples in the whole sequence, computed on first use."""
        if self._total is None:
            self._total = self.size()
        return self._total

    @abstractmethod
    def size(self):
        """Return the number of tuples in the whole sequence."""
        raise NotImplementedError

    @abstractmethod
    def start(self):
        """Set up the first index state, return False if there is none."""
        raise NotImplementedError

    @abstractmethod
    def advance(self):
        """Move to the next index state, return False if there is none."""
        raise NotImplementedError

    def current(self):
        pool = self.pool
        return tuple([pool[i] for i in self.indices[:self.r]])

    def try_next(self):
        """Produce the next tuple or :data:`EXHAUSTED`."""
        if self.state == FINISHED:
            return EXHAUSTED

        if self.state == INITIALIZED:
            self.state = PRODUCING
            found = self.start()
        else:
            found = self.advance()

        if not found:
            self.state = FINISHED
            if self._total is None:
                self._total = self.produced
            self.pool = ()
            self.indices = []
            logger.debug("%s exhausted after %d items",
                         self.__class__.__name__, self.produced)
            return EXHAUSTED

        self.produced += 1
        return self.current()

    def __iter__(self):
        return self

    def __next__(self):
        item = self.try_next()
        if item is EXHAUSTED:
            raise StopIteration
        return item

    def __length_hint__(self):
        if self.state == FINISHED:
            return 0
        return self.total - self.produced
