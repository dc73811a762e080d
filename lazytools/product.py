from .cursor import IndexCursor
from .utils import as_pool, check_length


class Product(IndexCursor):
    """Odometer over several pools, the last pool moves fastest."""
    def __init__(self, iterables, repeat=None):
        repeat = 1 if repeat is None else check_length(repeat, "repeat")
        pools = [as_pool(iterable) for iterable in iterables] * repeat
        super().__init__(pools)

    def size(self):
        if len(self.pool) == 0:
            return 0

        total = 1
        for pool in self.pool:
            total *= len(pool)
        return total

    def start(self):
        if len(self.pool) == 0 or not all(self.pool):
            return False

        self.indices = [0] * self.r
        return True

    def advance(self):
        pools, indices = self.pool, self.indices

        i = self.r - 1
        while i >= 0 and indices[i] == len(pools[i]) - 1:
            indices[i] = 0
            i -= 1

        if i < 0:
            return False

        indices[i] += 1
        return True

    def current(self):
        return tuple([pool[i] for pool, i in zip(self.pool, self.indices)])


def product(iterables, repeat=None):
    """Cartesian product of input iterables.

    Equivalent to nested for-loops, the rightmost iterable being the
    innermost loop. An empty list of iterables, or a single empty
    iterable among them, gives an empty product.

    Args:
        iterables (Sequence[Iterable]): Finite inputs, each one is read
            once before the first tuple is produced.
        repeat (Optional[int]): Number of times the list of iterables is
            repeated, :code:`product([a, b], 2)` is the same as
            :code:`product([a, b, a, b])`.

    Return:
        Iterator[tuple]: A lazy iterator over tuples with one item per
        pool.

    Raises:
        InvalidArgumentError: If `repeat` is not a non-negative integer.

    Example:

        >>> list(product([[1, 2], [3, 4]]))
        [(1, 3), (1, 4), (2, 3), (2, 4)]
        >>> list(product(["ab"], repeat=2))
        [('a', 'a'), ('a', 'b'), ('b', 'a'), ('b', 'b')]
    """
    return Product(iterables, repeat)
