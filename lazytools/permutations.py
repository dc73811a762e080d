import math

from .cursor import IndexCursor
from .utils import check_length


class Permutations(IndexCursor):
    """Permutations cursor based on per-position rotation counters.

    `indices` is a permutation of the whole pool whose first `r` entries
    form the output. `cycles[i]` counts how many more values position
    `i` may take before the tail :code:`indices[i:]` has been rotated
    back to its original order.
    """
    def __init__(self, iterable, r=None):
        if r is not None:
            r = check_length(r, "r")
        super().__init__(iterable, r)
        self.cycles = []

    def size(self):
        n = len(self.pool)
        return math.perm(n, self.r) if self.r <= n else 0

    def start(self):
        n, r = len(self.pool), self.r
        if r > n:
            return False

        self.indices = list(range(n))
        self.cycles = list(range(n, n - r, -1))
        return True

    def advance(self):
        n, indices, cycles = len(self.pool), self.indices, self.cycles

        for i in reversed(range(self.r)):
            cycles[i] -= 1
            if cycles[i] == 0:
                # every value was tried at position i, restore the order
                # of the tail and carry on to the left
                indices[i:] = indices[i + 1:] + indices[i:i + 1]
                cycles[i] = n - i
            else:
                j = n - cycles[i]
                indices[i], indices[j] = indices[j], indices[i]
                return True

        self.cycles = []
        return False


def permutations(iterable, r=None):
    """Return successive `r`-length permutations of elements from the input.

    Permutations are emitted in lexicographic order according to the
    order of the input. Elements are treated as unique based on their
    position, not on their value.

    There are :code:`n! / (n - r)!` permutations when
    :code:`0 <= r <= n`, none when :code:`r > n` and a single empty tuple
    when :code:`r == 0`.

    Args:
        iterable (Iterable): Finite input, read once before the first
            permutation is produced.
        r (Optional[int]): Length of the permutations, defaults to the
            length of the input (full-length permutations).

    Return:
        Iterator[tuple]: A lazy iterator over the permutations.

    Raises:
        InvalidArgumentError: If `r` is not a non-negative integer.

    Example:

        >>> list(permutations([1, 2, 3], 2))
        [(1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2)]
    """
    return Permutations(iterable, r)


class PermutationsWithReplacement(IndexCursor):
    def __init__(self, iterable, r=None):
        if r is not None:
            r = check_length(r, "r")
        super().__init__(iterable, r)

    def size(self):
        return len(self.pool) ** self.r

    def start(self):
        if self.r == 0:
            return True
        if len(self.pool) == 0:
            return False

        self.indices = [0] * self.r
        return True

    def advance(self):
        last, indices = len(self.pool) - 1, self.indices

        # odometer, rightmost digit moves fastest
        i = self.r - 1
        while i >= 0 and indices[i] == last:
            indices[i] = 0
            i -= 1

        if i < 0:
            return False

        indices[i] += 1
        return True


def permutations_with_replacement(iterable, r=None):
    """Return `r`-length arrangements allowing repeated elements.

    Equivalent to the Cartesian product of the input with itself `r`
    times, with :code:`n ** r` tuples in lexicographic order.

    Args:
        iterable (Iterable): Finite input, read once before the first
            tuple is produced.
        r (Optional[int]): Length of the tuples, defaults to the length
            of the input.

    Return:
        Iterator[tuple]: A lazy iterator over the tuples.

    Raises:
        InvalidArgumentError: If `r` is not a non-negative integer.

    Example:

        >>> list(permutations_with_replacement("ab", 2))
        [('a', 'a'), ('a', 'b'), ('b', 'a'), ('b', 'b')]
    """
    return PermutationsWithReplacement(iterable, r)
