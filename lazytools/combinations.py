import math

from .cursor import IndexCursor
from .utils import check_length


class Combinations(IndexCursor):
    def __init__(self, iterable, r):
        r = check_length(r, "r")
        super().__init__(iterable, r)

    def size(self):
        n = len(self.pool)
        return math.comb(n, self.r) if self.r <= n else 0

    def start(self):
        if self.r > len(self.pool):
            return False

        self.indices = list(range(self.r))
        return True

    def advance(self):
        n, r, indices = len(self.pool), self.r, self.indices

        # rightmost position which has not reached its last value
        for i in reversed(range(r)):
            if indices[i] != i + n - r:
                break
        else:
            return False

        indices[i] += 1
        for j in range(i + 1, r):
            indices[j] = indices[j - 1] + 1

        return True


def combinations(iterable, r):
    """Return `r`-length subsequences of elements from the input.

    Combinations are emitted in lexicographic order according to the
    order of the input, so a sorted input gives sorted output. Elements
    are treated as unique based on their position, not on their value.

    There are :code:`n! / r! / (n - r)!` combinations when
    :code:`0 <= r <= n`, none when :code:`r > n` and a single empty
    tuple when :code:`r == 0`.

    Args:
        iterable (Iterable): Finite input, read once before the first
            combination is produced.
        r (int): Length of the combinations.

    Return:
        Iterator[tuple]: A lazy iterator over the combinations.

    Raises:
        InvalidArgumentError: If `r` is not a non-negative integer.

    Example:

        >>> list(combinations([1, 2, 3, 4], 2))
        [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)]
    """
    return Combinations(iterable, r)


class CombinationsWithReplacement(IndexCursor):
    def __init__(self, iterable, r):
        r = check_length(r, "r")
        super().__init__(iterable, r)

    def size(self):
        n = len(self.pool)
        if n == 0:
            return 1 if self.r == 0 else 0
        return math.comb(n + self.r - 1, self.r)

    def start(self):
        if len(self.pool) == 0 and self.r > 0:
            return False

        self.indices = [0] * self.r
        return True

    def advance(self):
        n, r, indices = len(self.pool), self.r, self.indices

        for i in reversed(range(r)):
            if indices[i] != n - 1:
                break
        else:
            return False

        indices[i:] = [indices[i] + 1] * (r - i)
        return True


def combinations_with_replacement(iterable, r):
    """Return `r`-length subsequences allowing repeated elements.

    The output is in lexicographic order of the input positions. There
    are :code:`(n + r - 1)! / r! / (n - 1)!` combinations for a non-empty
    input, and none for an empty input unless `r` is 0.

    Args:
        iterable (Iterable): Finite input, read once before the first
            combination is produced.
        r (int): Length of the combinations.

    Return:
        Iterator[tuple]: A lazy iterator over the combinations.

    Raises:
        InvalidArgumentError: If `r` is not a non-negative integer.

    Example:

        >>> list(combinations_with_replacement([1, 2, 3], 2))
        [(1, 1), (1, 2), (1, 3), (2, 2), (2, 3), (3, 3)]
    """
    return CombinationsWithReplacement(iterable, r)
