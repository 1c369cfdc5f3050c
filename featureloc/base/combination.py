"""Lexicographic generator for all k-combinations of a sequence of symbols."""
import typing as tp

from featureloc.utils.exceptions import CombinationDomainError

SymbolTy = tp.TypeVar("SymbolTy")


class Combination(tp.Generic[SymbolTy]):
    """
    Stateful enumerator of all combinations of sample size ``k`` drawn from a
    sequence of symbols, in lexicographic order of their index positions.

    The generator starts at the first combination, i.e., the indices
    ``0..k-1``. Each call to :meth:`advance` moves to the next combination
    until the last one is reached.

    Example:
        >>> combination = Combination("abc", 2)
        >>> combination.current()
        ['a', 'b']
        >>> combination.advance()
        True
        >>> combination.current()
        ['a', 'c']
    """

    def __init__(self, symbols: tp.Sequence[SymbolTy], k: int) -> None:
        if len(symbols) == 0:
            raise CombinationDomainError("n == 0 violates n >= 1!")
        if k > len(symbols):
            raise CombinationDomainError(
                f"n = {len(symbols)}, k = {k} violates n >= k!"
            )
        self.__symbols = list(symbols)
        self.__k = k
        self.__state: tp.List[int] = []
        self.initialize()

    def initialize(self) -> None:
        """Reset the generator to the lexicographically first combination."""
        self.__state = list(range(self.__k))

    @property
    def n(self) -> int:
        """Size of the universe."""
        return len(self.__symbols)

    @property
    def k(self) -> int:
        """Sample size."""
        return self.__k

    @property
    def indices(self) -> tp.Tuple[int, ...]:
        """Index positions of the current combination."""
        return tuple(self.__state)

    def advance(self) -> bool:
        """
        Move to the next combination.

        Returns: True, if a next combination was available, False if the
                 current combination is the last one
        """
        n = self.n
        for i in range(len(self.__state), 0, -1):
            value = self.__state[i - 1]
            if value + 1 + self.__k - i < n:
                self.__state[i - 1] += 1
                for j in range(i, len(self.__state)):
                    self.__state[j] = self.__state[j - 1] + 1
                return True
        return False

    def current(self) -> tp.List[SymbolTy]:
        """Symbols of the current combination."""
        return [self.__symbols[index] for index in self.__state]

    def __call__(self) -> tp.List[SymbolTy]:
        return self.current()

    def __iter__(self) -> tp.Iterator[tp.List[SymbolTy]]:
        """Yields the current and all following combinations."""
        yield self.current()
        while self.advance():
            yield self.current()


def all_combinations(symbols: tp.Sequence[SymbolTy],
                     min_k: int = 2) -> tp.Iterator[tp.List[SymbolTy]]:
    """
    Yields all combinations of symbols for every sample size in [min_k, n],
    ordered by sample size first and lexicographically second.

    Args:
        symbols: the symbols to combine
        min_k: smallest sample size
    """
    for k in range(min_k, len(symbols) + 1):
        yield from Combination(symbols, k)
