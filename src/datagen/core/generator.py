from abc import ABC, abstractmethod
from typing import Optional

from datagen.core.random import Randomizer

ALPHABET = (
    " "
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
)

VARIABLE_LENGTH = "variable"


class ValueGenerator(ABC):
    """
    Contrato base para los generadores de una sola columna.
    Cada llamada a produce_next() avanza el estado interno del generador.
    """

    @abstractmethod
    def produce_next(self) -> str:
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short label used by diagnostics, e.g. 'sequence'."""
        pass


class SequenceGenerator(ValueGenerator):
    """
    Consecutive integers starting at `seed`, rendered as decimal text.
    """

    def __init__(self, seed: int):
        self.counter = int(seed)

    def describe(self) -> str:
        return "sequence"

    def produce_next(self) -> str:
        value = str(self.counter)
        self.counter += 1
        return value


class RandomTextGenerator(ValueGenerator):
    """
    Random strings over ALPHABET.

    Fixed mode returns exactly `length_limit` characters. Variable mode
    draws the length from [0, length_limit); the limit itself is never
    produced.
    """

    def __init__(self, length_mode: str, length_limit: int,
                 randomizer: Optional[Randomizer] = None):
        if length_limit < 0:
            raise ValueError(
                f"length-limit must not be negative (got {length_limit})")
        self.length_mode = length_mode
        self.length_limit = length_limit
        self.randomizer = randomizer if randomizer is not None else Randomizer.shared()

    @property
    def is_variable(self) -> bool:
        return self.length_mode == VARIABLE_LENGTH

    def describe(self) -> str:
        return "random-text"

    def produce_next(self) -> str:
        length = self.length_limit
        if self.is_variable:
            # Empty range: nothing to draw from
            if self.length_limit == 0:
                return ""
            length = self.randomizer.randrange(self.length_limit)

        return self.randomizer.sample_text(ALPHABET, length)
