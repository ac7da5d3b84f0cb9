import random
import time
from typing import Optional


class Randomizer:
    """
    Random source for the text generators.
    Wraps its own random.Random so that a seeded instance never touches the
    module-level state. Without a seed it starts from a time-derived value.
    """

    _shared: Optional["Randomizer"] = None

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self._rng = random.Random(seed)

    @classmethod
    def shared(cls) -> "Randomizer":
        """
        Process-wide instance, created on first use and never reseeded.
        """
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def randrange(self, stop: int) -> int:
        return self._rng.randrange(stop)

    def sample_text(self, alphabet: str, length: int) -> str:
        """
        Builds a string of `length` characters, each drawn independently
        and uniformly from `alphabet`.
        """
        return "".join(self._rng.choices(alphabet, k=length))
