"""Seeded random source shared by every fuzzer."""

from random import Random


class Fuzzer:
    """Owns one seeded random stream. Children are seeded from this stream."""

    def __init__(self, seed: int):
        self.seed = seed
        self._random = Random(seed)

    def _next_seed(self) -> int:
        return self._random.getrandbits(64)
