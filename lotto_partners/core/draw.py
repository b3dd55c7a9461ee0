import random
from typing import Protocol


DRAW_SIZE = 6
DRAW_MIN = 1
DRAW_MAX = 45


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def generate_draw(rng: RandomSource | None = None) -> list[int]:
    """
    Draw DRAW_SIZE distinct numbers uniformly from [DRAW_MIN, DRAW_MAX].

    Samples with rejection: each pick is uniform over the full range and
    duplicates are simply discarded until the set is full.

    Args:
        rng: Random source with a ``randint`` method. Defaults to the
            ``random`` module.

    Returns:
        The numbers in ascending order
    """
    source = rng if rng is not None else random
    numbers: set[int] = set()

    while len(numbers) < DRAW_SIZE:
        numbers.add(source.randint(DRAW_MIN, DRAW_MAX))

    return sorted(numbers)
