import random
from typing import List, MutableSequence, Optional, TypeVar

T = TypeVar("T")


def random_int(max_exclusive: int, min_inclusive: int = 0, rng: Optional[random.Random] = None) -> int:
    """Uniform integer in [min_inclusive, max_exclusive)."""
    source = rng if rng is not None else random
    return source.randrange(min_inclusive, max_exclusive)


def shuffle(sequence: MutableSequence[T], rng: Optional[random.Random] = None) -> MutableSequence[T]:
    """Fisher-Yates shuffle in place; returns the same sequence."""
    for i in range(len(sequence) - 1, 0, -1):
        j = random_int(i + 1, rng=rng)
        sequence[i], sequence[j] = sequence[j], sequence[i]
    return sequence


def pick(options: List[T], rng: Optional[random.Random] = None) -> T:
    """Shuffle a copy of non-empty ``options`` and draw one at a random index."""
    pool = shuffle(list(options), rng)
    return pool[random_int(len(pool), rng=rng)]
