"""Random selection of a single fortune."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from fortunes.models import Fortune


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Deterministic generator for a seed, entropy-seeded otherwise."""
    return random.Random(seed) if seed is not None else random.Random()


def pick_fortune(
    corpus: Sequence[Fortune],
    seed: Optional[int] = None,
    *,
    rng: Optional[random.Random] = None,
) -> Optional[Fortune]:
    """Choose one fortune uniformly by index.

    The same seed over the same corpus always returns the same fortune. An
    explicit ``rng`` takes precedence over ``seed``.
    """
    if not corpus:
        return None
    generator = rng if rng is not None else make_rng(seed)
    return corpus[generator.randrange(len(corpus))]
