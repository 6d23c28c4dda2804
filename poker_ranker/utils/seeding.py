"""Deterministic seeding utilities for reproducibility.

Dealing draws from Python's ``random`` module unless a generator is passed
in explicitly, so seeding that module makes dealt hands repeatable.
"""

import random
from typing import Optional


def set_seed(seed: Optional[int] = None) -> int:
    """Set the seed of the module-level random generator.

    Args:
        seed: The seed value to use. If None, a random seed will be generated
              and returned for later reproducibility.

    Returns:
        The seed value that was used (useful when seed=None was passed).

    Example:
        >>> from poker_ranker import set_seed
        >>> set_seed(42)  # Deterministic
        42
        >>> seed = set_seed()  # Random seed, but returns it for logging
    """
    if seed is None:
        seed = random.randint(0, 2**32 - 1)

    random.seed(seed)
    return seed
