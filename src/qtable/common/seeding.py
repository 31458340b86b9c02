from __future__ import annotations
import numpy as np


def make_rng(rng: np.random.Generator | int | None = None) -> np.random.Generator:
    """
    Return a NumPy Generator for a single operation.

    The table and the strategies never keep a shared RNG: every randomised call
    either receives a Generator from the caller or builds a fresh one here.

    - Generator: returned as it is (the caller owns its state)
    - int: a new Generator seeded with it
    - None: a new Generator seeded from OS entropy

    :param rng: Generator, seed or None.
        :type rng: np.random.Generator | int | None

    :return: Generator to draw from.
        :rtype: np.random.Generator
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, (bool, np.bool_)):
        raise TypeError("rng must be a numpy Generator, an int seed or None, not a bool.")
    if rng is None:
        return np.random.default_rng()
    return np.random.default_rng(int(rng))

