"""
Shared helpers (random number generation).
"""

from .seeding import make_rng

__all__ = [
    "make_rng",
]
