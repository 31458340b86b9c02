"""
Action-selection strategies.

Each strategy is a stateless object with `determine(table, state, rng=None) -> Action`:
- MostQValue: greedy, random tie-breaking
- SoftMax: sample from softmax of the action values
- EpsilonGreedy: Random with probability table.epsilon, else MostQValue
- Random: uniform over actions
"""

from .base import Strategy
from .uniform import Random
from .greedy import MostQValue, EpsilonGreedy
from .softmax import SoftMax, softmax_probabilities

__all__ = [
    "Strategy",
    "MostQValue",
    "SoftMax",
    "EpsilonGreedy",
    "Random",
    "softmax_probabilities",
]
