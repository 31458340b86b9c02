import numpy as np
import pytest

from qtable import (
    EpsilonGreedy,
    MostQValue,
    QConfig,
    QTable,
    Random,
    SoftMax,
    Strategy,
    softmax_probabilities,
)


def _counts(strategy: Strategy, table: QTable, state_index: int, trials: int, seed: int) -> np.ndarray:
    """
    Count how often each action is chosen over `trials` calls sharing one seeded generator.

    :param strategy: Strategy under test.
        :type strategy: Strategy
    :param table: Table to read from.
        :type table: QTable
    :param state_index: State to select in.
        :type state_index: int
    :param trials: Number of selections.
        :type trials: int
    :param seed: Seed of the shared generator.
        :type seed: int

    :return: Selection counts, shape (action_size,).
        :rtype: np.ndarray
    """
    rng = np.random.default_rng(seed)
    state = table.state(state_index)
    counts = np.zeros(table.action_size, dtype=np.int64)
    for _ in range(trials):
        counts[table.next_action(strategy, state, rng=rng).index] += 1
    return counts


def test_most_q_value_picks_the_unique_maximum(make_table) -> None:
    table = make_table([[0.1, 0.7, -0.2, 0.3]])

    counts = _counts(MostQValue(), table, state_index=0, trials=200, seed=0)
    assert counts.tolist() == [0, 200, 0, 0]


def test_most_q_value_breaks_ties_uniformly(make_table) -> None:
    """
    With every action tied, each action is chosen about 1/k of the time (no bias towards index 0).
    """
    k = 4
    trials = 8_000
    table = make_table([[0.25] * k])

    counts = _counts(MostQValue(), table, state_index=0, trials=trials, seed=1)
    freqs = counts / trials

    assert np.all(counts > 0)
    assert np.allclose(freqs, 1.0 / k, atol=0.03)


def test_most_q_value_only_draws_among_tied_maxima(make_table) -> None:
    table = make_table([[0.5, -0.1, 0.5, 0.4999]])

    counts = _counts(MostQValue(), table, state_index=0, trials=2_000, seed=2)

    assert counts[1] == 0 and counts[3] == 0
    assert counts[0] > 800 and counts[2] > 800


def test_softmax_probabilities_sum_to_one_and_follow_values(make_table) -> None:
    table = make_table([[0.9, -0.9, 0.0]])
    p = softmax_probabilities(table.row(table.state(0)))

    assert np.isclose(np.sum(p), 1.0)
    assert p[0] > p[2] > p[1]
    assert np.allclose(p, np.exp([0.9, -0.9, 0.0]) / np.sum(np.exp([0.9, -0.9, 0.0])))


def test_softmax_probabilities_are_stable_for_large_inputs() -> None:
    """
    Shifting by the max keeps exp() finite even for huge inputs.
    """
    p = softmax_probabilities(np.array([1000.0, 1000.0, 0.0]))

    assert np.all(np.isfinite(p))
    assert np.allclose(p, [0.5, 0.5, 0.0])


def test_softmax_prefers_higher_values(make_table) -> None:
    """
    The strictly larger value is sampled more often in the long run, the others still appear.
    """
    table = make_table([[0.9, -0.9]])

    counts = _counts(SoftMax(), table, state_index=0, trials=5_000, seed=3)
    expected = softmax_probabilities(table.row(table.state(0)))

    assert counts[0] > counts[1] > 0
    assert np.allclose(counts / counts.sum(), expected, atol=0.03)


def test_random_is_uniform_and_ignores_values(make_table) -> None:
    k = 5
    trials = 10_000
    table = make_table([[0.99, -0.99, -0.99, -0.99, -0.99]])

    counts = _counts(Random(), table, state_index=0, trials=trials, seed=4)
    assert np.allclose(counts / trials, 1.0 / k, atol=0.03)


def test_epsilon_greedy_with_zero_epsilon_is_most_q_value(make_table) -> None:
    """
    epsilon=0 never explores: same choices as MostQValue.
    """
    table = make_table([[0.1, 0.6, 0.6, -0.3]], epsilon=0.0)

    counts = _counts(EpsilonGreedy(), table, state_index=0, trials=3_000, seed=5)

    assert counts[0] == 0 and counts[3] == 0
    assert np.allclose(counts[[1, 2]] / 3_000, 0.5, atol=0.04)


def test_epsilon_greedy_with_full_epsilon_is_random(make_table) -> None:
    """
    epsilon=1 always explores: the distribution is uniform like Random.
    """
    k = 4
    trials = 8_000
    table = make_table([[0.9, -0.5, -0.5, -0.5]], epsilon=1.0)

    counts = _counts(EpsilonGreedy(), table, state_index=0, trials=trials, seed=6)
    assert np.allclose(counts / trials, 1.0 / k, atol=0.03)


def test_epsilon_greedy_reads_epsilon_from_the_table(make_table) -> None:
    """
    After decaying epsilon to 0 the strategy becomes purely greedy.
    """
    table = make_table([[0.8, 0.1, 0.1]], epsilon=1.0)
    table.decay_epsilon(0.0)

    counts = _counts(EpsilonGreedy(), table, state_index=0, trials=500, seed=7)
    assert counts.tolist() == [500, 0, 0]


@pytest.mark.parametrize("strategy", [MostQValue(), SoftMax(), EpsilonGreedy(), Random()])
def test_strategies_do_not_mutate_the_table(strategy: Strategy) -> None:
    table = QTable(QConfig(state_size=3, action_size=4), rng=8)
    before = [list(table.row(s)) for s in table.states()]

    rng = np.random.default_rng(9)
    for s in table.states():
        for _ in range(20):
            action = strategy.determine(table, s, rng=rng)
            assert 0 <= action.index < table.action_size

    assert [list(table.row(s)) for s in table.states()] == before


@pytest.mark.parametrize(
    "strategy, epsilon",
    [
        (MostQValue(), 0.5),
        (SoftMax(), 0.5),
        (Random(), 0.5),
        (EpsilonGreedy(), 0.0),  # always exploits -> MostQValue
        (EpsilonGreedy(), 1.0),  # always explores -> Random
    ],
)
def test_strategies_reject_tables_without_actions(strategy: Strategy, epsilon: float) -> None:
    table = QTable(QConfig(state_size=2, action_size=0, epsilon=epsilon), rng=0)

    with pytest.raises(ValueError):
        strategy.determine(table, table.state(0))


def test_strategies_accept_int_seeds(make_table) -> None:
    """
    The same int seed gives the same choice; no seed uses a fresh generator.
    """
    table = make_table([[0.0, 0.0, 0.0, 0.0, 0.0]])
    state = table.state(0)

    a = table.next_action(SoftMax(), state, rng=123)
    b = table.next_action(SoftMax(), state, rng=123)
    assert a == b
    assert 0 <= table.next_action(Random(), state).index < 5


def test_strategy_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        Strategy()  # type: ignore[abstract]
