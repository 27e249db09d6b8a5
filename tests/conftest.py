import pytest


class SequenceRng:
    """Deterministic random source cycling through a fixed list of floats."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def zero_rng():
    return SequenceRng([0.0])


@pytest.fixture
def seq_rng():
    return SequenceRng


@pytest.fixture
def almost_full_board():
    """4x4 board with a 15-cell snake one step (left) from the last free cell."""
    from gridsnake.game import Direction, GameState

    tail_to_head = [
        (0, 0), (1, 0), (2, 0), (3, 0),
        (3, 1), (2, 1), (1, 1), (0, 1),
        (0, 2), (1, 2), (2, 2), (3, 2),
        (3, 3), (2, 3), (1, 3),
    ]
    return GameState(
        snake=list(reversed(tail_to_head)),
        direction=Direction.LEFT,
        pending_direction=Direction.LEFT,
        food=(0, 3),
        rng=lambda: 0.0,
        grid_size=4,
    )
