# errors.py


class SnakeError(Exception):
    """Base class for errors raised by the game core."""


class InvalidDirection(SnakeError, ValueError):
    def __init__(self, value):
        super().__init__(f"Invalid direction: {value!r}")
        self.value = value


class BoardFullError(SnakeError):
    """No free cell is left to place food on."""

    def __init__(self, grid_size: int):
        super().__init__(f"No free cell left on a {grid_size}x{grid_size} board")
        self.grid_size = grid_size
