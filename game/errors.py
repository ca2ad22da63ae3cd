"""
Errors raised by the game engine.
"""


class InvariantViolation(RuntimeError):
    """
    The engine reached a state that should be impossible.

    Raised for programming errors (missing players, a computer move on a
    finished board, ...). Not something a user can recover from.
    """
