"""
Exceptions raised by the conjugation engine.
"""


class ConjugationError(Exception):
    """Base class for errors raised while conjugating a single root."""


class EmptyRootError(ConjugationError):
    """Raised when an empty verb root is given."""

    def __init__(self):
        super().__init__("Empty verb root provided")


class InvalidRootError(ConjugationError):
    """Raised when a verb root contains a character outside the alphabet."""

    def __init__(self, root: str, char: str):
        self.root = root
        self.char = char
        super().__init__(f"Invalid character {char!r} in verb root {root!r}")
