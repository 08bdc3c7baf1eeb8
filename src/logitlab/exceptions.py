"""
Exception Hierarchy
===================
All errors raised by the lab derive from LogitLabError so the UI slots can
catch them in one place and keep the event loop running.
"""


class LogitLabError(Exception):
    """Base class for all lab errors."""


class EmptyDatasetError(LogitLabError, ValueError):
    """Raised when metrics or training are requested on a dataset with no points."""


class NonFiniteParameterError(LogitLabError, ValueError):
    """Raised when a model parameter is NaN or infinite."""


class LevelError(LogitLabError, ValueError):
    """Raised for a level number outside the known levels."""


class QuizStateError(LogitLabError, RuntimeError):
    """Raised when the quiz is asked to move on before the current question is solved."""


class UnknownParameterError(LogitLabError, KeyError):
    """Raised for a parameter name other than 'w1', 'w2' or 'b'."""
