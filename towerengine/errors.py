"""Exceptions raised by the engine."""


class EngineError(RuntimeError):
    """Raised when the multimedia backend fails to initialise or load something."""