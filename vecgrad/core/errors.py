# vecgrad/core/errors.py


class VecGradError(Exception):
    """Base class for errors raised by vecgrad."""


class LengthMismatchError(VecGradError, ValueError):
    """
    Two buffers that must have the same length do not.

    Attributes
    ----------
    required : int
        Length of the buffer being written to or combined with.
    actual : int
        Length of the buffer that was supplied.
    """

    def __init__(self, required: int, actual: int):
        self.required = required
        self.actual = actual
        super().__init__(
            f"given vector of length {actual}, but length {required} is required"
        )
