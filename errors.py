# errors.py

class VisualizerError(ValueError):
    """Base class for user-facing input errors."""
    pass


class EmptyInputError(VisualizerError):
    """Raised when the reference text holds no usable tokens."""

    def __init__(self, message="Enter a reference string!"):
        super().__init__(message)


class InvalidCapacityError(VisualizerError):
    """Raised when the frame count is missing, non-numeric, zero or negative."""

    def __init__(self, value=None, message="Enter a valid number of pages!"):
        super().__init__(message)
        self.value = value
