"""
Container error taxonomy.

Every failure a bounded container can raise derives from ContainerError.
Controllers catch ContainerError and turn it into a FeedbackEvent; none of
these escape the controller boundary.
"""


class ContainerError(Exception):
    """Base class for recoverable container failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidValue(ContainerError):
    """Value is empty or absent (container left untouched)."""


class Overflow(ContainerError):
    """Container is at capacity (container left untouched)."""


class Underflow(ContainerError):
    """Removal from an empty stack (container left untouched)."""


class InvalidCapacity(ContainerError):
    """Requested capacity is not an integer or is below 1."""


def check_capacity(capacity) -> int:
    """
    Validate a requested capacity.

    Raises:
        InvalidCapacity: If capacity is not an int (bool excluded) or is < 1
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidCapacity(f"Invalid capacity {capacity!r}: must be an integer")
    if capacity < 1:
        raise InvalidCapacity(f"Invalid capacity {capacity}: must be at least 1")
    return capacity
