class MindSparkError(Exception):
    """Base class for all library errors."""


class ValidationError(MindSparkError, ValueError):
    """Raised when a vector or batch of vectors is malformed."""
