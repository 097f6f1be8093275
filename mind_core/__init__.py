from .errors import MindSparkError, ValidationError
from .types import Candidate, Note, RelatedNote, Vector
from .vectors import cosine_similarity

__all__ = [
    "Candidate",
    "MindSparkError",
    "Note",
    "RelatedNote",
    "ValidationError",
    "Vector",
    "cosine_similarity",
]
