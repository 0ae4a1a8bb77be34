"""flatvec: exhaustive nearest-neighbor search ranked by cosine similarity."""

from flatvec.exceptions import FlatvecError, InvalidTopKError
from flatvec.vector import (
    SearchResult,
    Vector,
    VectorStore,
    cosine_similarity,
    create_vector_store,
)

__version__ = "0.1.0"

__all__ = [
    "FlatvecError",
    "InvalidTopKError",
    "SearchResult",
    "Vector",
    "VectorStore",
    "cosine_similarity",
    "create_vector_store",
]
