"""Vector storage and cosine similarity search."""

from flatvec.vector.factory import create_vector_store
from flatvec.vector.models import SearchResult, Vector
from flatvec.vector.similarity import cosine_similarity, dimensions_match
from flatvec.vector.store import VectorStore

__all__ = [
    "SearchResult",
    "Vector",
    "VectorStore",
    "cosine_similarity",
    "create_vector_store",
    "dimensions_match",
]
