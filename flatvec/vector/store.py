"""Exhaustive in-memory vector store.

Vectors are kept in an append-only list. A query scores every stored
vector against the query vector with cosine similarity, ranks the scores
and returns the best matches. There is no index: the scan is O(n * d)
plus O(n log n) for the sort.

Not safe for concurrent mutation. A store is owned by a single caller.
"""

from collections.abc import Iterable, Iterator, Sequence

from flatvec.exceptions import InvalidTopKError
from flatvec.observability.logging import get_logger
from flatvec.vector.models import RankedEntry, SearchResult, Vector
from flatvec.vector.similarity import cosine_similarity, dimensions_match

logger = get_logger(__name__)


class VectorStore:
    """Append-only collection of labeled vectors with top-K cosine search."""

    def __init__(self, default_top_k: int = 5) -> None:
        """Initialize an empty store.

        Args:
            default_top_k: Result count used when query() is called without top_k
        """
        if default_top_k < 0:
            raise InvalidTopKError(default_top_k)
        self._default_top_k = default_top_k
        self._vectors: list[Vector] = []

    @classmethod
    def from_vectors(cls, vectors: Iterable[Vector], **kwargs: int) -> "VectorStore":
        """Create a store pre-populated with vectors, in iteration order."""
        store = cls(**kwargs)
        store.insert_many(vectors)
        return store

    @property
    def default_top_k(self) -> int:
        return self._default_top_k

    def __len__(self) -> int:
        return len(self._vectors)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._vectors)

    def insert(self, vector: Vector) -> None:
        """Append a vector. No validation is performed."""
        self._vectors.append(vector)

    def insert_many(self, vectors: Iterable[Vector]) -> int:
        """Append vectors in iteration order.

        Returns:
            Number of vectors appended
        """
        count = 0
        for vector in vectors:
            self.insert(vector)
            count += 1

        logger.debug("vectors_inserted", count=count, store_size=len(self._vectors))
        return count

    def query(
        self,
        query_vector: Sequence[float],
        top_k: int | None = None,
    ) -> list[SearchResult]:
        """Return the stored vectors most similar to query_vector.

        Every stored vector is scored independently, so a vector whose
        dimensionality differs from the query scores 0 without affecting
        the rest of the results.

        Args:
            query_vector: Query embedding
            top_k: Maximum results to return (defaults to default_top_k)

        Returns:
            Results sorted by score descending; ties keep insertion order

        Raises:
            InvalidTopKError: If top_k is negative
        """
        if top_k is None:
            top_k = self._default_top_k
        if top_k < 0:
            raise InvalidTopKError(top_k)

        ranked: list[RankedEntry] = []
        mismatches = 0

        for position, vector in enumerate(self._vectors):
            if not dimensions_match(query_vector, vector.values):
                mismatches += 1
            score = cosine_similarity(query_vector, vector.values)
            ranked.append(RankedEntry(score=score, position=position, vector=vector))

        ranked.sort()
        results = [entry.to_result() for entry in ranked[:top_k]]

        logger.debug(
            "vector_store_query",
            store_size=len(self._vectors),
            top_k=top_k,
            returned=len(results),
            dimension_mismatches=mismatches,
        )

        return results
