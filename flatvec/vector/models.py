"""Data models for stored vectors and query results."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field


class Vector(BaseModel):
    """A labeled embedding.

    Immutable once created. Components are stored as a tuple of floats,
    so a store never aliases the list the caller built the vector from.
    Dimensionality is not validated here.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier, unique by convention only")
    values: tuple[float, ...] = Field(..., description="Embedding components")
    metadata: str = Field(default="", description="Opaque label")

    @property
    def dimensions(self) -> int:
        """Number of components in the embedding."""
        return len(self.values)


class SearchResult(BaseModel):
    """A stored vector paired with its similarity to the query."""

    model_config = ConfigDict(frozen=True)

    vector: Vector = Field(..., description="Copy of the matched vector")
    score: float = Field(..., description="Cosine similarity (-1 to 1, 0 when degenerate)")


@dataclass(frozen=True, order=True)
class RankedEntry:
    """Scored vector with a total order for ranking.

    Orders by descending score, then ascending insertion position, so
    equal scores keep the order in which vectors were inserted.
    """

    sort_key: tuple[float, int] = field(init=False, repr=False)
    score: float = field(compare=False)
    position: int = field(compare=False)
    vector: Vector = field(compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sort_key", (-self.score, self.position))

    def to_result(self) -> SearchResult:
        """Build the public result, copying the stored vector."""
        return SearchResult(vector=self.vector.model_copy(), score=self.score)
