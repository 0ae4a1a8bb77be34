"""Search configuration models."""

from pydantic import BaseModel, Field


class SearchConfig(BaseModel):
    """Vector search configuration."""

    default_top_k: int = Field(
        default=5,
        ge=0,
        description="Result count when a query does not specify top_k",
    )
