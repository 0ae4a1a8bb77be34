"""VectorStore factory driven by configuration."""

from flatvec.config.models.search import SearchConfig
from flatvec.observability.logging import get_logger
from flatvec.vector.store import VectorStore

logger = get_logger(__name__)


def create_vector_store(config: SearchConfig) -> VectorStore:
    """Create an empty VectorStore from search settings.

    Args:
        config: Search configuration from settings

    Returns:
        Configured VectorStore instance
    """
    logger.info("creating_vector_store", default_top_k=config.default_top_k)
    return VectorStore(default_top_k=config.default_top_k)
