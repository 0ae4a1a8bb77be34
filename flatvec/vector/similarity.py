"""Cosine similarity between embedding vectors."""

import math
from collections.abc import Sequence


def dimensions_match(vec_a: Sequence[float], vec_b: Sequence[float]) -> bool:
    """Return True when both vectors have the same number of components."""
    return len(vec_a) == len(vec_b)


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """Compute cosine similarity between two vectors.

    Cosine similarity measures the cosine of the angle between two vectors,
    ranging from -1 (opposite) to 1 (identical direction).

    Degenerate inputs score 0.0 instead of raising:
    - vectors of different lengths
    - an empty or all-zero vector on either side
    - a NaN or infinite component on either side

    A score of 0.0 is therefore indistinguishable from true orthogonality.

    Each vector is divided by its largest absolute component before the
    sums are taken, so very large or very small magnitudes neither overflow
    nor underflow. Sums are accumulated left to right in double precision,
    whatever the element type, so results are reproducible for a given input.

    Args:
        vec_a: First vector
        vec_b: Second vector

    Returns:
        Cosine similarity score between -1 and 1
    """
    if not dimensions_match(vec_a, vec_b):
        return 0.0

    xs = [float(a) for a in vec_a]
    ys = [float(b) for b in vec_b]
    if not all(math.isfinite(v) for v in xs) or not all(math.isfinite(v) for v in ys):
        return 0.0

    scale_a = max((abs(x) for x in xs), default=0.0)
    scale_b = max((abs(y) for y in ys), default=0.0)
    if scale_a == 0 or scale_b == 0:
        return 0.0

    dot_product = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for x, y in zip(xs, ys):
        x /= scale_a
        y /= scale_b
        dot_product += x * y
        norm_a += x * x
        norm_b += y * y

    score = dot_product / (math.sqrt(norm_a) * math.sqrt(norm_b))

    # Rounding can push parallel vectors a hair past +/-1
    return max(-1.0, min(1.0, score))
