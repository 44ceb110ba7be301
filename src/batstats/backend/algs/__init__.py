# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

from typing import Any

from batstats.backend.algs.base import ProjectionAlgorithm
from batstats.backend.algs.jitter import JitterProjection


# Registry of algorithm names to their classes
_ALGORITHM_REGISTRY: dict[str, type[ProjectionAlgorithm]] = {
    "jitter": JitterProjection,
}


def get_algorithm_by_name(
    algorithm_name: str,
    **kwargs: Any,
) -> ProjectionAlgorithm:
    """Get an algorithm instance by name.

    Args:
        algorithm_name: Name of the algorithm ('jitter')
        **kwargs: Additional arguments passed to the algorithm constructor

    Returns:
        ProjectionAlgorithm instance

    Raises:
        ValueError: If the algorithm name is not recognized
    """
    if algorithm_name not in _ALGORITHM_REGISTRY:
        available = ", ".join(sorted(_ALGORITHM_REGISTRY.keys()))
        raise ValueError(
            f"Unknown algorithm: {algorithm_name}. Available: {available}"
        )

    algorithm_class = _ALGORITHM_REGISTRY[algorithm_name]
    return algorithm_class(name=algorithm_name, **kwargs)


def get_available_algorithms() -> list[str]:
    """Get list of available algorithm names."""
    return sorted(_ALGORITHM_REGISTRY.keys())


__all__ = [
    "JitterProjection",
    "ProjectionAlgorithm",
    "get_algorithm_by_name",
    "get_available_algorithms",
]
