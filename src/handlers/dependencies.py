"""Lazy-loaded service container shared by all handlers."""

from typing import Optional

# Lazy-loaded to avoid import-time DB connections and Bedrock clients
_container: Optional["ServiceContainer"] = None


def get_container():
    """Build the container on first use and reuse it across warm invocations."""
    global _container
    if _container is None:
        from services.container import build_container
        _container = build_container()
    return _container


def set_container(container) -> None:
    """Replace the container (tests) or drop it with None."""
    global _container
    _container = container
