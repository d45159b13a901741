"""
Renderer registry mapping runner flavors to renderers.

Flavor names are matched case-insensitively, so "junit" and "JUNIT"
select the same renderer.
"""

from __future__ import annotations

from typing import Dict, List, Type, Optional

from .base import RunnerRenderer

# Global renderer registry
_RENDERER_REGISTRY: Dict[str, Type[RunnerRenderer]] = {}


def _key(name: str) -> str:
    return name.strip().upper()


def register_renderer(name: str, renderer_class: Type[RunnerRenderer]) -> None:
    """
    Register a renderer class in the global registry.

    Args:
        name: The flavor to register the renderer under (e.g., "JUNIT")
        renderer_class: The renderer class to register
    """
    _RENDERER_REGISTRY[_key(name)] = renderer_class


def get_renderer(name: Optional[str], **kwargs) -> Optional[RunnerRenderer]:
    """
    Get a renderer instance by flavor.

    Args:
        name: The flavor name (e.g., "JUNIT", "SERENITY")
        **kwargs: Arguments to pass to the renderer constructor

    Returns:
        Renderer instance, or None if not found
    """
    if not name:
        return None
    renderer_class = _RENDERER_REGISTRY.get(_key(name))
    if renderer_class:
        return renderer_class(**kwargs)
    return None


def list_renderers() -> List[Dict[str, str]]:
    """
    List all registered renderers with their descriptions.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    renderers = []
    for name, renderer_class in _RENDERER_REGISTRY.items():
        description = renderer_class.__doc__ or "No description available"
        description = description.strip().split('\n')[0]
        renderers.append({
            'name': name,
            'description': description
        })
    return sorted(renderers, key=lambda x: x['name'])


def unregister_renderer(name: str) -> None:
    """
    Unregister a renderer from the global registry.

    Args:
        name: The flavor name to unregister
    """
    _RENDERER_REGISTRY.pop(_key(name), None)


__all__ = [
    "register_renderer",
    "get_renderer",
    "list_renderers",
    "unregister_renderer",
]
