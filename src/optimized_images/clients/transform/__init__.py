"""Transform client registry."""

from typing import Type

from ...models.config import Settings
from .base import TransformClient

_CLIENTS: dict[str, Type[TransformClient]] = {}


def _ensure_clients_loaded():
    """Import all transform client modules to trigger registration."""
    from . import imgix  # noqa: F401
    from . import thumbor  # noqa: F401


def register(name: str):
    """Decorator to register a transform client."""
    def decorator(cls):
        _CLIENTS[name] = cls
        return cls
    return decorator


def get_transform_client_class(name: str) -> Type[TransformClient]:
    """Get transform client class by name."""
    _ensure_clients_loaded()
    if name not in _CLIENTS:
        raise ValueError(f"Unknown transform method: {name}")
    return _CLIENTS[name]


def create_transform_client(settings: Settings) -> TransformClient:
    """Create the transform client selected by settings.transform_method."""
    return get_transform_client_class(settings.transform_method).from_settings(settings)


def list_transform_clients() -> list[str]:
    """List all registered transform clients."""
    _ensure_clients_loaded()
    return list(_CLIENTS.keys())


__all__ = [
    "TransformClient",
    "register",
    "get_transform_client_class",
    "create_transform_client",
    "list_transform_clients",
]
