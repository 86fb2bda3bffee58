"""Clients for the external transform and placeholder backends."""

from .transform import TransformClient, create_transform_client, get_transform_client_class
from .placeholder import PillowPlaceholderClient, PlaceholderClient, PlaceholderError
from .remote import get_remote_file_size

__all__ = [
    "TransformClient",
    "create_transform_client",
    "get_transform_client_class",
    "PlaceholderClient",
    "PillowPlaceholderClient",
    "PlaceholderError",
    "get_remote_file_size",
]
