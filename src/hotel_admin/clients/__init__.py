"""
Clients for the admin REST API.

One client per resource; each resolves its base URL once and returns neutral
values (empty list, None, False) when a call does not complete.
"""
from hotel_admin.clients.base import FailureKind, ResourceClient
from hotel_admin.clients.room_types import RoomTypesClient
from hotel_admin.clients.services import ServicesClient, get_icon_options

__all__ = [
    "FailureKind",
    "ResourceClient",
    "RoomTypesClient",
    "ServicesClient",
    "get_icon_options",
]
