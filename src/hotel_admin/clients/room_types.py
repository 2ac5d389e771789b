"""Room types: `/api/admin/room-types`."""
from hotel_admin.clients.base import ResourceClient
from hotel_admin.schemas import RoomType


class RoomTypesClient(ResourceClient[RoomType]):
    resource_path = "/api/admin/room-types"
    record_model = RoomType
    label = "room type"
