"""Hotel services (restaurant, spa, transfer...): `/api/admin/services`."""
from typing import List

from hotel_admin.clients.base import ResourceClient
from hotel_admin.schemas import IconOption, ServiceItem

DEFAULT_ICON = "utensils"

# Icon identifiers the public site knows how to render
ICON_OPTIONS = [
    ("utensils", "Restaurant"),
    ("cocktail", "Bar"),
    ("swimming-pool", "Pool"),
    ("umbrella-beach", "Beach"),
    ("spa", "Spa"),
    ("dumbbell", "Fitness"),
    ("wifi", "Wi-Fi"),
    ("parking", "Parking"),
    ("shuttle-van", "Transfer"),
    ("concierge-bell", "Room Service"),
    ("child", "Kids Club"),
    ("tshirt", "Laundry"),
]


def get_icon_options() -> List[IconOption]:
    return [IconOption(value=value, label=label) for value, label in ICON_OPTIONS]


class ServicesClient(ResourceClient[ServiceItem]):
    resource_path = "/api/admin/services"
    record_model = ServiceItem
    label = "service"
