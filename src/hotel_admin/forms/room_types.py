"""Add or edit a room type."""
from typing import Optional, Union

from hotel_admin.clients.room_types import RoomTypesClient
from hotel_admin.forms.base import (
    DEFAULT_REDIRECT_DELAY,
    AdminForm,
    FormValidationError,
    Navigator,
    Scheduler,
)
from hotel_admin.schemas import RoomType, RoomTypeCreate, RoomTypeUpdate


class RoomTypeForm(AdminForm):
    """
    Bilingual room type names plus the active flag.

    With ``room_type`` given the form edits that record (partial update),
    otherwise it creates a new one. Both cases return to the room type list.
    """

    failure_message_key = "room_type_save_failed"

    def __init__(
        self,
        client: RoomTypesClient,
        lang: str,
        navigate: Navigator,
        room_type: Optional[RoomType] = None,
        scheduler: Optional[Scheduler] = None,
        redirect_delay: float = DEFAULT_REDIRECT_DELAY,
    ):
        super().__init__(lang, navigate, scheduler=scheduler, redirect_delay=redirect_delay)
        self.client = client
        self.room_type_id = room_type.id if room_type else None
        self.name_tr = room_type.name_tr if room_type else ""
        self.name_en = room_type.name_en if room_type else ""
        self.active = room_type.active if room_type else True

    @property
    def editing(self) -> bool:
        return self.room_type_id is not None

    @property
    def success_message_key(self) -> str:
        return "room_type_updated" if self.editing else "room_type_added"

    def build_payload(self) -> Union[RoomTypeCreate, RoomTypeUpdate]:
        if not self.name_tr or not self.name_en:
            raise FormValidationError(self.t("name_required"))
        if self.editing:
            return RoomTypeUpdate(name_tr=self.name_tr, name_en=self.name_en, active=self.active)
        return RoomTypeCreate(name_tr=self.name_tr, name_en=self.name_en, active=self.active)

    def save(self, payload: Union[RoomTypeCreate, RoomTypeUpdate]) -> Optional[RoomType]:
        if self.editing:
            return self.client.update(self.room_type_id, payload)
        return self.client.add(payload)

    def redirect_path(self, record: RoomType) -> str:
        return f"/{self.lang}/admin/room-types"
