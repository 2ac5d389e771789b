"""Add-service form: bilingual texts and detail lists; images come later in the gallery editor."""
from typing import Any, List, Optional

from hotel_admin.clients.services import DEFAULT_ICON, ServicesClient, get_icon_options
from hotel_admin.forms.base import (
    DEFAULT_REDIRECT_DELAY,
    AdminForm,
    FormValidationError,
    Navigator,
    Scheduler,
)
from hotel_admin.schemas import IconOption, ServiceItem, ServiceItemCreate

LANGS = ("TR", "EN")
TEXT_FIELDS = ("title_tr", "title_en", "description_tr", "description_en", "icon")


class ServiceForm(AdminForm):
    success_message_key = "service_added"
    failure_message_key = "service_add_failed"

    def __init__(
        self,
        client: ServicesClient,
        lang: str,
        navigate: Navigator,
        scheduler: Optional[Scheduler] = None,
        redirect_delay: float = DEFAULT_REDIRECT_DELAY,
    ):
        super().__init__(lang, navigate, scheduler=scheduler, redirect_delay=redirect_delay)
        self.client = client
        self.title_tr = ""
        self.title_en = ""
        self.description_tr = ""
        self.description_en = ""
        # One empty entry per language so the editor always shows an input
        self.details = {"TR": [""], "EN": [""]}
        self.icon = DEFAULT_ICON
        self.active = True

    @property
    def icon_options(self) -> List[IconOption]:
        return get_icon_options()

    def set_field(self, name: str, value: Any) -> None:
        if name == "active":
            self.active = bool(value)
        elif name in TEXT_FIELDS:
            setattr(self, name, value)
        else:
            raise KeyError(f"Unknown service form field: {name}")

    def _detail_list(self, lang: str) -> List[str]:
        key = lang.upper()
        if key not in LANGS:
            raise KeyError(f"Unknown detail language: {lang}")
        return self.details[key]

    def set_detail(self, lang: str, index: int, value: str) -> None:
        self._detail_list(lang)[index] = value

    def add_detail(self, lang: str) -> None:
        self._detail_list(lang).append("")

    def remove_detail(self, lang: str, index: int) -> None:
        del self._detail_list(lang)[index]

    @staticmethod
    def _non_empty(entries: List[str]) -> List[str]:
        return [entry for entry in entries if entry.strip()]

    def build_payload(self) -> ServiceItemCreate:
        if not self.title_tr or not self.title_en:
            raise FormValidationError(self.t("title_required"))

        return ServiceItemCreate(
            title_tr=self.title_tr,
            title_en=self.title_en,
            description_tr=self.description_tr,
            description_en=self.description_en,
            details_tr=self._non_empty(self.details["TR"]),
            details_en=self._non_empty(self.details["EN"]),
            icon=self.icon,
            active=self.active,
            image="",
            images=[],
        )

    def save(self, payload: ServiceItemCreate) -> Optional[ServiceItem]:
        return self.client.add(payload)

    def redirect_path(self, record: ServiceItem) -> str:
        return f"/{self.lang}/admin/services/gallery/{record.id}"
