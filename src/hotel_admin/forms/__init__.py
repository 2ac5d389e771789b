from hotel_admin.forms.base import (
    AdminForm,
    FormError,
    FormState,
    FormSubmitError,
    FormValidationError,
    timer_scheduler,
)
from hotel_admin.forms.room_types import RoomTypeForm
from hotel_admin.forms.services import ServiceForm

__all__ = [
    "AdminForm",
    "FormError",
    "FormState",
    "FormSubmitError",
    "FormValidationError",
    "RoomTypeForm",
    "ServiceForm",
    "timer_scheduler",
]
