import logging
import threading
from enum import Enum
from typing import Any, Callable, Optional

from hotel_admin.i18n import translate

logger = logging.getLogger(__name__)

Navigator = Callable[[str], None]
Scheduler = Callable[[float, Callable[[], None]], Any]

DEFAULT_REDIRECT_DELAY = 2.0


class FormState(str, Enum):
    """Submission lifecycle of an admin form"""
    IDLE = "idle"                # Editable; any error from the last attempt is shown
    SUBMITTING = "submitting"    # Request in flight
    SUCCESS = "success"          # Saved; redirect scheduled
    REDIRECTING = "redirecting"  # Navigation issued (terminal)


class FormError(Exception):
    """Localized, user-facing reason a submission stopped"""
    pass


class FormValidationError(FormError):
    """Raised before any request is sent"""
    pass


class FormSubmitError(FormError):
    """The client did not return a stored record"""
    pass


def timer_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    """Run ``callback`` once after ``delay`` seconds on a daemon timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class AdminForm:
    """
    Draft state plus submit/redirect flow shared by the admin data-entry forms.

    idle -> submitting -> success -> redirecting
                       \\-> idle (with error)

    Subclasses implement ``build_payload`` (validate and assemble, raising
    ``FormValidationError``), ``save`` (call the client) and ``redirect_path``.
    """

    success_message_key = ""
    failure_message_key = "generic_error"

    def __init__(
        self,
        lang: str,
        navigate: Navigator,
        scheduler: Optional[Scheduler] = None,
        redirect_delay: float = DEFAULT_REDIRECT_DELAY,
    ):
        self.lang = lang
        self.navigate = navigate
        self.scheduler = scheduler or timer_scheduler
        self.redirect_delay = redirect_delay
        self.state = FormState.IDLE
        self.error: Optional[str] = None
        self.success: Optional[str] = None
        self.saved_record: Any = None

    def t(self, key: str) -> str:
        return translate(key, self.lang)

    @property
    def loading(self) -> bool:
        return self.state == FormState.SUBMITTING

    def build_payload(self) -> Any:
        raise NotImplementedError

    def save(self, payload: Any) -> Any:
        raise NotImplementedError

    def redirect_path(self, record: Any) -> str:
        raise NotImplementedError

    def success_message(self, record: Any) -> str:
        return self.t(self.success_message_key)

    def submit(self) -> bool:
        """
        Validate, save and schedule the redirect.

        Returns True when the record was saved. Failures leave the form idle with
        a localized ``error``; validation failures never reach the client.
        """
        if self.state != FormState.IDLE:
            logger.warning(f"Ignoring submit while form is {self.state.value}")
            if self.state == FormState.SUBMITTING:
                self.error = self.t("already_submitting")
            return False

        self.error = None
        self.success = None
        self.state = FormState.SUBMITTING

        try:
            payload = self.build_payload()
            logger.debug(f"Submitting {type(self).__name__} payload: {payload}")
            record = self.save(payload)
            if record is None or not getattr(record, "id", None):
                raise FormSubmitError(self.t(self.failure_message_key))
        except FormError as e:
            logger.error(f"Form submission failed: {e}")
            self.error = str(e) or self.t("generic_error")
            self.state = FormState.IDLE
            return False
        except Exception:
            logger.exception("Unexpected error while submitting form")
            self.error = self.t("generic_error")
            self.state = FormState.IDLE
            return False

        self.saved_record = record
        self.error = None
        self.success = self.success_message(record)
        self.state = FormState.SUCCESS
        target = self.redirect_path(record)
        logger.info(f"Saved {type(self).__name__} record {record.id}; redirecting to {target} in {self.redirect_delay}s")
        self.scheduler(self.redirect_delay, lambda: self._redirect(target))
        return True

    def _redirect(self, target: str) -> None:
        self.state = FormState.REDIRECTING
        self.navigate(target)
