"""REST client base for one `/api/admin/*` resource."""
import logging
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ValidationError

from hotel_admin.schemas import ApiEnvelope, ApiModel
from hotel_admin.settings import Settings, resolve_base_url

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class FailureKind(str, Enum):
    """Why the last operation returned a neutral value."""
    NOT_FOUND = "not_found"   # HTTP 404
    TRANSPORT = "transport"   # connection error, timeout, non-2xx status
    BACKEND = "backend"       # unreadable body or `success: false`


class ResourceClientError(Exception):
    """Raised inside a client call; never escapes the public operations."""

    def __init__(self, kind: FailureKind, message: str):
        super().__init__(message)
        self.kind = kind


class ResourceClient(Generic[RecordT]):
    """
    CRUD operations against one admin REST resource.

    Every public operation returns a neutral value (``[]``, ``None`` or ``False``)
    when it does not complete; the reason is logged and kept in ``last_failure``.
    """

    resource_path: str = ""
    record_model: Type[RecordT]
    label: str = "record"

    def __init__(
        self,
        settings: Settings,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            settings: Application settings
            base_url: Explicit API host; resolved from settings when omitted
            session: Optional requests session (shared connection pool)
        """
        self.base_url = (base_url or resolve_base_url(settings)).rstrip("/")
        self.timeout = settings.api_timeout
        self.session = session or requests.Session()
        self.last_failure: Optional[FailureKind] = None

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.resource_path}"

    def _request(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Issue one request and return the decoded envelope of a 2xx response."""
        headers = {"Content-Type": "application/json"}
        if method == "GET":
            headers["Cache-Control"] = "no-store"

        logger.info(f"Making {method} request to {url}")
        if payload is not None:
            logger.debug(f"Request data: {payload}")

        try:
            response = self.session.request(
                method,
                url,
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ResourceClientError(FailureKind.TRANSPORT, f"{method} {url} failed: {e}") from e

        if response.status_code == 404:
            raise ResourceClientError(FailureKind.NOT_FOUND, f"{method} {url} returned 404")
        if not response.ok:
            raise ResourceClientError(
                FailureKind.TRANSPORT, f"{method} {url} returned HTTP {response.status_code}"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ResourceClientError(FailureKind.BACKEND, f"{method} {url} returned a non-JSON body") from e
        if not isinstance(body, dict):
            raise ResourceClientError(FailureKind.BACKEND, f"{method} {url} returned an unexpected body")
        return body

    def _call(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        """Request, check the envelope and return its ``data``."""
        body = self._request(method, url, payload)
        try:
            envelope = ApiEnvelope[Any].model_validate(body)
        except ValidationError as e:
            raise ResourceClientError(FailureKind.BACKEND, f"Malformed envelope: {e}") from e
        if not envelope.success:
            raise ResourceClientError(FailureKind.BACKEND, f"API error: {envelope.message}")
        return envelope.data

    def _parse(self, data: Any) -> RecordT:
        try:
            return self.record_model.model_validate(data)
        except ValidationError as e:
            raise ResourceClientError(FailureKind.BACKEND, f"Malformed {self.label}: {e}") from e

    def _fail(self, error: ResourceClientError, context: str) -> None:
        self.last_failure = error.kind
        logger.error(f"{context}: {error}")

    @staticmethod
    def _as_payload(values: Union[ApiModel, Dict[str, Any]]) -> Dict[str, Any]:
        if isinstance(values, ApiModel):
            return values.to_payload()
        return dict(values)

    def list(self) -> List[RecordT]:
        """All records, or an empty list."""
        self.last_failure = None
        try:
            data = self._call("GET", self.url)
            return [self._parse(item) for item in (data or [])]
        except ResourceClientError as e:
            self._fail(e, f"Error fetching {self.label} list")
            return []

    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        """The record with ``record_id``, or None."""
        self.last_failure = None
        try:
            data = self._call("GET", f"{self.url}/{record_id}")
            if data is None:
                raise ResourceClientError(FailureKind.NOT_FOUND, f"{self.label} {record_id} has no data")
            return self._parse(data)
        except ResourceClientError as e:
            self._fail(e, f"Error fetching {self.label} (ID: {record_id})")
            return None

    def add(self, values: Union[ApiModel, Dict[str, Any]]) -> Optional[RecordT]:
        """Create a record; the backend assigns its id. Returns the stored record, or None."""
        self.last_failure = None
        try:
            data = self._call("POST", self.url, self._as_payload(values))
            return self._parse(data)
        except ResourceClientError as e:
            self._fail(e, f"Error adding {self.label}")
            return None

    def update(self, record_id: str, values: Union[ApiModel, Dict[str, Any]]) -> Optional[RecordT]:
        """Partially update a record. Returns the stored record, or None."""
        self.last_failure = None
        try:
            data = self._call("PUT", f"{self.url}/{record_id}", self._as_payload(values))
            return self._parse(data)
        except ResourceClientError as e:
            self._fail(e, f"Error updating {self.label} (ID: {record_id})")
            return None

    def delete(self, record_id: str) -> bool:
        self.last_failure = None
        try:
            self._call("DELETE", f"{self.url}/{record_id}")
            return True
        except ResourceClientError as e:
            self._fail(e, f"Error deleting {self.label} (ID: {record_id})")
            return False

    def toggle_visibility(self, record_id: str) -> bool:
        """
        Flip the ``active`` flag: one read, then one partial update.

        Not atomic; a change made by someone else between the two calls is
        overwritten.
        """
        record = self.get_by_id(record_id)
        if record is None:
            return False
        updated = self.update(record_id, {"active": not record.active})
        return updated is not None
