"""
Storage adapter for media uploads to an S3-compatible bucket (Tebi by default).

Validates size and type, normalizes file names, and turns every failure into an
`UploadResult` / `RemoveResult` instead of raising, so callers only branch on
``result.success``.
"""

import logging
import re
import unicodedata
from typing import Iterable, Optional

import boto3
from botocore.config import Config
from pydantic import BaseModel

from hotel_admin.s3.delete_objects import delete_s3_object
from hotel_admin.s3.write_objects import upload_s3_object
from hotel_admin.schemas import RemoveResult, UploadResult
from hotel_admin.settings import Settings
from hotel_admin.utils.decorators import log_storage_call

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

logger = logging.getLogger(__name__)

GENERIC_CONTENT_TYPE = "application/octet-stream"
SLUG_SEPARATOR = "_"

MIME_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "mp4": "video/mp4",
    "webm": "video/webm",
    "ogg": "video/ogg",
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "pdf": "application/pdf",
    "txt": "text/plain",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "zip": "application/zip",
    "rar": "application/x-rar-compressed",
    "7z": "application/x-7z-compressed",
    "ico": "image/x-icon",
}

# Letters NFKD cannot decompose into an ASCII base character
_TRANSLITERATE = str.maketrans({
    "ı": "i",
    "ß": "ss",
    "æ": "ae",
    "Æ": "AE",
    "ø": "o",
    "Ø": "O",
    "đ": "d",
    "Đ": "D",
    "ł": "l",
    "Ł": "L",
    "œ": "oe",
    "Œ": "OE",
})
_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_UNSAFE_KEY_CHARS = re.compile(r"[^a-zA-Z0-9\-_/.]")


class StorageError(Exception):
    """Base class for failures detected before the store is called."""


class StorageConfigurationError(StorageError):
    def __init__(self):
        super().__init__("Storage service configuration is missing. Please contact your administrator.")


class FileTooLargeError(StorageError):
    def __init__(self, max_size_bytes: int):
        self.max_size_bytes = max_size_bytes
        super().__init__(f"File is too large. Maximum file size: {bytes_to_whole_mb(max_size_bytes)}MB")


class UnsupportedFileTypeError(StorageError):
    def __init__(self, allowed_file_types: Iterable[str]):
        self.allowed_file_types = list(allowed_file_types)
        super().__init__(f"Unsupported file type. Allowed file types: {', '.join(self.allowed_file_types)}")


class InvalidUploadPathError(StorageError):
    def __init__(self):
        super().__init__("Upload path must not be empty.")


class FileUpload(BaseModel):
    """A file received from a form: its original name, bytes and declared type."""

    name: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)


def bytes_to_whole_mb(size_bytes: int) -> int:
    """Bytes to mebibytes, rounded half up."""
    return int(size_bytes / (1024 * 1024) + 0.5)


def slugify(text: str, separator: str = SLUG_SEPARATOR) -> str:
    """
    Lowercase ASCII slug: accents dropped, every run of other characters
    collapsed into a single separator, no separator at either end.

    Slugifying a slug returns it unchanged.
    """
    text = text.translate(_TRANSLITERATE)
    text = unicodedata.normalize("NFKD", text)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    return _NON_ALNUM.sub(separator, text).strip(separator)


def get_extension(file_name: str) -> str:
    """Lowercased text after the last dot; the whole name when there is no dot."""
    return file_name.rsplit(".", 1)[-1].lower()


def safe_file_name(file_name: str, separator: str = SLUG_SEPARATOR) -> str:
    """Slugify the stem and the extension separately so the extension survives."""
    stem, dot, extension = file_name.strip().rpartition(".")
    if not dot or not stem:
        return slugify(file_name, separator) or "file"
    stem_slug = slugify(stem, separator) or "file"
    extension_slug = slugify(extension, separator)
    return f"{stem_slug}.{extension_slug}" if extension_slug else stem_slug


def get_mime_type(extension: str) -> str:
    return MIME_TYPES.get(extension.lower(), GENERIC_CONTENT_TYPE)


def resolve_content_type(declared: Optional[str], file_name: str) -> str:
    """Use the declared type unless it is missing or generic; then look at the extension."""
    if declared and declared != GENERIC_CONTENT_TYPE:
        return declared
    if "." not in file_name:
        return GENERIC_CONTENT_TYPE
    return get_mime_type(get_extension(file_name))


def sanitize_object_key(object_key: str) -> str:
    """Replace every character outside [A-Za-z0-9-_/.] with a dash."""
    return _UNSAFE_KEY_CHARS.sub("-", object_key)


def build_object_key(path: str, file_name: str) -> str:
    return f"{path.rstrip('/')}/{file_name}"


class StorageAdapter:
    """Upload and delete objects in the configured bucket."""

    def __init__(self, settings: Settings, s3_client: Optional["S3Client"] = None):
        self.settings = settings
        self._s3_client = s3_client
        logger.info(
            "Storage adapter configured: "
            f"endpoint={settings.storage_endpoint_url} bucket={settings.storage_bucket} "
            f"key_provided={bool(settings.storage_access_key)} "
            f"secret_provided={bool(settings.storage_secret_key)}"
        )

    @property
    def s3_client(self) -> "S3Client":
        """Client built once from settings; retries are left to botocore."""
        if self._s3_client is None:
            self._ensure_configured()
            logger.info("Creating S3 client for object storage")
            self._s3_client = boto3.client(
                "s3",
                region_name=self.settings.storage_region,
                endpoint_url=self.settings.storage_endpoint_url,
                aws_access_key_id=self.settings.storage_access_key,
                aws_secret_access_key=self.settings.storage_secret_key,
                config=Config(
                    s3={"addressing_style": "path"},
                    retries={"total_max_attempts": self.settings.storage_max_attempts, "mode": "standard"},
                ),
            )
        return self._s3_client

    def public_url(self, object_key: str) -> str:
        return f"https://{self.settings.storage_bucket}.{self.settings.storage_public_host}/{object_key}"

    def _ensure_configured(self) -> None:
        if not self.settings.storage_configured:
            logger.error(
                "Storage configuration incomplete: "
                f"key_provided={bool(self.settings.storage_access_key)} "
                f"secret_provided={bool(self.settings.storage_secret_key)} "
                f"bucket_provided={bool(self.settings.storage_bucket)}"
            )
            raise StorageConfigurationError()

    def _validate(
        self,
        file: FileUpload,
        path: str,
        max_size_bytes: Optional[int],
        check_file_type: bool,
        allowed_file_types: Optional[Iterable[str]],
    ) -> None:
        """Raise the first failed precondition, checked in a fixed order."""
        self._ensure_configured()

        if max_size_bytes and file.size > max_size_bytes:
            raise FileTooLargeError(max_size_bytes)

        allowed = [ext.lower().lstrip(".") for ext in (allowed_file_types or [])]
        if check_file_type and allowed and get_extension(file.name) not in allowed:
            raise UnsupportedFileTypeError(allowed)

        if not path or not path.strip("/ "):
            raise InvalidUploadPathError()

    @log_storage_call("upload")
    def upload(
        self,
        file: FileUpload,
        path: str,
        max_size_bytes: Optional[int] = None,
        check_file_type: bool = False,
        allowed_file_types: Optional[Iterable[str]] = None,
    ) -> UploadResult:
        """
        Store ``file`` under ``path`` and return its public URL.

        Args:
            file: Name, bytes and declared content type of the upload
            path: Destination prefix inside the bucket, e.g. "services/spa"
            max_size_bytes: Reject files larger than this
            check_file_type: Enforce ``allowed_file_types`` on the extension
            allowed_file_types: Extensions such as ["jpg", "png"]

        Returns:
            UploadResult with ``file_url`` set on success, ``message`` on failure
        """
        try:
            self._validate(file, path, max_size_bytes, check_file_type, allowed_file_types)
        except StorageError as e:
            logger.warning(f"Upload rejected for '{file.name}': {e}")
            return UploadResult(success=False, file_url="", message=str(e))

        file_name = safe_file_name(file.name)
        content_type = resolve_content_type(file.content_type, file_name)
        object_key = build_object_key(path, file_name)
        logger.info(f"Uploading '{file.name}' as '{object_key}' ({content_type}, {file.size} bytes)")

        try:
            response = upload_s3_object(
                bucket_name=self.settings.storage_bucket,
                object_key=object_key,
                file_content=file.content,
                content_type=content_type,
                s3_client=self.s3_client,
            )
            logger.debug(f"PutObject response: {response}")
        except Exception as e:
            logger.error(f"Error uploading '{object_key}' to object storage: {str(e)}")
            return UploadResult(
                success=False,
                file_url="",
                message=str(e) or "Unexpected error while uploading the file",
            )

        file_url = self.public_url(object_key)
        logger.info(f"Upload complete: {file_url}")
        return UploadResult(success=True, file_url=file_url)

    @log_storage_call("delete")
    def remove(self, object_key: str) -> RemoveResult:
        """Delete a stored object by key; missing keys are left to the store's semantics."""
        try:
            self._ensure_configured()
            sanitized_key = sanitize_object_key(object_key)
            logger.info(f"Deleting object '{sanitized_key}'")
            response = delete_s3_object(
                bucket_name=self.settings.storage_bucket,
                object_key=sanitized_key,
                s3_client=self.s3_client,
            )
        except Exception as e:
            logger.error(f"Error deleting '{object_key}' from object storage: {str(e)}")
            return RemoveResult(success=False, error=str(e))

        logger.info(f"Deleted object '{sanitized_key}'")
        return RemoveResult(success=True, data=response)
