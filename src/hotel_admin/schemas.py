####################################
# --- Records, payloads, results --- #
####################################

from datetime import datetime
from typing import Any, ClassVar, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for records exchanged with the admin REST API (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Partial models only send the fields the caller explicitly set.
    partial: ClassVar[bool] = False

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for a POST/PUT."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=self.partial)


class ApiEnvelope(BaseModel, Generic[T]):
    """`{ success, data?, message? }` wrapper returned by every admin endpoint."""

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None


###################
# --- Room types --- #
###################


class RoomTypeCreate(ApiModel):
    name_tr: str = Field(alias="nameTR")
    name_en: str = Field(alias="nameEN")
    active: bool = True


class RoomTypeUpdate(ApiModel):
    """Partial update; only fields that were explicitly set are sent."""

    partial: ClassVar[bool] = True

    name_tr: Optional[str] = Field(default=None, alias="nameTR")
    name_en: Optional[str] = Field(default=None, alias="nameEN")
    active: Optional[bool] = None


class RoomType(ApiModel):
    id: str
    name_tr: str = Field(alias="nameTR")
    name_en: str = Field(alias="nameEN")
    active: bool = True
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


#################
# --- Services --- #
#################


class ServiceImage(ApiModel):
    url: str
    is_main: bool = Field(default=False, alias="isMain")


class ServiceItemCreate(ApiModel):
    title_tr: str = Field(alias="titleTR")
    title_en: str = Field(alias="titleEN")
    description_tr: str = Field(default="", alias="descriptionTR")
    description_en: str = Field(default="", alias="descriptionEN")
    details_tr: List[str] = Field(default_factory=list, alias="detailsTR")
    details_en: List[str] = Field(default_factory=list, alias="detailsEN")
    icon: str = "utensils"
    active: bool = True
    image: str = ""
    images: List[ServiceImage] = Field(default_factory=list)


class ServiceItemUpdate(ApiModel):
    partial: ClassVar[bool] = True

    title_tr: Optional[str] = Field(default=None, alias="titleTR")
    title_en: Optional[str] = Field(default=None, alias="titleEN")
    description_tr: Optional[str] = Field(default=None, alias="descriptionTR")
    description_en: Optional[str] = Field(default=None, alias="descriptionEN")
    details_tr: Optional[List[str]] = Field(default=None, alias="detailsTR")
    details_en: Optional[List[str]] = Field(default=None, alias="detailsEN")
    icon: Optional[str] = None
    active: Optional[bool] = None
    image: Optional[str] = None
    images: Optional[List[ServiceImage]] = None


class ServiceItem(ServiceItemCreate):
    id: str
    order: Optional[int] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class IconOption(BaseModel):
    value: str
    label: str


########################
# --- Storage results --- #
########################


class UploadResult(BaseModel):
    """Outcome of a single upload; `file_url` is empty unless `success` is true."""

    success: bool = Field(description="Whether the object was stored.")
    file_url: str = Field(
        default="",
        description="Public URL of the stored object.",
        json_schema_extra={"example": "https://media.s3.tebi.io/services/spa/main_photo.jpg"},
    )
    message: Optional[str] = Field(default=None, description="Human-readable failure reason.")


class RemoveResult(BaseModel):
    """Outcome of a single delete; carries the provider response or the error text."""

    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
