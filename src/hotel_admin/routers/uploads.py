from typing import Optional

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    Path,
    Response,
    UploadFile,
    status
)

from hotel_admin.dependencies import get_app_settings, get_storage
from hotel_admin.schemas import RemoveResult, UploadResult
from hotel_admin.settings import Settings
from hotel_admin.storage_adapter import FileUpload, StorageAdapter

router = APIRouter()


@router.post("/uploads", response_model=UploadResult, status_code=status.HTTP_201_CREATED)
def upload_file(
    response: Response,
    file: UploadFile = File(..., description="The file to store"),
    path: str = Form(..., description="Destination prefix, e.g. services/spa"),
    max_size_bytes: Optional[int] = Form(None, description="Override the configured size limit"),
    check_file_type: Optional[bool] = Form(None, description="Override the configured type check"),
    settings: Settings = Depends(get_app_settings),
    storage: StorageAdapter = Depends(get_storage),
) -> UploadResult:
    """
    Store an admin upload (service or room image) in the media bucket.

    Args:
        file: The uploaded file
        path: Destination prefix inside the bucket
        max_size_bytes: Size limit; defaults to the configured limit
        check_file_type: Extension check; defaults to the configured flag

    Returns:
        UploadResult: 201 with the public URL, or 400 with the failure message
    """
    content = file.file.read()
    result = storage.upload(
        FileUpload(
            name=file.filename or "",
            content=content,
            content_type=file.content_type,
        ),
        path=path,
        max_size_bytes=max_size_bytes or settings.max_upload_size_bytes,
        check_file_type=settings.check_upload_types if check_file_type is None else check_file_type,
        allowed_file_types=settings.allowed_upload_types,
    )
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result


@router.delete("/uploads/{object_key:path}", response_model=RemoveResult)
def delete_file(
    response: Response,
    object_key: str = Path(..., description="The key of the object to delete"),
    storage: StorageAdapter = Depends(get_storage),
) -> RemoveResult:
    """
    Delete a stored object by key.

    Returns:
        RemoveResult: 200 with the provider response, or 500 with the error text
    """
    result = storage.remove(object_key)
    if not result.success:
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return result
