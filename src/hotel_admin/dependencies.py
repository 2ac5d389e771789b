from fastapi import Request

from hotel_admin.settings import Settings
from hotel_admin.storage_adapter import StorageAdapter


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


def get_storage(request: Request) -> StorageAdapter:
    """Storage adapter shared by every request of this app."""
    return request.app.state.storage


def get_api_base_url(request: Request) -> str:
    """Admin API host, resolved once when the app was created."""
    return request.app.state.api_base_url
