from fastapi import Request

from nrc.config import Settings
from nrc.storage import Store


def get_store(request: Request) -> Store:
    """FastAPI dependency returning the store opened at startup."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
