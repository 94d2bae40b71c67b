# taskflow/api/deps.py

from fastapi import Depends, Request
from taskflow.config import Settings
from taskflow.core.identity import authenticate


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user_id(request: Request, settings: Settings = Depends(get_settings)) -> str:
    """
    Resolves the caller's user id from the bearer token on the request.
    """
    return authenticate(request.headers.get("Authorization"), settings)
