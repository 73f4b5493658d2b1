"""
Admin API Key Authentication

Guards the settings endpoints used by the back office. Site users never
see these routes; their sessions are not accepted here.
"""

import secrets

from fastapi import Header, status
from libs.result import Error
from src.api.error import ClientError
from config import ApplicationConfig


async def verify_admin_api_key(
    x_admin_api_key: str = Header(None, alias="X-Admin-API-Key"),
) -> bool:
    """
    Check the X-Admin-API-Key header against ADMIN_API_KEY.

    Raises:
        ClientError: 401 UNAUTHORIZED when the header is missing,
                     401 INVALID_API_KEY when it does not match
    """
    if not x_admin_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "Admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not secrets.compare_digest(x_admin_api_key, ApplicationConfig.ADMIN_API_KEY):
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid admin API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
