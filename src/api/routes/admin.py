"""
Admin API Routes - Site Administration Endpoints

Authentication is via Admin API Key, not user sessions.
"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    ListSettingsResponse,
    ListSettingsUseCase,
    SettingResponse,
    UpdateSettingUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


class UpdateSettingRequest(BaseModel):
    """Update setting HTTP request payload"""

    value: bool = Field(..., description="New value of the setting")


@router.get(
    "/settings",
    status_code=status.HTTP_200_OK,
    response_model=ListSettingsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def list_settings(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    List Settings

    Returns the effective value of every site setting.

    Requires: X-Admin-API-Key header
    """
    result = await ListSettingsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.put(
    "/settings/{key}",
    status_code=status.HTTP_200_OK,
    response_model=SettingResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def update_setting(
    key: str,
    request: UpdateSettingRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Setting

    Switches login_with_email or registration_needs_activation.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: SETTING_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    result = await UpdateSettingUseCase(uow).execute(key, request.value)

    if result.is_err():
        error = result.error
        if error.code == "SETTING_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
