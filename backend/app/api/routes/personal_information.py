"""Personal Information Routes — the site owner's singleton profile.

Invariants:
    - POST succeeds once; later POSTs return 400 PERSONAL_INFORMATION_EXISTS
    - There is no DELETE: the record is only ever updated
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_personal_information_service
from app.core.record_views import personal_information_view
from app.core.responses import build_response
from app.schemas.personal_information import (
    PersonalInformationCreate, PersonalInformationUpdate,
)
from app.services.personal_information_service import PersonalInformationService

router = APIRouter(
    prefix="/api/v1/personal-information", tags=["personal-information"],
)


@router.get("")
async def get_personal_information(
    service: PersonalInformationService = Depends(get_personal_information_service),
):
    record = await service.get()
    return build_response(
        status.HTTP_200_OK, "Personal information retrieved",
        personal_information_view(record),
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_personal_information(
    body: PersonalInformationCreate,
    service: PersonalInformationService = Depends(get_personal_information_service),
):
    record_id = await service.create(body.model_dump())
    return build_response(
        status.HTTP_201_CREATED, "Personal information created", {"id": record_id},
    )


@router.patch("")
async def update_personal_information(
    body: PersonalInformationUpdate,
    service: PersonalInformationService = Depends(get_personal_information_service),
):
    record_id = await service.update(body.model_dump(exclude_none=True))
    return build_response(
        status.HTTP_200_OK, "Personal information updated", {"id": record_id},
    )
