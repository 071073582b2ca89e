"""Education Routes — school history listed on the portfolio site.

Invariants:
    - Mounted under /api/v1/portfolios/education, registered before the portfolios router
    - PATCH sends only changed fields; degree or end_date may be cleared with null
"""

from fastapi import APIRouter, Depends, Path, status

from app.api.dependencies import get_education_service
from app.core.record_views import timeline_entry_view
from app.core.responses import build_response
from app.schemas.education import EducationCreate, EducationUpdate
from app.services.timeline_service import TimelineService

router = APIRouter(prefix="/api/v1/portfolios/education", tags=["education"])

EducationIdPath = Path(ge=1, description="Education id")


@router.get("")
async def list_educations(service: TimelineService = Depends(get_education_service)):
    educations = await service.list_entries()
    return build_response(
        status.HTTP_200_OK, "Education list retrieved",
        {"educations": [timeline_entry_view(e) for e in educations]},
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_education(
    body: EducationCreate,
    service: TimelineService = Depends(get_education_service),
):
    education_id = await service.create(body.model_dump())
    return build_response(
        status.HTTP_201_CREATED, "Education created", {"id": education_id},
    )


@router.patch("/{education_id}")
async def update_education(
    body: EducationUpdate,
    education_id: int = EducationIdPath,
    service: TimelineService = Depends(get_education_service),
):
    updated_id = await service.update(education_id, body.model_dump(exclude_unset=True))
    return build_response(status.HTTP_200_OK, "Education updated", {"id": updated_id})


@router.delete("/{education_id}")
async def delete_education(
    education_id: int = EducationIdPath,
    service: TimelineService = Depends(get_education_service),
):
    deleted_id = await service.delete(education_id)
    return build_response(status.HTTP_200_OK, "Education deleted", {"id": deleted_id})
