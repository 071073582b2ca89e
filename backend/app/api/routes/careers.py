"""Career Routes — employment history listed on the portfolio site.

Invariants:
    - Mounted under /api/v1/portfolios/career and registered BEFORE the
      portfolios router, so "career" is never parsed as a portfolio id
    - PATCH sends only changed fields; end_date: null marks the position current
"""

from fastapi import APIRouter, Depends, Path, status

from app.api.dependencies import get_career_service
from app.core.record_views import timeline_entry_view
from app.core.responses import build_response
from app.schemas.career import CareerCreate, CareerUpdate
from app.services.timeline_service import TimelineService

router = APIRouter(prefix="/api/v1/portfolios/career", tags=["career"])

CareerIdPath = Path(ge=1, description="Career id")


@router.get("")
async def list_careers(service: TimelineService = Depends(get_career_service)):
    careers = await service.list_entries()
    return build_response(
        status.HTTP_200_OK, "Career list retrieved",
        {"careers": [timeline_entry_view(c) for c in careers]},
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_career(
    body: CareerCreate,
    service: TimelineService = Depends(get_career_service),
):
    career_id = await service.create(body.model_dump())
    return build_response(status.HTTP_201_CREATED, "Career created", {"id": career_id})


@router.patch("/{career_id}")
async def update_career(
    body: CareerUpdate,
    career_id: int = CareerIdPath,
    service: TimelineService = Depends(get_career_service),
):
    updated_id = await service.update(career_id, body.model_dump(exclude_unset=True))
    return build_response(status.HTTP_200_OK, "Career updated", {"id": updated_id})


@router.delete("/{career_id}")
async def delete_career(
    career_id: int = CareerIdPath,
    service: TimelineService = Depends(get_career_service),
):
    deleted_id = await service.delete(career_id)
    return build_response(status.HTTP_200_OK, "Career deleted", {"id": deleted_id})
