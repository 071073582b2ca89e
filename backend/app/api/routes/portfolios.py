"""Portfolio Routes — CRUD, listing and main designation for portfolio entries.

Invariants:
    - Every success body is the {"statusCode", "message", "data"} envelope
    - Request bodies validated by Pydantic before reaching the handler
    - /main is registered before /{portfolio_id} so it is never parsed as an id
    - Handlers never touch main_state; PortfolioService owns it

Design Decisions:
    - Thin routes delegate to PortfolioService (ADR: impureim sandwich)
    - order_by accepted case-insensitively, normalized to OrderDirection here
"""

import logging

from fastapi import APIRouter, Depends, Path, Query, status

from app.api.dependencies import get_portfolio_service
from app.config import get_settings
from app.core.domain_types import OrderDirection, PortfolioId
from app.core.pagination import PageRequest
from app.core.record_views import portfolio_detail
from app.core.responses import build_response
from app.schemas.portfolio import PortfolioCreate, PortfolioUpdate
from app.services.portfolio_service import PortfolioService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/portfolios", tags=["portfolios"])

PortfolioIdPath = Path(ge=1, description="Portfolio id")


@router.get("")
async def list_portfolios(
    page_number: int = Query(1, ge=1),
    per_page_size: int | None = Query(None, ge=1),
    order_by: str = Query("DESC", pattern=r"^(?i:asc|desc)$"),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """List portfolios, newest first by default."""
    settings = get_settings()
    size = min(per_page_size or settings.default_page_size, settings.max_page_size)
    page = await service.list_page(
        PageRequest(
            page_number=page_number,
            per_page_size=size,
            order_by=OrderDirection(order_by.upper()),
        ),
    )
    return build_response(status.HTTP_200_OK, "Portfolio list retrieved", page)


@router.get("/main")
async def get_main_portfolio(
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Get the portfolio currently designated main."""
    portfolio = await service.get_main()
    return build_response(
        status.HTTP_200_OK, "Main portfolio retrieved", portfolio_detail(portfolio),
    )


@router.get("/{portfolio_id}")
async def get_portfolio(
    portfolio_id: int = PortfolioIdPath,
    service: PortfolioService = Depends(get_portfolio_service),
):
    portfolio = await service.get_detail(PortfolioId(portfolio_id))
    return build_response(
        status.HTTP_200_OK, "Portfolio retrieved", portfolio_detail(portfolio),
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_portfolio(
    body: PortfolioCreate,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Create a portfolio. The first one ever created becomes main."""
    portfolio_id, main_state = await service.create(
        body.title, body.content_format, body.content,
    )
    return build_response(
        status.HTTP_201_CREATED, "Portfolio created",
        {"id": portfolio_id, "main_state": main_state},
    )


@router.patch("/{portfolio_id}")
async def update_portfolio(
    body: PortfolioUpdate,
    portfolio_id: int = PortfolioIdPath,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Update title, content format and/or content. Main designation is unchanged."""
    updated_id = await service.update(
        PortfolioId(portfolio_id),
        title=body.title,
        content_format=body.content_format,
        content=body.content,
    )
    return build_response(status.HTTP_200_OK, "Portfolio updated", {"id": updated_id})


@router.patch("/{portfolio_id}/main-state")
async def set_main_portfolio(
    portfolio_id: int = PortfolioIdPath,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Designate this portfolio as main; the previous main is cleared."""
    main_id, main_state = await service.set_main(PortfolioId(portfolio_id))
    return build_response(
        status.HTTP_200_OK, "Main portfolio set",
        {"id": main_id, "main_state": main_state},
    )


@router.delete("/{portfolio_id}")
async def delete_portfolio(
    portfolio_id: int = PortfolioIdPath,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Delete a portfolio. The main portfolio cannot be deleted (400)."""
    deleted_id = await service.delete(PortfolioId(portfolio_id))
    return build_response(status.HTTP_200_OK, "Portfolio deleted", {"id": deleted_id})
