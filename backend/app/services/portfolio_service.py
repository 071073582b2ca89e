"""Portfolio Service — the main-portfolio invariant manager.

Invariants:
    - Store empty => no main portfolio; store non-empty => exactly one main portfolio
    - A main portfolio is never deleted (rejected before any write)
    - Only create and set_main write main_state; update never touches it
    - Every mutating operation runs inside repository.main_invariant_guard():
      one exclusive transaction, committed at the end or rolled back entirely

Design Decisions:
    - Repository injected at construction (PortfolioRepository protocol): routes
      wire the SQL implementation, tests pass an in-memory fake
    - set_main resolves the target BEFORE clearing old mains: a missing target
      fails with 404 and nothing is written
    - Decisions delegated to core/portfolio_rules.py; this module only sequences IO
"""

import logging

from app.core.domain_types import PortfolioId
from app.core.errors import PersistenceError, ResourceNotFoundError, ErrorContext
from app.core.pagination import PageRequest, build_page
from app.core.portfolio_rules import (
    build_new_portfolio,
    check_deletable,
    extract_content_changes,
    is_usable_id,
    plan_main_reassignment,
    select_main,
)
from app.core.record_views import portfolio_summary
from app.core.repository_protocols import PortfolioRepository

logger = logging.getLogger(__name__)


class PortfolioService:
    """Create, update, delete, list and re-designate portfolios."""

    def __init__(self, repository: PortfolioRepository):
        self.repository = repository

    async def _require(self, portfolio_id: PortfolioId) -> dict:
        portfolio = await self.repository.find_by_id(portfolio_id)
        if portfolio is None:
            raise ResourceNotFoundError(
                "Portfolio", str(portfolio_id),
                ErrorContext(resource_id=portfolio_id),
            )
        return portfolio

    async def create(
        self, title: str, content_format: str, content: str,
    ) -> tuple[PortfolioId, bool]:
        """Store a new portfolio. It becomes main only if the store was empty."""
        async with self.repository.main_invariant_guard():
            existing_count = await self.repository.count()
            portfolio_id = await self.repository.save(
                build_new_portfolio(title, content_format, content, existing_count),
            )
            if not is_usable_id(portfolio_id):
                logger.error(
                    f"Portfolio save returned unusable id {portfolio_id!r}",
                    extra={"operation": "create"},
                )
                raise PersistenceError(
                    "Portfolio could not be stored", "create",
                )
            created = await self.repository.find_by_id(portfolio_id)
            if created is None:
                raise PersistenceError(
                    "Stored portfolio could not be read back", "create",
                    ErrorContext(resource_id=portfolio_id),
                )

        logger.info(
            f"Portfolio {portfolio_id} created (main={created['main_state']})",
            extra={"portfolio_id": portfolio_id, "operation": "create"},
        )
        return portfolio_id, created["main_state"]

    async def update(
        self,
        portfolio_id: PortfolioId,
        *,
        title: str | None = None,
        content_format: str | None = None,
        content: str | None = None,
    ) -> PortfolioId:
        """Apply content changes. main_state is not a parameter and is never merged."""
        changes = extract_content_changes({
            "title": title,
            "content_format": content_format,
            "content": content,
        })
        async with self.repository.main_invariant_guard():
            portfolio = await self._require(portfolio_id)
            updated = await self.repository.update(portfolio, changes)

        logger.info(
            f"Portfolio {portfolio_id} updated ({', '.join(sorted(changes)) or 'no fields'})",
            extra={"portfolio_id": portfolio_id, "operation": "update"},
        )
        return PortfolioId(updated["id"])

    async def delete(self, portfolio_id: PortfolioId) -> PortfolioId:
        """Delete a non-main portfolio."""
        async with self.repository.main_invariant_guard():
            portfolio = await self._require(portfolio_id)
            error = check_deletable(portfolio)
            if error:
                logger.error(
                    f"Refused to delete main portfolio {portfolio_id}",
                    extra={
                        "portfolio_id": portfolio_id,
                        "error_code": error.code,
                        "operation": "delete",
                    },
                )
                raise error
            deleted_id = await self.repository.delete_by_id(portfolio_id)

        logger.info(
            f"Portfolio {deleted_id} deleted",
            extra={"portfolio_id": deleted_id, "operation": "delete"},
        )
        return deleted_id

    async def set_main(self, portfolio_id: PortfolioId) -> tuple[PortfolioId, bool]:
        """Move the main designation to portfolio_id, clearing every other main row."""
        async with self.repository.main_invariant_guard():
            target = await self._require(portfolio_id)
            current_mains = await self.repository.find_by_main_state(True)
            by_id = {p["id"]: p for p in current_mains}
            stale_ids = plan_main_reassignment(current_mains, portfolio_id)
            for stale_id in stale_ids:
                await self.repository.update(by_id[stale_id], {"main_state": False})
            updated = await self.repository.update(target, {"main_state": True})

        logger.info(
            f"Portfolio {portfolio_id} set as main (cleared {stale_ids or 'none'})",
            extra={"portfolio_id": portfolio_id, "operation": "set_main"},
        )
        return PortfolioId(updated["id"]), updated["main_state"]

    async def list_page(self, page_request: PageRequest) -> dict:
        """One page of portfolio summaries ordered by creation time."""
        portfolios, total_count = await self.repository.find_all_with_paging(
            page_request.offset, page_request.limit, page_request.order_by,
        )
        return build_page(
            page_request, total_count, [portfolio_summary(p) for p in portfolios],
        )

    async def get_detail(self, portfolio_id: PortfolioId) -> dict:
        return await self._require(portfolio_id)

    async def get_main(self) -> dict:
        """The main portfolio. 404 when the store holds no portfolios."""
        mains = await self.repository.find_by_main_state(True)
        main = select_main(mains)
        if main is None:
            raise ResourceNotFoundError("Main portfolio", "main")
        if len(mains) > 1:
            # Tolerated legacy state; the next set_main clears the extras.
            logger.warning(
                f"{len(mains)} portfolios flagged main; serving {main['id']}",
                extra={"portfolio_id": main["id"], "operation": "get_main"},
            )
        return main
