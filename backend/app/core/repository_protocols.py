"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Records cross the boundary as plain dicts keyed by column name

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy; in-memory
      fakes in tests satisfy the contract without importing the shell
    - Guards are part of the contract: the service decides WHAT is exclusive,
      the repository decides HOW (asyncio lock, advisory lock, transaction)
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from app.core.domain_types import (
    OrderDirection, PersonalInformationId, PortfolioId,
)


class PortfolioRepository(Protocol):
    """Contract for portfolio persistence — implemented by shell.

    Record keys: id, title, content_format, content, main_state,
    created_at, updated_at.
    """
    async def save(self, portfolio: dict) -> PortfolioId: ...
    async def find_by_id(self, portfolio_id: PortfolioId) -> dict | None: ...
    async def find_by_main_state(self, main_state: bool) -> list[dict]: ...
    async def count(self) -> int: ...
    async def update(self, portfolio: dict, changes: dict) -> dict: ...
    async def delete_by_id(self, portfolio_id: PortfolioId) -> PortfolioId: ...
    async def find_all_with_paging(
        self, offset: int, limit: int, order: OrderDirection,
    ) -> tuple[list[dict], int]: ...
    def main_invariant_guard(self) -> AbstractAsyncContextManager[None]: ...


class PersonalInformationRepository(Protocol):
    """Contract for personal information persistence — implemented by shell.

    Record keys: id, name, birth_date, gender, address, email, contact,
    created_at, updated_at.
    """
    async def save(self, personal_information: dict) -> PersonalInformationId: ...
    async def count(self) -> int: ...
    async def get(self) -> dict | None: ...
    async def update(self, personal_information: dict, changes: dict) -> dict: ...
    def singleton_guard(self) -> AbstractAsyncContextManager[None]: ...


class TimelineRepository(Protocol):
    """Contract for dated history entries (career, education) — implemented by shell.

    Record keys: id, the entity's own columns, start_date, end_date,
    created_at, updated_at. find_all orders by start_date, then id.
    """
    async def save(self, entry: dict) -> int: ...
    async def find_by_id(self, entry_id: int) -> dict | None: ...
    async def update(self, entry: dict, changes: dict) -> dict: ...
    async def delete_by_id(self, entry_id: int) -> int: ...
    async def find_all(self) -> list[dict]: ...
    def transaction(self) -> AbstractAsyncContextManager[None]: ...
