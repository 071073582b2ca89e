"""SQL Career Repository — career table behind the TimelineRepository protocol."""

from app.infrastructure.timeline_repository import SqlTimelineRepository
from app.models.career import Career


class SqlCareerRepository(SqlTimelineRepository):
    model = Career
    entry_name = "Career"
    writable = ("company_name", "position", "start_date", "end_date")
