"""SQL Education Repository — education table behind the TimelineRepository protocol."""

from app.infrastructure.timeline_repository import SqlTimelineRepository
from app.models.education import Education


class SqlEducationRepository(SqlTimelineRepository):
    model = Education
    entry_name = "Education"
    writable = ("school_name", "major", "degree", "start_date", "end_date")
