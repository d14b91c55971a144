import logging
from datetime import datetime
from typing import Callable

from marketplace.errors import NotFound, ValidationError
from marketplace.schemas.dashboard import CustomerDashboard
from marketplace.schemas.job_request import JobRequestCreate, JobRequestResponse
from marketplace.services import parse_input
from marketplace.storage import Store
from marketplace.utils.timefmt import format_timestamp, parse_timestamp, relative_time, utcnow

logger = logging.getLogger(__name__)

TABLE = "job_requests"


def _no_constraint(value: str | None) -> bool:
    return value is None or value.strip().lower() in ("", "all")


def _field(job, name: str):
    return job[name] if isinstance(job, dict) else getattr(job, name)


def filter_job_requests(jobs, job_type: str | None = None, location: str | None = None,
                        search: str | None = None) -> list:
    """
    Browse-view filtering. ``job_type`` must match exactly, ``location`` is a
    case-insensitive substring, ``search`` is a case-insensitive substring of
    title or description. ``None``, ``""`` and ``"all"`` leave a filter off.
    """
    results = []
    needle_location = None if _no_constraint(location) else location.strip().lower()
    needle_search = None if _no_constraint(search) else search.strip().lower()
    for job in jobs:
        if not _no_constraint(job_type) and _field(job, "job_type") != job_type.strip():
            continue
        if needle_location and needle_location not in (_field(job, "location") or "").lower():
            continue
        if needle_search and not any(
            needle_search in (_field(job, name) or "").lower() for name in ("title", "description")
        ):
            continue
        results.append(job)
    return results


class JobRequestService:
    def __init__(self, store: Store, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def _decorate(self, row: dict, now: datetime) -> JobRequestResponse:
        quote_count = self.store.count("quotes", {"job_request_id": row["id"]})
        posted = relative_time(now, parse_timestamp(row["created_at"]))
        return JobRequestResponse(**row, quotes=quote_count, posted_date=posted)

    def create(self, data: JobRequestCreate | dict) -> JobRequestResponse:
        req = parse_input(JobRequestCreate, data)
        if not req.user_id:
            raise ValidationError("user_id is required")
        now = self.clock()
        if req.start_date is not None and req.start_date < now.date():
            raise ValidationError("start_date cannot be in the past")

        record = req.model_dump(mode="json")
        record["created_at"] = format_timestamp(now)
        row = self.store.insert(TABLE, record)
        logger.info("Job request %s created by user %s", row["id"], row["user_id"])
        return self._decorate(row, now)

    def get_by_id(self, job_request_id: int) -> JobRequestResponse:
        row = self.store.select_one(TABLE, {"id": job_request_id})
        if not row:
            raise NotFound(f"Job request {job_request_id} not found")
        return self._decorate(row, self.clock())

    def list_by_user(self, user_id: str) -> list[JobRequestResponse]:
        rows = self.store.select_all(TABLE, {"user_id": user_id}, order_by="created_at")
        now = self.clock()
        return [self._decorate(r, now) for r in rows]

    def summary_for_user(self, user_id: str) -> CustomerDashboard:
        jobs = self.list_by_user(user_id)
        return CustomerDashboard(
            job_requests=len(jobs),
            quotes_received=sum(j.quotes for j in jobs),
        )

    def list(self) -> list[JobRequestResponse]:
        rows = self.store.select_all(TABLE, order_by="created_at")
        now = self.clock()
        return [self._decorate(r, now) for r in rows]
