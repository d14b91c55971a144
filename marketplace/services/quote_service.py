import logging
from datetime import datetime
from typing import Callable

from marketplace.errors import Conflict, NotFound, ValidationError
from marketplace.schemas.dashboard import ProviderDashboard
from marketplace.schemas.job_request import JobRequestBrief
from marketplace.schemas.provider import ProviderPublic
from marketplace.schemas.quote import QuoteCreate, QuoteResponse, QuoteStatus
from marketplace.services import parse_input
from marketplace.storage import Store
from marketplace.utils.timefmt import format_timestamp, utcnow

logger = logging.getLogger(__name__)

TABLE = "quotes"

DECISIONS = {QuoteStatus.ACCEPTED.value, QuoteStatus.REJECTED.value}


class QuoteService:
    def __init__(self, store: Store, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def _require_job_request(self, job_request_id: int) -> dict:
        job = self.store.select_one("job_requests", {"id": job_request_id})
        if not job:
            raise NotFound(f"Job request {job_request_id} not found")
        return job

    def _require_provider(self, provider_id: str) -> dict:
        provider = self.store.select_one("providers", {"id": provider_id})
        if not provider:
            raise NotFound(f"Provider {provider_id} not found")
        return provider

    def submit(self, data: QuoteCreate | dict) -> QuoteResponse:
        req = parse_input(QuoteCreate, data)
        if not req.provider_id:
            raise ValidationError("provider_id is required")
        self._require_job_request(req.job_request_id)
        self._require_provider(req.provider_id)

        record = req.model_dump()
        record["status"] = QuoteStatus.PENDING.value
        record["created_at"] = format_timestamp(self.clock())
        row = self.store.insert(TABLE, record)
        logger.info(
            "Quote %s submitted by provider %s for job request %s",
            row["id"], row["provider_id"], row["job_request_id"],
        )
        return QuoteResponse(**row)

    def get_by_id(self, quote_id: int) -> QuoteResponse:
        row = self.store.select_one(TABLE, {"id": quote_id})
        if not row:
            raise NotFound(f"Quote {quote_id} not found")
        return QuoteResponse(**row)

    def list_by_job_request(self, job_request_id: int) -> list[QuoteResponse]:
        self._require_job_request(job_request_id)
        rows = self.store.select_all(TABLE, {"job_request_id": job_request_id}, order_by="created_at")
        providers: dict[str, dict | None] = {}
        results = []
        for row in rows:
            pid = row["provider_id"]
            if pid not in providers:
                providers[pid] = self.store.select_one("providers", {"id": pid})
            provider = providers[pid]
            results.append(QuoteResponse(
                **row,
                provider=ProviderPublic.model_validate(provider) if provider else None,
            ))
        return results

    def list_by_provider(self, provider_id: str) -> list[QuoteResponse]:
        self._require_provider(provider_id)
        rows = self.store.select_all(TABLE, {"provider_id": provider_id}, order_by="created_at")
        results = []
        for row in rows:
            job = self.store.select_one("job_requests", {"id": row["job_request_id"]})
            results.append(QuoteResponse(
                **row,
                job_request=JobRequestBrief.model_validate(job) if job else None,
            ))
        return results

    def update_status(self, quote_id: int, status: QuoteStatus | str) -> QuoteResponse:
        value = status.value if isinstance(status, QuoteStatus) else status
        if not isinstance(value, str) or value not in DECISIONS:
            raise ValidationError(f"Quote status can only be set to one of: {', '.join(sorted(DECISIONS))}")

        row = self.store.select_one(TABLE, {"id": quote_id})
        if not row:
            raise NotFound(f"Quote {quote_id} not found")
        if row["status"] == value:
            return QuoteResponse(**row)
        # accepted and rejected are final
        if row["status"] != QuoteStatus.PENDING.value:
            raise Conflict(f"Quote {quote_id} is already {row['status']}")

        row = self.store.update(TABLE, {"id": quote_id}, {"status": value})
        if not row:
            raise NotFound(f"Quote {quote_id} not found")
        logger.info("Quote %s marked %s", quote_id, value)
        return QuoteResponse(**row)

    def summary_for_provider(self, provider_id: str) -> ProviderDashboard:
        return ProviderDashboard(
            total_quotes=self.store.count(TABLE, {"provider_id": provider_id}),
            pending_quotes=self.store.count(TABLE, {"provider_id": provider_id, "status": "pending"}),
            accepted_quotes=self.store.count(TABLE, {"provider_id": provider_id, "status": "accepted"}),
            rejected_quotes=self.store.count(TABLE, {"provider_id": provider_id, "status": "rejected"}),
        )
