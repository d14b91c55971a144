import logging
from datetime import datetime
from typing import Callable

from marketplace.errors import Conflict, NotFound, ValidationError
from marketplace.schemas.provider import ProviderCreate, ProviderResponse, ProviderUpdate
from marketplace.services import parse_input
from marketplace.storage import Store
from marketplace.utils.timefmt import format_timestamp, utcnow

logger = logging.getLogger(__name__)

TABLE = "providers"


class ProviderService:
    def __init__(self, store: Store, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def exists(self, user_id: str) -> bool:
        """True when ``user_id`` has a provider profile."""
        return self.store.count(TABLE, {"id": user_id}) > 0

    def create(self, data: ProviderCreate | dict) -> ProviderResponse:
        req = parse_input(ProviderCreate, data)
        if not req.user_id:
            raise ValidationError("user_id is required")
        if self.exists(req.user_id):
            raise Conflict(f"A provider profile already exists for user {req.user_id}")

        record = req.model_dump(mode="json")
        record["id"] = req.user_id
        record["created_at"] = format_timestamp(self.clock())
        row = self.store.insert(TABLE, record)
        logger.info("Provider profile created for user %s", row["id"])
        return ProviderResponse(**row)

    def get_by_id(self, provider_id: str) -> ProviderResponse:
        row = self.store.select_one(TABLE, {"id": provider_id})
        if not row:
            raise NotFound(f"Provider {provider_id} not found")
        return ProviderResponse(**row)

    def update(self, provider_id: str, patch: ProviderUpdate | dict) -> ProviderResponse:
        changes = parse_input(ProviderUpdate, patch).model_dump(
            mode="json", exclude_unset=True, exclude_none=True,
        )
        if not changes:
            return self.get_by_id(provider_id)
        row = self.store.update(TABLE, {"id": provider_id}, changes)
        if not row:
            raise NotFound(f"Provider {provider_id} not found")
        logger.info("Provider %s updated: %s", provider_id, ", ".join(sorted(changes)))
        return ProviderResponse(**row)

    def list(self) -> list[ProviderResponse]:
        return [ProviderResponse(**r) for r in self.store.select_all(TABLE)]
