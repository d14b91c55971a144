from enum import Enum

from pydantic import BaseModel, field_validator

from marketplace.schemas.common import NonEmptyStr, blank_to_none
from marketplace.schemas.job_request import JobRequestBrief
from marketplace.schemas.provider import ProviderPublic


class QuoteStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class QuoteCreate(BaseModel):
    # Any "status" sent by the caller is ignored; new quotes are always pending
    job_request_id: int
    provider_id: str | None = None
    amount: NonEmptyStr
    timeline: NonEmptyStr
    comments: NonEmptyStr

    @field_validator("provider_id")
    @classmethod
    def strip_provider_id(cls, v: str | None) -> str | None:
        return blank_to_none(v)


class QuoteStatusUpdate(BaseModel):
    status: str


class QuoteResponse(BaseModel):
    id: int
    job_request_id: int
    provider_id: str
    amount: str
    timeline: str
    comments: str
    status: str
    created_at: str
    provider: ProviderPublic | None = None
    job_request: JobRequestBrief | None = None
