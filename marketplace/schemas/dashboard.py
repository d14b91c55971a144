from typing import Literal

from pydantic import BaseModel


class ProviderDashboard(BaseModel):
    role: Literal["provider"] = "provider"
    total_quotes: int
    pending_quotes: int
    accepted_quotes: int
    rejected_quotes: int


class CustomerDashboard(BaseModel):
    role: Literal["customer"] = "customer"
    job_requests: int
    quotes_received: int
