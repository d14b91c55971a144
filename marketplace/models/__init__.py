from marketplace.models.user import User
from marketplace.models.job_request import JobRequest
from marketplace.models.provider import Provider
from marketplace.models.quote import Quote

__all__ = ["User", "JobRequest", "Provider", "Quote"]
