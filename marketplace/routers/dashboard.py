from fastapi import APIRouter, Depends

from marketplace.dependencies import (
    get_current_user,
    get_job_request_service,
    get_provider_service,
    get_quote_service,
    http_error,
)
from marketplace.errors import MarketplaceError
from marketplace.schemas.dashboard import CustomerDashboard, ProviderDashboard
from marketplace.services.job_request_service import JobRequestService
from marketplace.services.provider_service import ProviderService
from marketplace.services.quote_service import QuoteService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=ProviderDashboard | CustomerDashboard)
async def get_dashboard(
    user: dict = Depends(get_current_user),
    providers: ProviderService = Depends(get_provider_service),
    quotes: QuoteService = Depends(get_quote_service),
    jobs: JobRequestService = Depends(get_job_request_service),
):
    try:
        if providers.exists(user["id"]):
            return quotes.summary_for_provider(user["id"])
        return jobs.summary_for_user(user["id"])
    except MarketplaceError as exc:
        raise http_error(exc) from exc
