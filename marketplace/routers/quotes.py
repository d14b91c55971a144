from fastapi import APIRouter, Depends, HTTPException

from marketplace.dependencies import (
    get_current_user,
    get_job_request_service,
    get_quote_service,
    http_error,
    require_provider,
)
from marketplace.errors import MarketplaceError
from marketplace.schemas.quote import QuoteCreate, QuoteResponse, QuoteStatusUpdate
from marketplace.services.job_request_service import JobRequestService
from marketplace.services.quote_service import QuoteService

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post("", response_model=QuoteResponse, status_code=201)
async def submit_quote(
    req: QuoteCreate,
    user: dict = Depends(require_provider),
    quotes: QuoteService = Depends(get_quote_service),
):
    try:
        return quotes.submit(req.model_copy(update={"provider_id": user["id"]}))
    except MarketplaceError as exc:
        raise http_error(exc) from exc


@router.get("/{quote_id}", response_model=QuoteResponse)
async def get_quote(
    quote_id: int,
    user: dict = Depends(get_current_user),
    quotes: QuoteService = Depends(get_quote_service),
    jobs: JobRequestService = Depends(get_job_request_service),
):
    try:
        quote = quotes.get_by_id(quote_id)
        if quote.provider_id != user["id"] and jobs.get_by_id(quote.job_request_id).user_id != user["id"]:
            raise HTTPException(status_code=403, detail="Not allowed to view this quote")
        return quote
    except MarketplaceError as exc:
        raise http_error(exc) from exc


@router.put("/{quote_id}/status", response_model=QuoteResponse)
async def update_quote_status(
    quote_id: int,
    req: QuoteStatusUpdate,
    user: dict = Depends(get_current_user),
    quotes: QuoteService = Depends(get_quote_service),
    jobs: JobRequestService = Depends(get_job_request_service),
):
    try:
        quote = quotes.get_by_id(quote_id)
        if jobs.get_by_id(quote.job_request_id).user_id != user["id"]:
            raise HTTPException(status_code=403, detail="Only the job request owner can accept or reject quotes")
        return quotes.update_status(quote_id, req.status)
    except MarketplaceError as exc:
        raise http_error(exc) from exc
