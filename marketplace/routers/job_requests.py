from fastapi import APIRouter, Depends, HTTPException, Query

from marketplace.dependencies import (
    get_current_user,
    get_job_request_service,
    get_quote_service,
    http_error,
)
from marketplace.errors import MarketplaceError
from marketplace.schemas.job_request import JobRequestCreate, JobRequestResponse
from marketplace.schemas.quote import QuoteResponse
from marketplace.services.job_request_service import JobRequestService, filter_job_requests
from marketplace.services.quote_service import QuoteService

router = APIRouter(prefix="/job-requests", tags=["job-requests"])


@router.post("", response_model=JobRequestResponse, status_code=201)
async def create_job_request(
    req: JobRequestCreate,
    user: dict = Depends(get_current_user),
    jobs: JobRequestService = Depends(get_job_request_service),
):
    try:
        return jobs.create(req.model_copy(update={"user_id": user["id"]}))
    except MarketplaceError as exc:
        raise http_error(exc) from exc


@router.get("", response_model=list[JobRequestResponse])
async def list_job_requests(
    job_type: str | None = None,
    location: str | None = None,
    q: str | None = Query(None, max_length=200),
    jobs: JobRequestService = Depends(get_job_request_service),
):
    try:
        results = jobs.list()
    except MarketplaceError as exc:
        raise http_error(exc) from exc
    return filter_job_requests(results, job_type=job_type, location=location, search=q)


@router.get("/mine", response_model=list[JobRequestResponse])
async def list_my_job_requests(
    user: dict = Depends(get_current_user),
    jobs: JobRequestService = Depends(get_job_request_service),
):
    try:
        return jobs.list_by_user(user["id"])
    except MarketplaceError as exc:
        raise http_error(exc) from exc


@router.get("/{job_request_id}", response_model=JobRequestResponse)
async def get_job_request(
    job_request_id: int,
    jobs: JobRequestService = Depends(get_job_request_service),
):
    try:
        return jobs.get_by_id(job_request_id)
    except MarketplaceError as exc:
        raise http_error(exc) from exc


@router.get("/{job_request_id}/quotes", response_model=list[QuoteResponse])
async def list_job_request_quotes(
    job_request_id: int,
    user: dict = Depends(get_current_user),
    jobs: JobRequestService = Depends(get_job_request_service),
    quotes: QuoteService = Depends(get_quote_service),
):
    try:
        job = jobs.get_by_id(job_request_id)
        if job.user_id != user["id"]:
            raise HTTPException(status_code=403, detail="Only the owner can view quotes for this job request")
        return quotes.list_by_job_request(job_request_id)
    except MarketplaceError as exc:
        raise http_error(exc) from exc
