from fastapi import APIRouter, Depends, HTTPException

from marketplace.dependencies import get_current_user, get_provider_service, get_quote_service, http_error
from marketplace.errors import MarketplaceError
from marketplace.schemas.provider import ProviderCreate, ProviderResponse, ProviderUpdate
from marketplace.schemas.quote import QuoteResponse
from marketplace.services.provider_service import ProviderService
from marketplace.services.quote_service import QuoteService

router = APIRouter(prefix="/providers", tags=["providers"])


def _require_owner(provider_id: str, user: dict):
    if provider_id != user["id"]:
        raise HTTPException(status_code=403, detail="You can only manage your own provider profile")


@router.post("", response_model=ProviderResponse, status_code=201)
async def create_provider(
    req: ProviderCreate,
    user: dict = Depends(get_current_user),
    providers: ProviderService = Depends(get_provider_service),
):
    try:
        return providers.create(req.model_copy(update={"user_id": user["id"]}))
    except MarketplaceError as exc:
        raise http_error(exc) from exc


@router.get("", response_model=list[ProviderResponse])
async def list_providers(providers: ProviderService = Depends(get_provider_service)):
    try:
        return providers.list()
    except MarketplaceError as exc:
        raise http_error(exc) from exc


@router.get("/{provider_id}", response_model=ProviderResponse)
async def get_provider(provider_id: str, providers: ProviderService = Depends(get_provider_service)):
    try:
        return providers.get_by_id(provider_id)
    except MarketplaceError as exc:
        raise http_error(exc) from exc


@router.put("/{provider_id}", response_model=ProviderResponse)
async def update_provider(
    provider_id: str,
    req: ProviderUpdate,
    user: dict = Depends(get_current_user),
    providers: ProviderService = Depends(get_provider_service),
):
    _require_owner(provider_id, user)
    try:
        return providers.update(provider_id, req)
    except MarketplaceError as exc:
        raise http_error(exc) from exc


@router.get("/{provider_id}/quotes", response_model=list[QuoteResponse])
async def list_provider_quotes(
    provider_id: str,
    user: dict = Depends(get_current_user),
    quotes: QuoteService = Depends(get_quote_service),
):
    _require_owner(provider_id, user)
    try:
        return quotes.list_by_provider(provider_id)
    except MarketplaceError as exc:
        raise http_error(exc) from exc
