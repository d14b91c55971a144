from fastapi import Depends, Header, HTTPException

from marketplace.config import settings
from marketplace.database import SessionLocal
from marketplace.errors import MarketplaceError
from marketplace.services.auth_service import auth_service
from marketplace.services.job_request_service import JobRequestService
from marketplace.services.provider_service import ProviderService
from marketplace.services.quote_service import QuoteService
from marketplace.storage import MemoryStore, SqlStore, Store

memory_store = MemoryStore()


def get_store():
    if settings.storage_backend == "memory":
        yield memory_store
        return
    db = SessionLocal()
    try:
        yield SqlStore(db)
    finally:
        db.close()


def get_job_request_service(store: Store = Depends(get_store)) -> JobRequestService:
    return JobRequestService(store)


def get_provider_service(store: Store = Depends(get_store)) -> ProviderService:
    return ProviderService(store)


def get_quote_service(store: Store = Depends(get_store)) -> QuoteService:
    return QuoteService(store)


def http_error(exc: MarketplaceError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=str(exc))


async def get_bearer_token(authorization: str = Header(...)) -> str:
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing bearer token")
    return authorization[7:]


async def get_current_user(token: str = Depends(get_bearer_token)) -> dict:
    user = auth_service.current_user(token)
    if not user:
        raise HTTPException(status_code=401, detail="Not signed in or session expired")
    return user


async def require_provider(
    user: dict = Depends(get_current_user),
    providers: ProviderService = Depends(get_provider_service),
) -> dict:
    if not providers.exists(user["id"]):
        raise HTTPException(status_code=403, detail="Only registered providers can do this")
    return user
