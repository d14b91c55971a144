from fastapi import APIRouter, Depends, HTTPException

from marketplace.dependencies import (
    get_bearer_token,
    get_current_user,
    get_provider_service,
    get_store,
    http_error,
)
from marketplace.errors import MarketplaceError
from marketplace.schemas.auth import SignInRequest, SignInResponse, SignUpRequest, UserResponse
from marketplace.services.auth_service import auth_service
from marketplace.services.provider_service import ProviderService
from marketplace.storage import Store

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=201)
async def sign_up(req: SignUpRequest, store: Store = Depends(get_store)):
    try:
        user = auth_service.sign_up(store, req.email, req.password)
    except MarketplaceError as exc:
        raise http_error(exc) from exc
    return UserResponse(**user)


@router.post("/signin", response_model=SignInResponse)
async def sign_in(req: SignInRequest, store: Store = Depends(get_store)):
    try:
        result = auth_service.sign_in(store, req.email, req.password)
    except MarketplaceError as exc:
        raise http_error(exc) from exc
    if result is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return SignInResponse(**result)


@router.post("/signout")
async def sign_out(token: str = Depends(get_bearer_token)):
    auth_service.sign_out(token)
    return {"message": "Signed out"}


@router.get("/me", response_model=UserResponse)
async def me(
    user: dict = Depends(get_current_user),
    providers: ProviderService = Depends(get_provider_service),
):
    try:
        is_provider = providers.exists(user["id"])
    except MarketplaceError as exc:
        raise http_error(exc) from exc
    return UserResponse(**user, is_provider=is_provider)
