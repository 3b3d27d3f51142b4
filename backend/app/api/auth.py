from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_identity, get_token_codec
from app.models.database import get_db
from app.schemas.auth import LoginRequest, MessageResponse, RegisterRequest, UserResponse
from app.services.auth import Identity, TokenCodec, clear_auth_cookie, set_auth_cookie
from app.services.auth_service import auth_service
from app.services.exceptions import NotFoundError
from app.services.user_service import user_service

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(request: RegisterRequest, db: AsyncSession = Depends(get_db)):
    user = await auth_service.register(db, name=request.name, email=request.email, password=request.password)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=UserResponse)
async def login(
    request: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
):
    user = await auth_service.login(db, email=request.email, password=request.password)
    token = codec.issue(user.id, user.email)
    set_auth_cookie(response, token, max_age=int(codec.ttl.total_seconds()))
    return UserResponse.model_validate(user)


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response, identity: Identity = Depends(get_current_identity)):
    # Stateless tokens: clearing the cookie is all logout can do
    clear_auth_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get("/profile", response_model=UserResponse)
async def profile(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    user = await user_service.get_by_id(db, identity.id)
    if not user:
        raise NotFoundError("User not found")
    return UserResponse.model_validate(user)
