"""API auth: register, login, me, register-admin."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from brazucas.db import get_db
from brazucas.deps import get_current_principal
from brazucas.schemas.auth import AdminRegisterRequest, AuthOut, LoginRequest, RegisterRequest, UserOut
from brazucas.schemas.common import ApiResponse, ok
from brazucas.schemas.content import row_to_dict
from brazucas.services import user_service
from brazucas.services.permissions import Principal

router = APIRouter(prefix="/api", tags=["auth"])


def _auth_payload(user, token: str) -> AuthOut:
    return AuthOut(token=token, user=UserOut.model_validate(row_to_dict(user)))


@router.post("/register", response_model=ApiResponse[AuthOut], status_code=status.HTTP_201_CREATED)
async def post_register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """Sign up as normal user or advertiser."""
    user, token = await user_service.register(
        db,
        email=payload.email,
        nickname=payload.nickname,
        password=payload.password,
        role=payload.role,
    )
    return ok(_auth_payload(user, token), message="User registered successfully")


@router.post("/login", response_model=ApiResponse[AuthOut])
async def post_login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    user, token = await user_service.login(db, email=payload.email, password=payload.password)
    return ok(_auth_payload(user, token), message="Login successful")


@router.get("/me", response_model=ApiResponse[UserOut])
async def get_me(
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    """Current user from the bearer token; 404 if the account was removed."""
    user = await user_service.get_user(db, principal.id)
    return ok(UserOut.model_validate(row_to_dict(user)))


@router.post("/register-admin", response_model=ApiResponse[AuthOut], status_code=status.HTTP_201_CREATED)
async def post_register_admin(
    payload: AdminRegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """Create an admin account; requires ADMIN_SECRET_KEY."""
    user, token = await user_service.register_admin(
        db,
        email=payload.email,
        password=payload.password,
        nickname=payload.nickname,
        admin_secret_key=payload.admin_secret_key,
    )
    return ok(_auth_payload(user, token), message="Admin user created successfully")
