from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ..deps import get_hasher, get_session, get_tokens
from ..schemas import AuthResponse, LoginRequest, RegisterRequest
from ..security import PasswordHasher, TokenIssuer
from ..services import auth as auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    session: Session = Depends(get_session),
    hasher: PasswordHasher = Depends(get_hasher),
    tokens: TokenIssuer = Depends(get_tokens),
):
    return auth_service.register_user(
        session, hasher, tokens, payload.email, payload.password, payload.name
    )


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    session: Session = Depends(get_session),
    hasher: PasswordHasher = Depends(get_hasher),
    tokens: TokenIssuer = Depends(get_tokens),
):
    return auth_service.authenticate_user(session, hasher, tokens, payload.email, payload.password)
