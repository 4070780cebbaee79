from typing import Iterator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from .errors import MissingCredentials
from .security import CurrentUser, PasswordHasher, TokenIssuer

bearer_scheme = HTTPBearer(auto_error=False)


def get_session(request: Request) -> Iterator[Session]:
    with request.app.state.db.session() as session:
        yield session


def get_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher


def get_tokens(request: Request) -> TokenIssuer:
    return request.app.state.tokens


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenIssuer = Depends(get_tokens),
) -> CurrentUser:
    if credentials is None:
        raise MissingCredentials()
    return tokens.verify(credentials.credentials)
