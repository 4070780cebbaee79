import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..errors import EmailAlreadyRegistered, InvalidCredentials
from ..models import User
from ..security import PasswordHasher, TokenIssuer

logger = logging.getLogger(__name__)


def _auth_response(tokens: TokenIssuer, user: User) -> dict:
    return {
        "token": tokens.create_access_token(user.id, user.email, user.name),
        "user": {"id": user.id, "email": user.email, "name": user.name},
    }


def find_user_by_email(session: Session, email: str):
    return session.exec(select(User).where(User.email == email)).first()


def register_user(
    session: Session,
    hasher: PasswordHasher,
    tokens: TokenIssuer,
    email: str,
    password: str,
    name: str,
) -> dict:
    if find_user_by_email(session, email) is not None:
        raise EmailAlreadyRegistered()

    user = User(email=email, name=name, password_hash=hasher.hash(password))
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        # lost a race against a concurrent registration for the same email
        session.rollback()
        raise EmailAlreadyRegistered()
    session.refresh(user)
    logger.info("Registered user %s", user.id)
    return _auth_response(tokens, user)


def authenticate_user(
    session: Session,
    hasher: PasswordHasher,
    tokens: TokenIssuer,
    email: str,
    password: str,
) -> dict:
    user = find_user_by_email(session, email)
    if user is None or not hasher.verify(password, user.password_hash):
        raise InvalidCredentials()
    return _auth_response(tokens, user)
