from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import Settings
from .errors import InvalidOrExpiredToken

ACCESS_TOKEN_TTL = timedelta(hours=1)


@dataclass(frozen=True)
class CurrentUser:
    id: int
    email: str
    name: str


class PasswordHasher:
    def __init__(self, rounds: int = 12):
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        return self.context.verify(plain_password, hashed_password)


class TokenIssuer:
    """Signs and checks bearer tokens carrying the user's id, email and name."""

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(settings.secret_key, settings.algorithm)

    def create_access_token(self, user_id: int, email: str, name: str) -> str:
        now = datetime.now(timezone.utc)
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "iat": now,
            "exp": now + ACCESS_TOKEN_TTL,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> CurrentUser:
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError:
            raise InvalidOrExpiredToken()
        subject = payload.get("sub")
        email = payload.get("email")
        name = payload.get("name")
        if subject is None or not isinstance(email, str) or not isinstance(name, str):
            raise InvalidOrExpiredToken()
        try:
            user_id = int(subject)
        except (TypeError, ValueError):
            raise InvalidOrExpiredToken()
        return CurrentUser(id=user_id, email=email, name=name)
