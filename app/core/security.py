from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from passlib.context import CryptContext
from jose import JWTError, jwt
from app.core.config import settings

# Create hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


@dataclass(frozen=True)
class Authenticated:
    user_id: int
    email: str


@dataclass(frozen=True)
class Unauthenticated:
    reason: str = "Not authenticated"


AuthResult = Union[Authenticated, Unauthenticated]


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """Burn one hash worth of time so unknown emails look like bad passwords."""
    pwd_context.dummy_verify()


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"iat": now, "exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def create_user_token(user_id: int, email: str) -> str:
    return create_access_token({"userId": user_id, "email": email})


def authenticate_token(token: Optional[str]) -> AuthResult:
    """
    Validate a signed token and return who it belongs to.
    Signature and expiry checks are left to jose; every failure is reported
    as Unauthenticated rather than raised.
    """
    if not token:
        return Unauthenticated()

    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return Unauthenticated("Invalid or expired session")

    user_id = payload.get("userId")
    email = payload.get("email")
    if not isinstance(user_id, int) or not isinstance(email, str):
        return Unauthenticated("Invalid or expired session")

    return Authenticated(user_id=user_id, email=email)
