"""Password hashing and JWT access tokens"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext

from aus_cms.core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


class TokenError(Exception):
    """Base class for access token verification failures"""


class TokenMalformedError(TokenError):
    """Token cannot be parsed or lacks the identity claim"""


class TokenSignatureError(TokenError):
    """Token signature (or a signed claim) does not verify"""


class TokenExpiredError(TokenError):
    """Token is past its expiry"""


@dataclass(frozen=True)
class TokenClaims:
    id: str
    issued_at: datetime
    version: int = 0


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compare a plaintext password against a stored digest. Never raises."""
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def create_access_token(
    admin_id: Any,
    token_version: int = 0,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Issue a signed token carrying the admin id"""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES))
    payload: Dict[str, Any] = {
        "id": str(admin_id),
        "ver": int(token_version),
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(token: str) -> TokenClaims:
    """
    Verify a token and return its claims.

    Raises:
        TokenMalformedError: not a JWT, or no ``id`` claim
        TokenSignatureError: signature or claims fail verification
        TokenExpiredError: ``exp`` is in the past
    """
    if not token:
        raise TokenMalformedError("empty token")
    try:
        jwt.get_unverified_header(token)
        jwt.get_unverified_claims(token)
    except JWTError as e:
        raise TokenMalformedError(str(e)) from e

    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError as e:
        raise TokenExpiredError(str(e)) from e
    except JWTError as e:
        raise TokenSignatureError(str(e)) from e

    admin_id = payload.get("id")
    if not admin_id or not isinstance(admin_id, str):
        raise TokenMalformedError("missing id claim")

    try:
        issued_at = datetime.fromtimestamp(int(payload.get("iat", 0)), tz=timezone.utc)
        version = int(payload.get("ver", 0))
    except (TypeError, ValueError) as e:
        raise TokenMalformedError(str(e)) from e

    return TokenClaims(id=admin_id, issued_at=issued_at, version=version)
