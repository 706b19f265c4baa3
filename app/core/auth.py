# app/core/auth.py
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlmodel import Session

from app.core.config import get_settings
from app.database import get_session
from app.models.staff import Staff
from app.models.vendor import Vendor

settings = get_settings()

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header does not raise here,
#   so we can answer with our own 401 message.
bearer_scheme = HTTPBearer(auto_error=False)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# -------- Passwords (staff only) --------


def hash_password(password: str) -> str:
    # bcrypt only looks at the first 72 bytes
    encoded = password.encode("utf-8")[:72].decode("utf-8", errors="ignore")
    return pwd_context.hash(encoded)


def verify_password(password: str, password_hash: str) -> bool:
    encoded = password.encode("utf-8")[:72].decode("utf-8", errors="ignore")
    return pwd_context.verify(encoded, password_hash)


# -------- Tokens --------


def create_access_token(
    claims: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Sign a JWT carrying `claims` plus an `exp` claim.

    Vendor tokens carry {"vendor_id": ...};
    staff tokens carry {"staff_id": ..., "role": ...}.
    """
    to_encode = dict(claims)
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify an access token (signature + expiration).

    Raises:
        HTTPException(401): if token is invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def _token_claims(
    credentials: HTTPAuthorizationCredentials | None,
) -> dict[str, Any]:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
        )
    return decode_access_token(credentials.credentials)


# -------- Dependencies --------


def require_vendor(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> Vendor:
    """
    Resolve the calling vendor from a vendor token.

    Raises:
        HTTPException(401): missing/invalid token, staff token,
                            unknown or deactivated vendor.
    """
    payload = _token_claims(credentials)
    vendor_id = payload.get("vendor_id")
    if vendor_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Vendor token required",
        )

    vendor = session.get(Vendor, int(vendor_id))
    if vendor is None or not vendor.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token.",
        )
    return vendor


def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> Staff:
    """
    Resolve the calling staff member from a staff token.

    Raises:
        HTTPException(401): missing/invalid token or inactive staff.
        HTTPException(403): a vendor token was presented.
    """
    payload = _token_claims(credentials)
    staff_id = payload.get("staff_id")
    if staff_id is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )

    staff = session.get(Staff, int(staff_id))
    if staff is None or not staff.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token.",
        )
    return staff
