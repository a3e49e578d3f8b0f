"""
Contains authentication-related helpers: password hashing, session tokens,
Google ID token verification and the dependency that resolves the current user.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token as google_id_token
from jose import JWTError, jwt
from passlib.context import CryptContext

from . import models
from .config import settings
from .repository import HealthRepository, get_repository

logger = logging.getLogger(__name__)

# --- Configuration ---
ALGORITHM = "HS256"

# scrypt with N=2^14, r=8, p=1 and a random salt per hash
pwd_context = CryptContext(schemes=["scrypt"], scrypt__default_rounds=14, deprecated="auto")

# Sessions travel in a cookie; a Bearer header carrying the same token also works.
bearer_scheme = HTTPBearer(auto_error=False)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verifies a plain-text password against a stored hash in constant time."""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hashes a plain-text password using scrypt."""
    return pwd_context.hash(password)


def create_session_token(user_id: int) -> str:
    """
    Creates a signed session token for a user.

    Args:
        user_id (int): The id stored in the token's 'sub' claim.

    Returns:
        str: The encoded JWT, valid for SESSION_EXPIRE_DAYS.
    """
    expire = datetime.now(timezone.utc) + timedelta(days=settings.SESSION_EXPIRE_DAYS)
    to_encode = {"sub": str(user_id), "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_session_token(token: str) -> Optional[int]:
    """Returns the user id carried by a session token, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        return int(payload["sub"])
    except (JWTError, KeyError, ValueError):
        return None


def start_session(response: Response, user: models.User) -> None:
    """Attaches a fresh session cookie for the given user to the response."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(user.id),
        max_age=settings.SESSION_EXPIRE_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )


def end_session(response: Response) -> None:
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME)


def verify_google_token(token: str) -> dict:
    """
    Verifies a Google ID token's signature, expiry and audience.

    Raises:
        ValueError: If the token cannot be verified, including a wrong issuer
            or Google's signing certificates being unreachable.

    Returns:
        dict: The token payload (sub, email, name, picture, ...).
    """
    try:
        return google_id_token.verify_oauth2_token(
            token, google_requests.Request(), settings.GOOGLE_CLIENT_ID
        )
    except google_exceptions.GoogleAuthError as e:
        raise ValueError(str(e)) from e


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    repo: HealthRepository = Depends(get_repository),
) -> models.User:
    """
    FastAPI dependency that resolves the authenticated user from the session.

    Raises:
        HTTPException(401): If no valid session is present or the user no longer exists.

    Returns:
        models.User: The signed-in user.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    token = credentials.credentials if credentials else request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise credentials_exception

    user_id = decode_session_token(token)
    if user_id is None:
        raise credentials_exception

    user = repo.get_user(user_id)
    if user is None:
        logger.warning(f"Session token refers to unknown user {user_id}")
        raise credentials_exception
    return user
