"""
Defines all API endpoints related to user authentication and session lifecycle.
"""

import logging
import random

from fastapi import APIRouter, Depends, HTTPException, Response, status

from .. import schemas, models, auth
from ..config import settings
from ..repository import HealthRepository, get_repository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post("/register", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user: schemas.UserCreate,
    response: Response,
    repo: HealthRepository = Depends(get_repository),
):
    """
    Registers a new user and signs them in.

    Args:
        user (schemas.UserCreate): The user's registration data.
        response (Response): Used to attach the session cookie.
        repo (HealthRepository): The repository dependency.

    Raises:
        HTTPException: 400 if the username or email is already registered.

    Returns:
        models.User: The newly created user object.
    """
    if repo.get_user_by_username(user.username):
        raise HTTPException(status_code=400, detail="Username already exists")
    if repo.get_user_by_email(user.email):
        raise HTTPException(status_code=400, detail="Email already exists")

    new_user = repo.create_user(
        username=user.username,
        password=auth.get_password_hash(user.password),
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        profile_image=user.profile_image,
    )
    repo.create_health_stats(new_user.id)
    repo.commit()

    auth.start_session(response, new_user)
    logger.info(f"Registered user '{new_user.username}' ({new_user.id}).")
    return new_user


@router.post("/login", response_model=schemas.UserResponse)
def login(
    form_data: schemas.UserLogin,
    response: Response,
    repo: HealthRepository = Depends(get_repository),
):
    """
    Authenticates a user with username and password and starts a session.

    Raises:
        HTTPException: 401 if the credentials are incorrect.
    """
    user = repo.get_user_by_username(form_data.username)

    # Accounts created through Google have no password and cannot log in here
    if not user or not auth.verify_password(form_data.password, user.password):
        logger.info(f"Failed login attempt for '{form_data.username}'.")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )

    auth.start_session(response, user)
    return user


def _find_or_create_google_user(repo: HealthRepository, payload: dict) -> models.User:
    """Resolves a verified Google identity to a local user, linking or creating one."""
    user = repo.get_user_by_google_id(payload["sub"])
    if user:
        return user

    user = repo.get_user_by_email(payload["email"])
    if user:
        logger.info(f"Linking Google identity to existing user {user.id}.")
        return repo.update_user(
            user,
            google_id=payload["sub"],
            google_profile_pic=payload.get("picture"),
        )

    display_name = payload.get("name") or "User"
    name_parts = display_name.split()
    first_name = name_parts[0] if name_parts else "New"
    last_name = name_parts[-1] if len(name_parts) > 1 else "User"

    user = repo.create_user(
        username=f"{payload['email'].split('@')[0]}{random.randint(0, 999)}",
        email=payload["email"],
        first_name=first_name,
        last_name=last_name,
        google_id=payload["sub"],
        google_profile_pic=payload.get("picture"),
        profile_image=payload.get("picture"),
    )
    repo.create_health_stats(user.id)
    logger.info(f"Created user {user.id} from Google sign-in.")
    return user


@router.post("/login/google", response_model=schemas.UserResponse)
def login_with_google(
    data: schemas.GoogleLogin,
    response: Response,
    repo: HealthRepository = Depends(get_repository),
):
    """
    Exchanges a Google ID token for a session.

    Raises:
        HTTPException(503): If Google sign-in is not configured.
        HTTPException(401): If the token cannot be verified.
        HTTPException(400): If the verified token carries no email address.
    """
    if not settings.GOOGLE_CLIENT_ID:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Google sign-in is not configured."
        )

    try:
        payload = auth.verify_google_token(data.token)
    except ValueError as e:
        logger.info(f"Rejected Google token: {e}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Google authentication failed")

    if not payload or not payload.get("email") or not payload.get("sub"):
        raise HTTPException(status_code=400, detail="Invalid token")

    user = _find_or_create_google_user(repo, payload)
    repo.commit()

    auth.start_session(response, user)
    return user


@router.post("/logout", response_model=schemas.MessageResponse)
def logout(response: Response):
    """Ends the current session by clearing the session cookie."""
    auth.end_session(response)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=schemas.UserResponse)
def read_me(current_user: models.User = Depends(auth.get_current_user)):
    """Returns the signed-in user, or 401 when there is no valid session."""
    return current_user
