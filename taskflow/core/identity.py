# taskflow/core/identity.py

import logging
import re
from datetime import timedelta
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskflow.config import Settings
from taskflow.core.security import (
    create_access_token,
    decode_access_token,
    dummy_verify_password,
    get_password_hash,
    verify_password,
)
from taskflow.errors import AuthError, ConflictError, NotFoundError, ValidationError
from taskflow.models import User


logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
INVALID_CREDENTIALS = "Invalid credentials"


def normalize_email(email: str) -> str:
    return email.strip().lower()


# -------------------------------
# Registration & Login
# -------------------------------

def register(db: Session, email: str | None, username: str | None,
             password: str | None, confirm_password: str | None) -> dict:
    """
    Creates a new account and returns its public summary.
    All input checks run before the store is touched.
    """
    if not email or not username or not password or not confirm_password:
        raise ValidationError("All fields are required")
    if password != confirm_password:
        raise ValidationError("Passwords do not match")
    if "\x00" in password:
        raise ValidationError("Password must not contain NUL characters")

    email = normalize_email(email)
    if not EMAIL_RE.match(email):
        raise ValidationError("Invalid email format")

    if db.query(User).filter(User.email == email).first():
        raise ConflictError("Email already in use")
    if db.query(User).filter(User.username == username).first():
        raise ConflictError("Username already in use")

    user = User(email=email, username=username, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        field = _conflicting_field(e)
        logger.info("Registration raced on unique %s", field)
        raise ConflictError(f"{field} already exists") from e

    db.refresh(user)
    logger.info("Registered user %s (%s)", user.id, user.username)
    return user.summary()


def _conflicting_field(error: IntegrityError) -> str:
    detail = str(error.orig).lower()
    for field in ("email", "username"):
        if field in detail:
            return field
    return "field"


def login(db: Session, settings: Settings, email: str | None, password: str | None) -> dict:
    if not email or not password:
        raise ValidationError("Email and password required")

    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if user is None:
        dummy_verify_password()
        matched = False
    else:
        try:
            matched = verify_password(password, user.password_hash)
        except ValueError:
            # passlib refuses some inputs, e.g. NUL bytes for bcrypt
            matched = False

    if not matched:
        logger.warning("Failed login for %s", normalize_email(email))
        raise AuthError(INVALID_CREDENTIALS)

    token = create_access_token(
        data={"sub": user.id},
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
    return {"token": token, "user": {"id": user.id, "email": user.email}}


# -------------------------------
# Per-request Verification
# -------------------------------

def authenticate(authorization: str | None, settings: Settings) -> str:
    """
    Verifies a bearer credential from the Authorization header value and
    returns the caller's user id.
    """
    if not authorization:
        raise AuthError("No authorization header")

    parts = authorization.split()
    if len(parts) < 2:
        raise AuthError("No token provided")

    user_id = decode_access_token(parts[1], settings.secret_key, settings.algorithm)
    if user_id is None:
        raise AuthError("Invalid or expired token")
    return user_id


def get_self(db: Session, caller_id: str) -> dict:
    user = db.get(User, caller_id)
    if user is None:
        raise NotFoundError("User not found")
    return user.summary()


def list_users(db: Session) -> list[dict]:
    return [u.summary() for u in db.query(User).order_by(User.email.asc()).all()]
