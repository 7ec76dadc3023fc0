import logging
import re
import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from showcase.auth import hash_password, verify_password
from showcase.models import User
from showcase.profanity import contains_profanity

logger = logging.getLogger(__name__)

NICKNAME_PATTERN = re.compile(r"^[가-힣a-zA-Z0-9_]{2,20}$")


def get_user(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def get_user_by_nickname(db: Session, nickname: str) -> User | None:
    return db.query(User).filter(User.nickname == nickname).first()


def create_local_user(db: Session, email: str, password: str) -> User:
    user = User(
        id=f"user_{uuid.uuid4().hex}",
        email=email,
        password_hash=hash_password(password),
        provider="local",
        has_set_nickname=False
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered local user %s", user.id)
    return user


def authenticate(db: Session, email: str, password: str) -> tuple[User | None, str | None]:
    """Check email/password login. Returns (user, None) or (None, reason)."""
    user = get_user_by_email(db, email)
    if not user:
        return None, "Email is not registered"
    if not user.password_hash:
        return None, f"This account signs in with {user.provider}"
    if not verify_password(password, user.password_hash):
        return None, "Incorrect password"
    return user, None


def upsert_oauth_user(
    db: Session,
    provider: str,
    provider_user_id: str,
    email: str | None = None,
    profile_image_url: str | None = None,
) -> User:
    """Create the account on first OAuth login, refresh email/avatar afterwards"""
    user_id = f"{provider}_{provider_user_id}"
    user = get_user(db, user_id)

    # Email is unique; leave it unset if a different account already owns it
    if email:
        owner = get_user_by_email(db, email)
        if owner and owner.id != user_id:
            email = None

    if user:
        if email:
            user.email = email
        if profile_image_url:
            user.profile_image_url = profile_image_url
        user.updated_at = datetime.utcnow()
    else:
        user = User(
            id=user_id,
            email=email,
            profile_image_url=profile_image_url,
            provider=provider,
            has_set_nickname=False
        )
        db.add(user)
        logger.info("Registered %s user %s", provider, user_id)

    db.commit()
    db.refresh(user)
    return user


def validate_nickname(db: Session, nickname: str, exclude_user_id: str | None = None) -> tuple[bool, str]:
    if not NICKNAME_PATTERN.match(nickname or ""):
        return False, "Nickname must be 2-20 characters of Hangul, letters, digits or underscore"
    if contains_profanity(nickname):
        return False, "Nickname contains inappropriate words"
    owner = get_user_by_nickname(db, nickname)
    if owner and owner.id != exclude_user_id:
        return False, "Nickname is already taken"
    return True, "Nickname is available"


def update_profile(
    db: Session,
    user: User,
    nickname: str | None = None,
    profile_image_url: str | None = None,
) -> User:
    """Caller validates the nickname first (see validate_nickname)"""
    if nickname is not None:
        user.nickname = nickname
        user.has_set_nickname = True
    if profile_image_url is not None:
        user.profile_image_url = profile_image_url or None
    user.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(user)
    return user
