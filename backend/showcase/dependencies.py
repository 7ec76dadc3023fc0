from fastapi import Request, HTTPException
from sqlalchemy.orm import Session
from showcase.models.user import User


async def get_current_user_optional(request: Request, db: Session) -> User | None:
    """Get current user from session, returns None if not logged in"""
    user_id = request.session.get('user_id')
    if not user_id:
        return None
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        # Account behind a stale session no longer resolves
        request.session.pop('user_id', None)
    return user

async def get_current_user(request: Request, db: Session) -> User:
    """Get current user, raises 401 if not logged in"""
    user = await get_current_user_optional(request, db)
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user

async def get_viewer_id(request: Request, db: Session) -> str | None:
    """Id used for per-user like state on read endpoints"""
    user = await get_current_user_optional(request, db)
    return user.id if user else None


def login_user(request: Request, user: User):
    request.session['user_id'] = user.id

def logout_user(request: Request):
    request.session.clear()
