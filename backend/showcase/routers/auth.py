import logging

from fastapi import APIRouter, Request, Depends, HTTPException
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
import httpx

from showcase.auth import oauth
from showcase.config import settings
from showcase.database import get_db
from showcase.dependencies import get_current_user, login_user, logout_user
from showcase.schemas import RegisterRequest, LoginRequest, EmailCheckRequest, NicknameRequest, ProfileUpdate
from showcase.serializers import user_to_dict
from showcase.services import users

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


# ==================== LOCAL ACCOUNTS ====================

@router.post("/register", status_code=201)
async def register(body: RegisterRequest, request: Request, db: Session = Depends(get_db)):
    if users.get_user_by_email(db, body.email):
        raise HTTPException(status_code=400, detail="Email is already registered")

    user = users.create_local_user(db, body.email, body.password)
    login_user(request, user)
    return user_to_dict(user)


@router.post("/login")
async def login(body: LoginRequest, request: Request, db: Session = Depends(get_db)):
    user, reason = users.authenticate(db, body.email, body.password)
    if not user:
        raise HTTPException(status_code=401, detail=reason)

    login_user(request, user)
    return user_to_dict(user)


@router.post("/logout")
@router.get("/logout")
async def logout(request: Request):
    logout_user(request)
    return {"success": True}


@router.get("/user")
async def current_user(request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)
    return user_to_dict(user)


@router.post("/user/check-email")
async def check_email(body: EmailCheckRequest, db: Session = Depends(get_db)):
    return {"available": users.get_user_by_email(db, body.email) is None}


@router.post("/user/validate-nickname")
async def validate_nickname(body: NicknameRequest, request: Request, db: Session = Depends(get_db)):
    user_id = request.session.get('user_id')
    ok, message = users.validate_nickname(db, body.nickname, exclude_user_id=user_id)
    return {"valid": ok, "message": message}


@router.put("/user/profile")
async def update_profile(body: ProfileUpdate, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)

    if body.nickname is not None:
        ok, message = users.validate_nickname(db, body.nickname, exclude_user_id=user.id)
        if not ok:
            raise HTTPException(status_code=400, detail=message)

    user = users.update_profile(db, user, nickname=body.nickname, profile_image_url=body.profile_image_url)
    return user_to_dict(user)


# ==================== OAUTH ====================

@router.get("/auth/google")
async def google_login(request: Request):
    redirect_uri = f"{settings.APP_URL}/api/auth/google/callback"
    return await oauth.google.authorize_redirect(request, redirect_uri)

@router.get("/auth/google/callback")
async def google_callback(request: Request, db: Session = Depends(get_db)):
    try:
        token = await oauth.google.authorize_access_token(request)
    except Exception as e:
        logger.warning("Google OAuth failed: %s", e)
        raise HTTPException(status_code=400, detail=f"OAuth error: {str(e)}")

    userinfo = token.get('userinfo') or {}
    if not userinfo.get('sub'):
        raise HTTPException(status_code=400, detail="Google did not return a user id")

    user = users.upsert_oauth_user(
        db,
        provider="google",
        provider_user_id=str(userinfo['sub']),
        email=userinfo.get('email'),
        profile_image_url=userinfo.get('picture')
    )
    login_user(request, user)
    return RedirectResponse(url="/" if user.has_set_nickname else "/nickname-setup", status_code=302)

@router.get("/auth/github")
async def github_login(request: Request):
    redirect_uri = f"{settings.APP_URL}/api/auth/github/callback"
    return await oauth.github.authorize_redirect(request, redirect_uri)

@router.get("/auth/github/callback")
async def github_callback(request: Request, db: Session = Depends(get_db)):
    try:
        token = await oauth.github.authorize_access_token(request)
    except Exception as e:
        logger.warning("GitHub OAuth failed: %s", e)
        raise HTTPException(status_code=400, detail=f"OAuth error: {str(e)}")

    # Get user info from GitHub
    async with httpx.AsyncClient() as client:
        headers = {"Authorization": f"Bearer {token['access_token']}"}
        resp = await client.get("https://api.github.com/user", headers=headers)
        github_user = resp.json()

        email_resp = await client.get("https://api.github.com/user/emails", headers=headers)
        emails = email_resp.json() if email_resp.status_code == 200 else []
        primary_email = next((e['email'] for e in emails if e.get('primary')), None)

    if 'id' not in github_user:
        raise HTTPException(status_code=400, detail="GitHub did not return a user id")

    user = users.upsert_oauth_user(
        db,
        provider="github",
        provider_user_id=str(github_user['id']),
        email=primary_email or github_user.get('email'),
        profile_image_url=github_user.get('avatar_url')
    )
    login_user(request, user)
    return RedirectResponse(url="/" if user.has_set_nickname else "/nickname-setup", status_code=302)
