from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt only hashes the first 72 bytes
MAX_PASSWORD_BYTES = 72


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class EmailCheckRequest(BaseModel):
    email: EmailStr


class NicknameRequest(BaseModel):
    nickname: str


class ProfileUpdate(BaseModel):
    nickname: Optional[str] = None
    profile_image_url: Optional[str] = Field(None, max_length=500)


class ProjectCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    content: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=500)
    video_url: Optional[str] = Field(None, max_length=500)
    demo_url: Optional[str] = Field(None, max_length=500)
    contact_info: Optional[str] = Field(None, max_length=255)
    category_id: Optional[int] = Field(None, gt=0)


class ProjectUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=500)
    video_url: Optional[str] = Field(None, max_length=500)
    demo_url: Optional[str] = Field(None, max_length=500)
    contact_info: Optional[str] = Field(None, max_length=255)
    category_id: Optional[int] = Field(None, gt=0)


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1)
    parent_id: Optional[int] = Field(None, gt=0)


class CommentUpdate(BaseModel):
    content: str = Field(..., min_length=1)


class FeedbackCreate(BaseModel):
    content: str = Field(..., min_length=1)
    category: Literal["bug", "feature", "other"]


class FeedbackUpdate(BaseModel):
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[Literal["bug", "feature", "other"]] = None


class VisitCreate(BaseModel):
    session_id: str = Field(..., min_length=1, max_length=255)
    user_agent: Optional[str] = Field(None, max_length=500)
