from sqlalchemy import Column, String, DateTime, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime
from showcase.database import Base

class User(Base):
    __tablename__ = "users"
    
    id = Column(String(64), primary_key=True)  # user_<hex> for local accounts, <provider>_<id> for OAuth
    email = Column(String(255), unique=True, index=True, nullable=True)
    password_hash = Column(String(255), nullable=True)  # None for OAuth-only accounts
    nickname = Column(String(20), unique=True, index=True, nullable=True)
    profile_image_url = Column(String(500), nullable=True)
    provider = Column(String(50), nullable=False, default="local")  # local, google, github
    has_set_nickname = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    projects = relationship("Project", back_populates="author")
    likes = relationship("Like", back_populates="user")
    comments = relationship("Comment", back_populates="author")
    feedback = relationship("Feedback", back_populates="author")
