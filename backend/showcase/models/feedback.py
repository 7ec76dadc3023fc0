from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime
from showcase.database import Base

FEEDBACK_CATEGORIES = ("bug", "feature", "other")

class Feedback(Base):
    """Platform feedback, not tied to a project"""
    __tablename__ = "feedback"
    
    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)  # bug, feature, other
    author_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    author = relationship("User", back_populates="feedback")
