from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from showcase.database import Base


class Like(Base):
    """One row per (project, user): the row existing is the "liked" state"""
    __tablename__ = "likes"
    
    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # A user can like a project only once
    __table_args__ = (
        UniqueConstraint('project_id', 'user_id', name='unique_project_like'),
    )
    
    project = relationship("Project", back_populates="likes")
    user = relationship("User", back_populates="likes")
