from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from showcase.database import Base

class SiteVisit(Base):
    __tablename__ = "site_visits"
    
    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(String(255), nullable=False, index=True)
    user_agent = Column(String(500), nullable=True)
    ip_address = Column(String(64), nullable=True)
    visit_date = Column(DateTime, default=datetime.utcnow, index=True)
