"""Founder profile model"""
from sqlalchemy import Column, JSON, String, Text
from aus_cms.models.base import BaseModel

FOUNDER_SINGLETON_KEY = "founder"


class Founder(BaseModel):
    """Founder profile shown on the public site"""
    __tablename__ = "founders"

    # Unique sentinel so the table holds at most one profile
    singleton_key = Column(String(32), unique=True, nullable=False, default=FOUNDER_SINGLETON_KEY)
    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    bio = Column(Text, nullable=False)
    image = Column(Text, nullable=False)  # Asset URL
    badges = Column(JSON, default=list, nullable=False)

    def __repr__(self):
        return f"<Founder(id={self.id}, name={self.name})>"
