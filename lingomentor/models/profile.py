from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base, utcnow


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    bio = Column(Text)
    avatar_url = Column(String(500))
    phone = Column(String(50))
    location = Column(String(200))
    languages = Column(Text, default="[]")   # JSON array text: ["en", "hi"]
    age = Column(Integer)
    education = Column(String(300))
    interests = Column(Text, default="[]")   # JSON array text
    goals = Column(Text)
    expertise = Column(String(300))          # non-null => mentor
    experience = Column(String(300))
    availability = Column(String(200))
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="profile")
