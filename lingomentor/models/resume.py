from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base, utcnow


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)  # at most one per user
    full_name = Column(String(200), nullable=False)
    title = Column(String(200), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(50), default="")
    location = Column(String(200), default="")
    degree = Column(String(200), default="")
    field = Column(String(200), default="")
    university = Column(String(300), default="")
    graduation_year = Column(String(20), default="")
    skills = Column(Text, default="[]")           # ["Python", "SQL"]
    achievements = Column(Text, default="[]")
    projects = Column(Text, default="[]")         # [{title, description}]
    certifications = Column(Text, default="[]")
    is_complete = Column(Boolean, default=False)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="resume")
