from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ..database import Base, utcnow


class Badge(Base):
    __tablename__ = "badges"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_badges_user_id_name"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(String(500), nullable=False)
    icon = Column(String(100), nullable=False)
    color = Column(String(100), nullable=False)
    type = Column(String(50), nullable=False)   # quiz, level, streak, category, accuracy, milestone
    meta = Column("metadata", Text)             # `metadata` is reserved on declarative classes
    earned_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="badges")
