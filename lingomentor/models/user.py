from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from ..database import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200))
    email = Column(String(320), unique=True, index=True, nullable=False)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    profile = relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")
    quizzes = relationship("Quiz", back_populates="user", cascade="all, delete-orphan", order_by="Quiz.id")
    achievements = relationship("Achievement", back_populates="user", cascade="all, delete-orphan", order_by="Achievement.id")
    voice_records = relationship("VoiceRecord", back_populates="user", cascade="all, delete-orphan", order_by="VoiceRecord.id")
    badges = relationship("Badge", back_populates="user", cascade="all, delete-orphan")
    resume = relationship("Resume", back_populates="user", uselist=False, cascade="all, delete-orphan")
    chat_participations = relationship("ChatParticipant", back_populates="user", cascade="all, delete-orphan")
    sent_messages = relationship("ChatMessage", back_populates="sender", cascade="all, delete-orphan")
