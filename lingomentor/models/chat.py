from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base, utcnow


class ChatSession(Base):
    __tablename__ = "chat_sessions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(300))
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow)   # advanced whenever a message is appended

    participants = relationship("ChatParticipant", back_populates="session", cascade="all, delete-orphan", order_by="ChatParticipant.id")
    messages = relationship("ChatMessage", back_populates="session", cascade="all, delete-orphan", order_by="ChatMessage.created_at")


class ChatParticipant(Base):
    __tablename__ = "chat_participants"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("chat_sessions.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role = Column(String(50))        # mentor, student
    language = Column(String(20))    # BCP-47 tag, e.g. "hi-IN"

    session = relationship("ChatSession", back_populates="participants")
    user = relationship("User", back_populates="chat_participations")


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("chat_sessions.id"), nullable=False, index=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    original_text = Column(Text, nullable=False)
    original_language = Column(String(20))
    translated_text = Column(Text, nullable=False)
    translated_language = Column(String(20))
    is_voice = Column(Boolean, default=False)
    created_at = Column(DateTime, default=utcnow, index=True)

    session = relationship("ChatSession", back_populates="messages")
    sender = relationship("User", back_populates="sent_messages")
