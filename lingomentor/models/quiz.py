from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base, utcnow


class Quiz(Base):
    __tablename__ = "quizzes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    question = Column(Text)
    answer = Column(Text)
    category = Column(String(100), default="voice-technology")
    difficulty = Column(String(50), default="easy")
    language = Column(String(20), default="en")
    options = Column(Text, default="[]")          # JSON array text
    type = Column(String(50), default="voice-mcq")
    points = Column(Integer, default=10)
    audio_url = Column(String(500))
    correct_answers = Column(Integer, default=0)
    total_answers = Column(Integer, default=0)
    created_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="quizzes")
