from .user import User
from .profile import Profile
from .achievement import Achievement
from .badge import Badge
from .quiz import Quiz
from .voice_record import VoiceRecord
from .resume import Resume
from .chat import ChatSession, ChatParticipant, ChatMessage

__all__ = [
    "User", "Profile", "Achievement", "Badge", "Quiz", "VoiceRecord",
    "Resume", "ChatSession", "ChatParticipant", "ChatMessage",
]
