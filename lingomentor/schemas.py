"""
API schemas (request/response models).

Wire format is camelCase (`userId`, `avatarUrl`, ...); snake_case input is
accepted too. Request bodies reject unknown fields. List-valued columns are
decoded from their stored JSON text on the way out.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .codec import decode_list


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(ApiModel):
    model_config = ConfigDict(extra="forbid")


# ── Users & profiles ────────────────────────────────────────────────────────

class UserBrief(ApiModel):
    id: int
    name: Optional[str] = None
    email: str


class UserOut(UserBrief):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileOut(ApiModel):
    id: int
    user_id: int
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    languages: List[str] = []
    age: Optional[int] = None
    education: Optional[str] = None
    interests: List[str] = []
    goals: Optional[str] = None
    expertise: Optional[str] = None
    experience: Optional[str] = None
    availability: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("languages", "interests", mode="before")
    @classmethod
    def _decode_lists(cls, v):
        return decode_list(v)


class ProfileWithUser(ProfileOut):
    user: Optional[UserOut] = None


class ProfileFields(RequestModel):
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    languages: Optional[List[str]] = None
    age: Optional[int] = None
    education: Optional[str] = None
    interests: Optional[List[str]] = None
    goals: Optional[str] = None
    expertise: Optional[str] = None
    experience: Optional[str] = None
    availability: Optional[str] = None


class UserCreate(ProfileFields):
    name: Optional[str] = None
    email: str = Field(..., min_length=3, max_length=320)


class UserUpdate(RequestModel):
    name: Optional[str] = None
    email: Optional[str] = Field(default=None, min_length=3, max_length=320)


class IdentityMetadata(ApiModel):
    model_config = ConfigDict(extra="ignore")

    full_name: Optional[str] = None


class IdentitySync(RequestModel):
    """Identity-provider user as handed to the client after sign-in."""

    email: str = Field(..., min_length=3, max_length=320)
    user_metadata: IdentityMetadata = IdentityMetadata()


class ProfileCreate(ProfileFields):
    user_id: int


class ProfileUpdate(ProfileFields):
    pass


class UserUpsertResult(ApiModel):
    user: UserOut
    profile: ProfileOut


# ── Achievements, voice records, quizzes ────────────────────────────────────

class AchievementOut(ApiModel):
    id: int
    user_id: int
    title: str
    created_at: Optional[datetime] = None


class AchievementWithUser(AchievementOut):
    user: Optional[UserOut] = None


class AchievementCreate(RequestModel):
    user_id: int
    title: str = Field(..., min_length=1)


class AchievementUpdate(RequestModel):
    title: Optional[str] = Field(default=None, min_length=1)


class VoiceRecordOut(ApiModel):
    id: int
    user_id: int
    url: str
    created_at: Optional[datetime] = None


class VoiceRecordWithUser(VoiceRecordOut):
    user: Optional[UserOut] = None


class VoiceRecordCreate(RequestModel):
    user_id: int
    url: str = Field(..., min_length=1)


class VoiceRecordUpdate(RequestModel):
    url: Optional[str] = Field(default=None, min_length=1)


class QuizOut(ApiModel):
    id: int
    user_id: int
    question: Optional[str] = None
    answer: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[str] = None
    language: Optional[str] = None
    options: List[str] = []
    type: Optional[str] = None
    points: int = 0
    audio_url: Optional[str] = None
    correct_answers: int = 0
    total_answers: int = 0
    created_at: Optional[datetime] = None

    @field_validator("options", mode="before")
    @classmethod
    def _decode_options(cls, v):
        return decode_list(v)


class QuizWithUser(QuizOut):
    user: Optional[UserOut] = None


class QuizCreate(RequestModel):
    user_id: int
    question: Optional[str] = None
    answer: Optional[str] = None
    category: str = "voice-technology"
    difficulty: str = "easy"
    language: str = "en"
    options: List[str] = []
    type: str = "voice-mcq"
    points: int = 10
    audio_url: Optional[str] = None
    correct_answers: int = 0
    total_answers: int = 0


class QuizUpdate(RequestModel):
    question: Optional[str] = None
    answer: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[str] = None
    language: Optional[str] = None
    options: Optional[List[str]] = None
    type: Optional[str] = None
    points: Optional[int] = None
    audio_url: Optional[str] = None
    correct_answers: Optional[int] = None
    total_answers: Optional[int] = None


class UserDetail(UserOut):
    profile: Optional[ProfileOut] = None
    quizzes: List[QuizOut] = []
    achievements: List[AchievementOut] = []
    voice_records: List[VoiceRecordOut] = []


class UserWithProfile(UserOut):
    profile: Optional[ProfileOut] = None


# ── Badges ──────────────────────────────────────────────────────────────────

class BadgeOut(ApiModel):
    id: int
    user_id: int
    name: str
    description: str
    icon: str
    color: str
    type: str
    # ORM attribute is `meta`; the column and the wire name are `metadata`
    meta: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("meta", "metadata"),
        serialization_alias="metadata",
    )
    earned_at: Optional[datetime] = None


class BadgeCreate(RequestModel):
    user_id: int
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    metadata: Any = None


class BadgeCheck(RequestModel):
    user_id: int


class BadgeCheckOut(ApiModel):
    awarded: List[str]


# ── Resumes ─────────────────────────────────────────────────────────────────

class ResumeProject(ApiModel):
    title: str = ""
    description: str = ""


class ResumeOut(ApiModel):
    id: int
    user_id: int
    full_name: str
    title: str
    email: str
    phone: str = ""
    location: str = ""
    degree: str = ""
    field: str = ""
    university: str = ""
    graduation_year: str = ""
    skills: List[str] = []
    achievements: List[str] = []
    projects: List[ResumeProject] = []
    certifications: List[str] = []
    is_complete: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("skills", "achievements", "projects", "certifications", mode="before")
    @classmethod
    def _decode_lists(cls, v):
        return decode_list(v)

    @field_validator("phone", "location", "degree", "field", "university", "graduation_year", mode="before")
    @classmethod
    def _none_as_blank(cls, v):
        return "" if v is None else v


class ResumeUpsert(RequestModel):
    user_id: int
    full_name: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = ""
    location: str = ""
    degree: str = ""
    field: str = ""
    university: str = ""
    graduation_year: str = ""
    skills: List[str] = []
    achievements: List[str] = []
    projects: List[ResumeProject] = []
    certifications: List[str] = []
    is_complete: bool = False


class ResumeUpdate(RequestModel):
    id: Optional[int] = None
    full_name: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None
    location: Optional[str] = None
    degree: Optional[str] = None
    field: Optional[str] = None
    university: Optional[str] = None
    graduation_year: Optional[str] = None
    skills: Optional[List[str]] = None
    achievements: Optional[List[str]] = None
    projects: Optional[List[ResumeProject]] = None
    certifications: Optional[List[str]] = None
    is_complete: Optional[bool] = None


# ── Chat ────────────────────────────────────────────────────────────────────

class ParticipantIn(RequestModel):
    user_id: int
    role: str
    language: str


class ParticipantOut(ApiModel):
    id: int
    session_id: int
    user_id: int
    role: Optional[str] = None
    language: Optional[str] = None
    user: Optional[UserBrief] = None


class ChatMessageOut(ApiModel):
    id: int
    session_id: int
    sender_id: int
    original_text: str
    original_language: Optional[str] = None
    translated_text: str
    translated_language: Optional[str] = None
    is_voice: bool = False
    created_at: Optional[datetime] = None
    sender: Optional[UserBrief] = None


class ChatSessionOut(ApiModel):
    id: int
    name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    participants: List[ParticipantOut] = []
    messages: List[ChatMessageOut] = []


class ChatSessionCreate(RequestModel):
    name: Optional[str] = None
    participants: List[ParticipantIn] = []


class ChatMessageCreate(RequestModel):
    session_id: int
    sender_id: int
    original_text: str = Field(..., min_length=1)
    translated_text: str = Field(..., min_length=1)
    original_language: Optional[str] = None
    translated_language: Optional[str] = None
    is_voice: bool = False


# ── Mentors & translation ───────────────────────────────────────────────────

class MentorRegister(RequestModel):
    user_id: int
    expertise: Optional[str] = None
    experience: Optional[str] = None
    bio: Optional[str] = None
    availability: Optional[str] = None
    languages: Optional[List[str]] = None
    interests: Optional[List[str]] = None


class MentorRegistered(ApiModel):
    success: bool = True
    message: str
    profile: ProfileOut


class TranslateRequest(RequestModel):
    text: Optional[str] = None
    from_lang: Optional[str] = None
    to_lang: Optional[str] = None


class TranslationOut(ApiModel):
    success: bool = True
    original_text: str
    translated_text: str
    from_lang: str
    to_lang: str
    timestamp: str


class SuccessOut(ApiModel):
    success: bool = True
