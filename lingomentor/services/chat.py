"""
Chat sessions and messages.

A session's `updated_at` tracks its latest message so session lists can be
ordered most-recently-active first. The message insert and the session touch
are committed together.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session, selectinload

from .. import errors, schemas
from ..database import unit_of_work, utcnow
from ..models import ChatMessage, ChatParticipant, ChatSession

logger = logging.getLogger(__name__)


def _latest_message(db: Session, session_id: int) -> ChatMessage | None:
    return (
        db.query(ChatMessage)
        .options(selectinload(ChatMessage.sender))
        .filter(ChatMessage.session_id == session_id)
        .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
        .first()
    )


def _session_view(session: ChatSession, messages: list[ChatMessage]) -> dict:
    return {
        "id": session.id,
        "name": session.name,
        "created_at": session.created_at,
        "updated_at": session.updated_at,
        "participants": session.participants,
        "messages": messages,
    }


def list_sessions(db: Session, user_id: int) -> list[dict]:
    sessions = (
        db.query(ChatSession)
        .options(selectinload(ChatSession.participants).selectinload(ChatParticipant.user))
        .filter(ChatSession.participants.any(ChatParticipant.user_id == user_id))
        .order_by(ChatSession.updated_at.desc(), ChatSession.id.desc())
        .all()
    )
    views = []
    for session in sessions:
        latest = _latest_message(db, session.id)
        views.append(_session_view(session, [latest] if latest else []))
    return views


def create_session(db: Session, payload: schemas.ChatSessionCreate) -> dict:
    if not payload.participants:
        raise errors.ValidationError("At least one participant required")

    now = utcnow()
    with unit_of_work(db):
        session = ChatSession(
            name=payload.name or f"Chat Session {now:%Y-%m-%d %H:%M:%S}",
            created_at=now,
            updated_at=now,
        )
        for p in payload.participants:
            session.participants.append(
                ChatParticipant(user_id=p.user_id, role=p.role, language=p.language)
            )
        db.add(session)
        db.flush()
        logger.info("Created chat session %s with %d participant(s)", session.id, len(payload.participants))
    return _session_view(session, [])


def list_messages(db: Session, session_id: int) -> list[ChatMessage]:
    return (
        db.query(ChatMessage)
        .options(selectinload(ChatMessage.sender))
        .filter(ChatMessage.session_id == session_id)
        .order_by(ChatMessage.created_at.asc(), ChatMessage.id.asc())
        .all()
    )


def create_message(db: Session, payload: schemas.ChatMessageCreate) -> ChatMessage:
    with unit_of_work(db):
        session = db.get(ChatSession, payload.session_id)
        if session is None:
            raise errors.NotFoundError("Chat session not found")

        now = utcnow()
        message = ChatMessage(**payload.model_dump(), created_at=now)
        db.add(message)
        session.updated_at = now
        db.flush()
    return message
