"""
Small helpers shared by the entity services.
"""

from __future__ import annotations

from typing import Any, Iterable

from sqlalchemy.orm import Session

from .. import errors
from ..codec import encode_list


def get_or_404(db: Session, model, obj_id: int, label: str, options: Iterable[Any] = ()):
    query = db.query(model)
    for opt in options:
        query = query.options(opt)
    obj = query.filter(model.id == obj_id).first()
    if obj is None:
        raise errors.NotFoundError(f"{label} not found")
    return obj


def apply_changes(obj, changes: dict, list_fields: Iterable[str] = ()) -> None:
    """Partial merge: only keys present in `changes` are written."""
    list_fields = set(list_fields)
    for key, value in changes.items():
        if key in list_fields:
            value = encode_list(value)
        setattr(obj, key, value)
