import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ... import errors, schemas
from ...translation import Translator, get_translator

logger = logging.getLogger(__name__)

router = APIRouter()


def _translate(text: str, from_lang: str, to_lang: str, translate: Translator) -> dict:
    translated = translate(text, from_lang, to_lang)
    return {
        "success": True,
        "original_text": text,
        "translated_text": translated,
        "from_lang": from_lang,
        "to_lang": to_lang,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("", response_model=schemas.TranslationOut)
def translate_post(payload: schemas.TranslateRequest, translate: Translator = Depends(get_translator)):
    if not payload.text or not payload.from_lang or not payload.to_lang:
        raise errors.ValidationError("Missing required parameters: text, fromLang, toLang")
    return _translate(payload.text, payload.from_lang, payload.to_lang, translate)


@router.get("", response_model=schemas.TranslationOut)
def translate_get(
    text: Optional[str] = None,
    from_lang: Optional[str] = Query(default=None, alias="from"),
    to_lang: Optional[str] = Query(default=None, alias="to"),
    translate: Translator = Depends(get_translator),
):
    if not text or not from_lang or not to_lang:
        raise errors.ValidationError("Missing required parameters: text, from, to")
    return _translate(text, from_lang, to_lang, translate)
