"""
Sample quiz question bank and the offline job that pre-translates it.

Each question gets `translations[lang] = {"question": ..., "options": [...]}`
for every target language it does not have yet. A language that fails to
translate is logged and left out; the next run picks it up again.
"""

from __future__ import annotations

import copy
import logging
from typing import Iterable

from .errors import UpstreamError
from .translation import Translator

logger = logging.getLogger(__name__)

SOURCE_LANGUAGE = "en"

LANGUAGES = [
    "es", "hi", "fr", "de", "zh", "ar", "ru", "ja", "ko", "pt", "it", "tr",
    "bn", "pa", "jv", "ms", "vi", "ta", "ur", "fa", "sw", "mr", "te", "th",
]

SAMPLE_QUESTIONS = {
    "programming-basics": [
        {
            "id": 1,
            "type": "voice-mcq",
            "question": "What is HTML primarily used for?",
            "options": [
                "Programming logic",
                "Creating web page structure",
                "Database management",
                "Mobile app development",
            ],
            "correctAnswer": "Creating web page structure",
            "difficulty": "easy",
            "points": 10,
            "translations": {},
        },
        {
            "id": 2,
            "type": "open-voice",
            "question": "Explain what a variable is in programming and give an example.",
            "correctAnswer": "variable stores data",
            "difficulty": "medium",
            "points": 15,
            "translations": {},
        },
    ],
    "web-development": [
        {
            "id": 1,
            "type": "voice-mcq",
            "question": "What does CSS stand for?",
            "options": [
                "Computer Style Sheets",
                "Cascading Style Sheets",
                "Creative Style System",
                "Code Style Standards",
            ],
            "correctAnswer": "Cascading Style Sheets",
            "difficulty": "easy",
            "points": 10,
            "translations": {},
        },
        {
            "id": 2,
            "type": "open-voice",
            "question": "Describe the purpose of JavaScript in web development.",
            "correctAnswer": "JavaScript adds interactivity",
            "difficulty": "medium",
            "points": 15,
            "translations": {},
        },
    ],
}


def translate_question(question: dict, lang: str, translate: Translator) -> dict:
    translated = {"question": translate(question["question"], SOURCE_LANGUAGE, lang)}
    if question.get("options"):
        translated["options"] = [
            translate(option, SOURCE_LANGUAGE, lang) for option in question["options"]
        ]
    return translated


def translate_question_bank(
    bank: dict,
    languages: Iterable[str],
    translate: Translator,
) -> dict:
    """Return a copy of `bank` with the missing translations filled in."""
    result = copy.deepcopy(bank)
    languages = list(languages)

    for category, questions in result.items():
        for question in questions:
            translations = question.setdefault("translations", {})
            for lang in languages:
                if lang in translations:
                    continue
                logger.info("Translating Q%s (%s) to %s", question.get("id"), category, lang)
                try:
                    translations[lang] = translate_question(question, lang, translate)
                except UpstreamError as exc:
                    logger.warning(
                        "Failed to translate Q%s (%s) to %s: %s",
                        question.get("id"), category, lang, getattr(exc, "details", None) or exc,
                    )
    return result
