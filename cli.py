#!/usr/bin/env python3
"""
LingoMentor CLI
===============
Interactive terminal interface for the offline jobs that do not need the
web server: question-bank translation, resume PDF export, DB setup and
identity sync.

Usage:
    python cli.py
"""

import json
import logging
import os
import sys
from pathlib import Path

# Ensure we can import lingomentor
sys.path.insert(0, str(Path(__file__).parent))

# Load .env
from dotenv import load_dotenv
load_dotenv()

from lingomentor import schemas
from lingomentor.config import settings
from lingomentor.database import SessionLocal, init_db
from lingomentor.errors import AppError
from lingomentor.pdf import render_resume_pdf, resume_filename
from lingomentor.question_bank import LANGUAGES, SAMPLE_QUESTIONS, translate_question_bank
from lingomentor.services import resumes as resume_service
from lingomentor.services import users as user_service
from lingomentor.translation import translate_text


# ── UI helpers ──────────────────────────────────────────────────────────────

def clr():
    os.system("clear" if os.name != "nt" else "cls")

def header():
    print("\n" + "="*60)
    print("        LingoMentor  admin console")
    print("="*60)

def section(title: str):
    print(f"\n{'─'*55}")
    print(f"  {title}")
    print("─"*55)

def ask(prompt: str, default: str = "") -> str:
    if default:
        val = input(f"{prompt} [{default}]: ").strip()
        return val or default
    return input(f"{prompt}: ").strip()

def print_json(data, indent: int = 2):
    print(json.dumps(data, indent=indent, ensure_ascii=False, default=str))


# ── Flows ───────────────────────────────────────────────────────────────────

def flow_translate_questions():
    section("TRANSLATE QUESTION BANK")
    print(f"Provider: {settings.TRANSLATION_PROVIDER}")
    raw = ask("Target languages (comma separated, 'all' for every one)", "es,fr")
    languages = LANGUAGES if raw.lower() == "all" else [l.strip() for l in raw.split(",") if l.strip()]

    result = translate_question_bank(SAMPLE_QUESTIONS, languages, translate_text)

    out = ask("Write to file (blank prints to screen)")
    if out:
        Path(out).write_text(json.dumps(result, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Saved {out}")
    else:
        print_json(result)


def flow_export_resume():
    section("EXPORT RESUME PDF")
    user_id = ask("User id")
    if not user_id.isdigit():
        print("User id must be a number.")
        return

    db = SessionLocal()
    try:
        data = resume_service.resume_document_data(db, int(user_id))
    except AppError as exc:
        print(f"\nError: {exc.message}")
        return
    finally:
        db.close()

    path = Path(ask("Output file", resume_filename(data)))
    path.write_bytes(render_resume_pdf(data))
    print(f"Saved {path} ({path.stat().st_size} bytes)")


def flow_sync_identity():
    section("SYNC IDENTITY")
    email = ask("Email")
    full_name = ask("Full name (optional)")

    db = SessionLocal()
    try:
        identity = schemas.IdentitySync(email=email, user_metadata={"full_name": full_name or None})
        result = user_service.sync_identity(db, identity)
        print_json(schemas.UserUpsertResult.model_validate(result).model_dump(by_alias=True))
    except AppError as exc:
        print(f"\nError: {exc.message}")
    except ValueError as exc:
        print(f"\nInvalid input: {exc}")
    finally:
        db.close()


# ── Main ─────────────────────────────────────────────────────────────────────

def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    clr()
    header()

    if settings.TRANSLATION_PROVIDER == "google" and not settings.GOOGLE_TRANSLATE_API_KEY:
        print("\n⚠  GOOGLE_TRANSLATE_API_KEY not set, question-bank translation will fail.")

    while True:
        section("MAIN MENU")
        print("  1  Translate the quiz question bank")
        print("  2  Export a user's resume as PDF")
        print("  3  Create database tables")
        print("  4  Sync a signed-in identity")
        print("  0  Exit")

        choice = ask("\nChoice")

        if choice == "1":
            flow_translate_questions()

        elif choice == "2":
            flow_export_resume()

        elif choice == "3":
            init_db()
            print(f"Tables ready at {settings.DATABASE_URL}")

        elif choice == "4":
            flow_sync_identity()

        elif choice == "0":
            print("\nBye!\n")
            break


if __name__ == "__main__":
    main()
