"""
Resume PDF builder.

`layout_resume` places every piece of text at a fixed position on a single
A4 page (millimetres, origin top-left). Sections do not reflow: long
content runs into the next section. `render_resume_pdf` draws that layout
with ReportLab.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Mapping

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

PAGE_CENTER_X = 105
LEFT_X = 20
RIGHT_X = 120
BULLET = "•"


@dataclass(frozen=True)
class TextItem:
    text: str
    x: float
    y: float
    size: int = 12
    bold: bool = False
    centered: bool = False


def layout_resume(data: Mapping) -> list[TextItem]:
    items: list[TextItem] = []

    def add(text, x, y, size=12, bold=False, centered=False):
        items.append(TextItem(str(text), x, y, size, bold, centered))

    # Header
    add(data.get("full_name") or "YOUR NAME", PAGE_CENTER_X, 30, size=24, bold=True, centered=True)
    add(data.get("title") or "Professional Title", PAGE_CENTER_X, 40, size=16, centered=True)

    # Contact
    add("CONTACT", LEFT_X, 60, bold=True)
    y = 70
    for key in ("email", "phone", "location"):
        if data.get(key):
            add(data[key], LEFT_X, y)
            y += 8

    # Education
    if data.get("degree") or data.get("university"):
        add("EDUCATION", LEFT_X, 100, bold=True)
        y = 110
        if data.get("degree"):
            add(data["degree"], LEFT_X, y)
            y += 6
        if data.get("field"):
            add(f"in {data['field']}", LEFT_X, y)
            y += 6
        if data.get("university"):
            add(data["university"], LEFT_X, y)
            y += 6
        if data.get("graduation_year"):
            add(data["graduation_year"], LEFT_X, y)

    skills = data.get("skills") or []
    if skills:
        add("SKILLS", LEFT_X, 140, bold=True)
        add(f" {BULLET} ".join(skills), LEFT_X, 150)

    achievements = data.get("achievements") or []
    if achievements:
        add("ACHIEVEMENTS", LEFT_X, 170, bold=True)
        for i, achievement in enumerate(achievements):
            add(f"{BULLET} {achievement}", LEFT_X, 180 + i * 6)

    certifications = data.get("certifications") or []
    if certifications:
        add("CERTIFICATIONS", LEFT_X, 200, bold=True)
        for i, cert in enumerate(certifications):
            add(f"{BULLET} {cert}", LEFT_X, 210 + i * 6)

    # Projects go in the right-hand column
    projects = data.get("projects") or []
    if projects:
        add("PROJECTS", RIGHT_X, 60, bold=True)
        y = 70
        for project in projects:
            add(project.get("title", ""), RIGHT_X, y, bold=True)
            y += 6
            add(f"{BULLET} {project.get('description', '')}", RIGHT_X, y)
            y += 10

    return items


def render_resume_pdf(data: Mapping) -> bytes:
    buf = BytesIO()
    _, page_height = A4
    pdf = canvas.Canvas(buf, pagesize=A4)
    pdf.setTitle(f"{data.get('full_name') or 'Resume'}")

    for item in layout_resume(data):
        pdf.setFont("Helvetica-Bold" if item.bold else "Helvetica", item.size)
        x, y = item.x * mm, page_height - item.y * mm
        if item.centered:
            pdf.drawCentredString(x, y, item.text)
        else:
            pdf.drawString(x, y, item.text)

    pdf.showPage()
    pdf.save()
    return buf.getvalue()


def resume_filename(data: Mapping) -> str:
    return f"{data.get('full_name') or 'resume'}_resume.pdf"
