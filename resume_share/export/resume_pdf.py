# resume_share/export/resume_pdf.py
"""
Render a user's resume content (the JSON object saved by the editor) to a PDF
using ReportLab (Platypus).

Layout:
- Name (largest)
- line between name and contact
- Contact line
- EDUCATION
- WORK EXPERIENCE (company, position, dates, project bullets)
- PROJECTS
- OTHERS (supplements, social links)
- footer paragraph with the public share URL, when given

Sections with no entries are left out.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from reportlab.lib.pagesizes import LETTER
from reportlab.lib.units import inch
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.platypus import (
    SimpleDocTemplate,
    Paragraph,
    Spacer,
    ListFlowable,
    ListItem,
)
from reportlab.platypus.flowables import HRFlowable

from resume_share.export.resume_helpers import clean_list, escape, format_date_range


def _dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _dicts(values: Any) -> List[Dict[str, Any]]:
    if not isinstance(values, list):
        return []
    return [v for v in values if isinstance(v, dict)]


def export_resume_to_pdf(
    *,
    resume: Dict[str, Any],
    out_path: str | Path,
    author: str,
    source_url: Optional[str] = None,
) -> Path:
    filepath = Path(out_path)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    info = _dict(resume.get("info"))
    name = str(info.get("name") or author).strip() or author

    doc = SimpleDocTemplate(
        str(filepath),
        pagesize=LETTER,
        leftMargin=0.85 * inch,
        rightMargin=0.85 * inch,
        topMargin=0.85 * inch,
        bottomMargin=0.85 * inch,
        title=f"Resume - {name}",
        author=author,
    )

    styles = getSampleStyleSheet()

    NameStyle = ParagraphStyle(
        "NameStyle",
        parent=styles["Normal"],
        fontName="Helvetica-Bold",
        fontSize=24,
        leading=28,
        alignment=TA_LEFT,
        spaceAfter=4,
    )

    ContactStyle = ParagraphStyle(
        "ContactStyle",
        parent=styles["Normal"],
        fontName="Helvetica",
        fontSize=11,
        leading=14,
        spaceAfter=6,
    )

    SectionStyle = ParagraphStyle(
        "SectionStyle",
        parent=styles["Normal"],
        fontName="Helvetica-Bold",
        fontSize=14,
        leading=18,
        spaceAfter=6,
    )

    EntryTitleStyle = ParagraphStyle(
        "EntryTitleStyle",
        parent=styles["Normal"],
        fontName="Helvetica-Bold",
        fontSize=12,
        leading=15,
        spaceBefore=8,
        spaceAfter=2,
    )

    MetaItalic = ParagraphStyle(
        "MetaItalic",
        parent=styles["Normal"],
        fontName="Helvetica-Oblique",
        fontSize=10.5,
        leading=13,
        spaceAfter=6,
    )

    Body = ParagraphStyle(
        "Body",
        parent=styles["Normal"],
        fontName="Helvetica",
        fontSize=11,
        leading=14,
        spaceAfter=2,
    )

    def rule() -> HRFlowable:
        return HRFlowable(width="100%", thickness=0.8, lineCap="round", spaceBefore=6, spaceAfter=10)

    def section(title: str) -> None:
        story.append(Spacer(1, 14))
        story.append(Paragraph(title, SectionStyle))

    def bullets(items: List[str]) -> None:
        if not items:
            return
        story.append(
            ListFlowable(
                [ListItem(Paragraph(escape(b), Body)) for b in items],
                bulletType="bullet",
                leftIndent=18,
                bulletFontName="Helvetica",
                bulletFontSize=10,
            )
        )

    story: List[Any] = []

    # ---------------------------
    # Header
    # ---------------------------
    story.append(Paragraph(escape(name.upper()), NameStyle))
    story.append(rule())
    contact = [str(info.get(k)).strip() for k in ("phone", "email", "location") if info.get(k)]
    if contact:
        story.append(Paragraph(escape(" | ".join(contact)), ContactStyle))
    if info.get("intention"):
        story.append(Paragraph(escape(info["intention"]), MetaItalic))

    # ---------------------------
    # EDUCATION
    # ---------------------------
    educations = _dicts(resume.get("educations"))
    if educations:
        section("EDUCATION")
        for edu in educations:
            title = " - ".join(str(edu[k]) for k in ("school", "major") if edu.get(k)) or "School"
            story.append(Paragraph(escape(title), EntryTitleStyle))
            meta = [m for m in (edu.get("education"), format_date_range(edu.get("startTime"), edu.get("endTime"))) if m]
            if meta:
                story.append(Paragraph(escape(" | ".join(meta)), MetaItalic))
            bullets(clean_list(edu.get("experiences")))

    # ---------------------------
    # WORK EXPERIENCE
    # ---------------------------
    works = _dicts(resume.get("workExperiences"))
    if works:
        section("WORK EXPERIENCE")
        for work in works:
            story.append(Paragraph(escape(work.get("company") or "Company"), EntryTitleStyle))
            date_line = format_date_range(work.get("startTime"), work.get("endTime"), bool(work.get("untilNow")))
            meta = [m for m in (work.get("position"), date_line) if m]
            if meta:
                story.append(Paragraph(escape(" | ".join(meta)), MetaItalic))
            for project in _dicts(work.get("projects")):
                if project.get("name"):
                    story.append(Paragraph(f"<b>{escape(project['name'])}</b>", Body))
                bullets(clean_list(project.get("details")))
            story.append(Spacer(1, 6))

    # ---------------------------
    # PROJECTS
    # ---------------------------
    projects = _dicts(resume.get("personalProjects"))
    if projects:
        section("PROJECTS")
        for project in projects:
            story.append(Paragraph(escape(project.get("title") or "Untitled project"), EntryTitleStyle))
            techs = clean_list(project.get("techs"))
            if techs:
                story.append(Paragraph(escape(", ".join(techs)), MetaItalic))
            if project.get("desc"):
                story.append(Paragraph(escape(project["desc"]), Body))

    # ---------------------------
    # OTHERS
    # ---------------------------
    others = _dict(resume.get("others"))
    supplements = clean_list(others.get("supplements"))
    links = [
        f"{link.get('name') or link.get('url')}: {link.get('url')}"
        for link in _dicts(others.get("socialLinks"))
        if link.get("url")
    ]
    if supplements or links:
        section("OTHERS")
        bullets(supplements)
        for line in links:
            story.append(Paragraph(escape(line), Body))

    if source_url:
        story.append(Spacer(1, 18))
        story.append(Paragraph(escape(source_url), MetaItalic))

    doc.build(story)
    return filepath
