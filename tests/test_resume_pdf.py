from pathlib import Path

import pytest
from pypdf import PdfReader

from resume_share.export.resume_helpers import clean_list, escape, format_date_range, parse_date
from resume_share.export.resume_pdf import export_resume_to_pdf

RESUME = {
    "info": {"name": "Mona Lisa", "email": "mona@example.com", "phone": "555-0100"},
    "educations": [{"school": "State University", "major": "CS", "startTime": "2014-09", "endTime": "2018-06"}],
    "workExperiences": [
        {
            "company": "Octo Corp",
            "position": "Engineer",
            "startTime": "2018-07",
            "untilNow": True,
            "projects": [{"name": "Billing", "details": ["- Built <invoices> & receipts"]}],
        }
    ],
    "personalProjects": [{"title": "dotfiles", "techs": ["bash"]}],
    "others": {"supplements": ["Speaker"], "socialLinks": [{"name": "blog", "url": "https://mona.example.com"}]},
}


def _pdf_text(path):
    reader = PdfReader(str(path))
    return "\n".join((page.extract_text() or "") for page in reader.pages)


def test_export_creates_valid_pdf(tmp_path):
    path = export_resume_to_pdf(resume=RESUME, out_path=tmp_path / "out" / "r.pdf", author="octocat")

    assert path.exists()
    raw = Path(path).read_bytes()
    assert raw[:4] == b"%PDF"
    assert len(raw) > 1000


@pytest.mark.pdf_text
def test_export_contains_sections(tmp_path):
    path = export_resume_to_pdf(
        resume=RESUME,
        out_path=tmp_path / "r.pdf",
        author="octocat",
        source_url="http://localhost:8000/resume/abc",
    )
    text = _pdf_text(path)

    assert "MONA LISA" in text
    assert "EDUCATION" in text
    assert "WORK EXPERIENCE" in text
    assert "Octo Corp" in text
    assert "Built <invoices> & receipts" in text
    assert "PROJECTS" in text
    assert "OTHERS" in text
    assert "http://localhost:8000/resume/abc" in text


@pytest.mark.pdf_text
def test_export_empty_resume_uses_author(tmp_path):
    path = export_resume_to_pdf(resume={}, out_path=tmp_path / "empty.pdf", author="octocat")
    text = _pdf_text(path)
    assert "OCTOCAT" in text
    assert "EDUCATION" not in text


def test_resume_helpers():
    assert parse_date("2018-07").year == 2018
    assert parse_date("nope") is None
    assert format_date_range("2018-07", "2019-01") == "Jul 2018 – Jan 2019"
    assert format_date_range("2018-07", "2019-01", until_now=True) == "Jul 2018 – Present"
    assert format_date_range(None, None) == ""
    assert clean_list(["- a", " ", "• b", 3]) == ["a", "b", "3"]
    assert escape("<a & b>") == "&lt;a &amp; b&gt;"


@pytest.mark.pdf_text
def test_export_tolerates_non_object_sections(tmp_path):
    path = export_resume_to_pdf(
        resume={"info": "Mona", "others": [], "educations": "none", "workExperiences": [1, "x"]},
        out_path=tmp_path / "odd.pdf",
        author="octocat",
    )
    text = _pdf_text(path)
    assert "OCTOCAT" in text
    assert "OTHERS" not in text
    assert "WORK EXPERIENCE" not in text
