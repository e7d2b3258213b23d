from io import BytesIO

import pytest
from docx import Document

import resume_reader.extractor as ex
from resume_reader.contact import extract_contact, extract_links


def _docx_bytes() -> bytes:
    doc = Document()
    doc.add_paragraph("Jane Doe")
    doc.add_paragraph("Senior   Backend    Engineer")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Python"
    table.rows[0].cells[1].text = "PostgreSQL"
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


@pytest.mark.parametrize("name, fmt", [("cv.pdf", "pdf"), ("CV.PDF", "pdf"), ("resume.docx", "docx")])
def test_detect_format_by_extension(name, fmt):
    assert ex.detect_format(name) == fmt


@pytest.mark.parametrize("name", ["resume.txt", "resume.doc", "resume", ""])
def test_detect_format_rejects_others(name):
    with pytest.raises(ex.UnsupportedFormatError):
        ex.detect_format(name)


def test_extract_text_rejects_mismatched_magic_bytes():
    with pytest.raises(ex.ResumeParseError, match="Invalid PDF"):
        ex.extract_text(b"PK\x03\x04not a pdf", "resume.pdf")
    with pytest.raises(ex.ResumeParseError, match="Invalid DOCX"):
        ex.extract_text(b"%PDF-1.4", "resume.docx")
    with pytest.raises(ex.ResumeParseError):
        ex.extract_text(b"", "resume.pdf")


def test_extract_text_pdf_normalizes_reader_output(monkeypatch):
    monkeypatch.setitem(ex._READERS, "pdf", lambda content: "Backend engi-\nneer\r\n\n\n\nPython   SQL")
    out = ex.extract_text(b"%PDF-1.4 ...", "resume.pdf")
    assert out == "Backend engineer\n\nPython SQL"


def test_extract_text_wraps_reader_failure(monkeypatch):
    def broken(content):
        raise RuntimeError("xref table corrupt")

    monkeypatch.setitem(ex._READERS, "pdf", broken)
    with pytest.raises(ex.ResumeParseError, match="xref"):
        ex.extract_text(b"%PDF-1.4", "resume.pdf")


def test_extract_text_reads_real_docx_paragraphs_and_tables():
    out = ex.extract_text(_docx_bytes(), "resume.docx")
    assert "Jane Doe" in out
    assert "Senior Backend Engineer" in out
    assert "Python | PostgreSQL" in out


def test_corrupt_docx_zip_is_a_parse_error():
    with pytest.raises(ex.ResumeParseError):
        ex.extract_text(b"PK\x03\x04garbage", "resume.docx")


def test_extract_links_prefers_github_for_portfolio():
    text = "See https://janedoe.dev, https://github.com/janedoe and linkedin.com/in/jane-doe)."
    links = extract_links(text)
    assert links["linkedin_url"] == "linkedin.com/in/jane-doe"
    assert links["portfolio_url"] == "https://github.com/janedoe"


def test_extract_links_falls_back_to_other_url():
    links = extract_links("Portfolio: www.janedoe.dev")
    assert links == {"linkedin_url": None, "portfolio_url": "www.janedoe.dev"}


def test_extract_links_empty_text():
    assert extract_links("") == {"linkedin_url": None, "portfolio_url": None}


def test_extract_contact():
    info = extract_contact("Jane Doe\njane.doe@mail.com | (555) 123-4567")
    assert info["email"] == "jane.doe@mail.com"
    assert info["phone"] == "(555) 123-4567"


def test_cli_writes_text_and_contact(tmp_path):
    import json

    from resume_reader.main import main

    src = tmp_path / "jane.docx"
    src.write_bytes(_docx_bytes())
    out = tmp_path / "out.json"
    main([str(src), "--out", str(out)])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert "Jane Doe" in data["text"]
    assert set(data["contact"]) == {"email", "phone", "linkedin_url", "portfolio_url"}
