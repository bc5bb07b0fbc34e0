"""Tests for document decoding and the resume parser tool."""

from __future__ import annotations

import io
import os

import pytest

from ats_checker.errors import DecodeError, UnsupportedFormat
from ats_checker.tools import ResumeParserTool, decode_document


def _docx_bytes(*paragraphs: str, table_rows=()) -> bytes:
    from docx import Document

    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    if table_rows:
        table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def _pdf_bytes(text: str = "") -> bytes:
    import fitz

    doc = fitz.open()
    page = doc.new_page()
    if text:
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


class TestDecodeDocument:
    def test_plain_text(self):
        assert decode_document("Jane Smith\nEngineer".encode("utf-8"), ".txt") == "Jane Smith\nEngineer"

    def test_text_bom_is_stripped(self):
        assert decode_document(b"\xef\xbb\xbfJane Smith", "txt") == "Jane Smith"

    def test_extension_is_case_insensitive(self):
        assert decode_document(b"Jane Smith", ".TXT") == "Jane Smith"

    def test_invalid_utf8(self):
        with pytest.raises(DecodeError, match="not valid UTF-8"):
            decode_document(b"\xff\xfe\xfa", ".txt")

    @pytest.mark.parametrize("extension", [".rtf", ".png", "", "exe"])
    def test_unsupported_extension(self, extension):
        with pytest.raises(UnsupportedFormat) as exc_info:
            decode_document(b"data", extension)
        assert exc_info.value.extension == extension
        assert ".pdf" in exc_info.value.supported

    def test_whitespace_only_text(self):
        with pytest.raises(DecodeError, match="No extractable text"):
            decode_document(b"  \n\t ", ".txt")

    def test_docx_paragraphs_and_tables(self):
        data = _docx_bytes("Jane Smith", "EXPERIENCE", table_rows=[("Python", "AWS")])
        text = decode_document(data, ".docx")
        assert text.splitlines() == ["Jane Smith", "EXPERIENCE", "Python\tAWS"]

    def test_doc_extension_decoded_as_word(self):
        assert "Jane Smith" in decode_document(_docx_bytes("Jane Smith"), "doc")

    def test_corrupt_docx(self):
        with pytest.raises(DecodeError, match="Could not open Word document"):
            decode_document(b"not a zip archive", ".docx")

    def test_pdf_text(self):
        assert "Jane Smith" in decode_document(_pdf_bytes("Jane Smith"), ".pdf")

    def test_pdf_without_text_layer(self):
        with pytest.raises(DecodeError, match="No extractable text"):
            decode_document(_pdf_bytes(), ".pdf")

    def test_corrupt_pdf(self):
        with pytest.raises(DecodeError, match="Could not open PDF"):
            decode_document(b"definitely not a pdf", ".pdf")


@pytest.fixture
def parser(tmp_path):
    return ResumeParserTool(workspace_dir=str(tmp_path))


class TestResumeParserTool:
    @pytest.mark.asyncio
    async def test_parses_text_resume(self, parser, good_resume_file):
        result = await parser.execute(path=good_resume_file.name)
        assert result.success
        assert result.data["format"] == ".txt"
        parsed = result.data["parsed_resume"]
        assert parsed["full_name"] == "Jane Smith"
        assert parsed["email"] == "jane.smith@example.com"
        assert len(parsed["experience"]) == 2
        assert "- Name: Jane Smith" in result.output

    @pytest.mark.asyncio
    async def test_parses_docx_resume(self, parser, tmp_path, good_resume_text):
        path = tmp_path / "resume.docx"
        path.write_bytes(_docx_bytes(*good_resume_text.splitlines()))
        result = await parser.execute(path=str(path))
        assert result.success
        assert result.data["parsed_resume"]["full_name"] == "Jane Smith"
        assert "Python" in result.data["parsed_resume"]["skills"]

    @pytest.mark.asyncio
    async def test_missing_file(self, parser):
        result = await parser.execute(path="missing.txt")
        assert not result.success
        assert result.error == "File not found: missing.txt"

    @pytest.mark.asyncio
    async def test_unsupported_file(self, parser, tmp_path):
        (tmp_path / "resume.rtf").write_text("Jane Smith", encoding="utf-8")
        result = await parser.execute(path="resume.rtf")
        assert not result.success
        assert "Unsupported file format" in result.error

    @pytest.mark.asyncio
    async def test_result_cached_until_file_changes(self, parser, good_resume_file):
        first = await parser.execute(path=str(good_resume_file))
        second = await parser.execute(path=str(good_resume_file))
        assert second is first

        good_resume_file.write_text("John Doe\njohn@example.com\n", encoding="utf-8")
        stat = good_resume_file.stat()
        os.utime(good_resume_file, (stat.st_atime, stat.st_mtime + 10))
        third = await parser.execute(path=str(good_resume_file))
        assert third is not first
        assert third.data["parsed_resume"]["full_name"] == "John Doe"

    @pytest.mark.asyncio
    async def test_unreadable_path(self, parser, tmp_path):
        (tmp_path / "resume.txt").mkdir()
        result = await parser.execute(path="resume.txt")
        assert not result.success
        assert "Could not read" in result.error
