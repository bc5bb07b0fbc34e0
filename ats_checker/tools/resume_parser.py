"""Resume parser tool - decode resume documents and extract structured fields."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from ..config import AnalyzerConfig
from ..domain import extract, format_parsed_resume
from ..errors import ATSCheckerError, DecodeError, UnsupportedFormat
from .base import BaseTool, ToolResult

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS: Tuple[str, ...] = ("pdf", "docx", "doc", "txt")


def decode_document(data: bytes, extension: str) -> str:
    """Decode document *data* to plain text according to *extension*.

    *extension* may carry a leading dot and any case (``".PDF"``).
    Raises :class:`UnsupportedFormat` for other extensions and
    :class:`DecodeError` when no text can be extracted.
    """
    ext = extension.strip().lower().lstrip(".")
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(extension, tuple(f".{e}" for e in SUPPORTED_EXTENSIONS))

    if ext == "pdf":
        text = _decode_pdf(data)
    elif ext in ("docx", "doc"):
        text = _decode_docx(data)
    else:
        text = _decode_text(data)

    if not text.strip():
        raise DecodeError(f"No extractable text in .{ext} document (scanned or empty file?)")
    return text


def _decode_pdf(data: bytes) -> str:
    """Extract text from PDF bytes using PyMuPDF."""
    try:
        import fitz  # PyMuPDF
    except ImportError:
        raise ImportError("PyMuPDF not installed. Run: pip install pymupdf")

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise DecodeError(f"Could not open PDF: {e}") from e

    try:
        return "\n".join(page.get_text() for page in doc)
    finally:
        doc.close()


def _decode_docx(data: bytes) -> str:
    """Extract paragraph and table text from Word bytes using python-docx."""
    try:
        from docx import Document
    except ImportError:
        raise ImportError("python-docx not installed. Run: pip install python-docx")

    try:
        doc = Document(io.BytesIO(data))
    except Exception as e:
        raise DecodeError(f"Could not open Word document (legacy .doc files must be saved as .docx): {e}") from e

    text_parts = [para.text for para in doc.paragraphs if para.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            row_text = "\t".join(cell.text.strip() for cell in row.cells if cell.text.strip())
            if row_text:
                text_parts.append(row_text)
    return "\n".join(text_parts)


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Text file is not valid UTF-8: {e}") from e


class ResumeParserTool(BaseTool):
    """Parse a resume file into structured fields."""

    name = "resume_parse"
    description = """Decode a resume file (PDF, DOCX, DOC, TXT) and extract contact details,
skills, education and experience entries."""
    parameters = {
        "path": {
            "type": "string",
            "description": "Path to the resume file",
            "required": True,
        },
    }

    def __init__(self, workspace_dir: str = ".", config: Optional[AnalyzerConfig] = None):
        super().__init__(workspace_dir)
        self.config = config or AnalyzerConfig()
        # Cache: path -> (mtime, parsed_result)
        self._cache: Dict[str, Tuple[float, ToolResult]] = {}

    async def execute(self, path: str) -> ToolResult:
        file_path = self._resolve_path(path)
        if not file_path.exists():
            return ToolResult(success=False, output="", error=f"File not found: {path}")

        current_mtime = file_path.stat().st_mtime
        cache_key = str(file_path)
        if cache_key in self._cache:
            cached_mtime, cached_result = self._cache[cache_key]
            if cached_mtime == current_mtime:
                return cached_result

        try:
            text = read_document(file_path)
        except ATSCheckerError as e:
            return ToolResult(success=False, output="", error=str(e))

        parsed = extract(text, self.config.vocabulary)
        result = ToolResult(
            success=True,
            output=format_parsed_resume(parsed),
            data={
                "path": str(file_path),
                "format": file_path.suffix.lower(),
                "parsed_resume": parsed.to_dict(),
            },
        )
        self._cache[cache_key] = (current_mtime, result)
        return result


def read_document(file_path: Path) -> str:
    """Read *file_path* and decode it by its suffix."""
    logger.debug("Decoding %s", file_path)
    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise DecodeError(f"Could not read {file_path}: {e}") from e
    return decode_document(data, file_path.suffix)
