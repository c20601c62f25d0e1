"""Export utilities for writing the resume preview to a PDF file."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from resume_builder.errors import ExportError
from resume_builder.services.preview import render_preview

if TYPE_CHECKING:
    from resume_builder.services.builder import ResumeBuilder
    from resume_builder.services.preview import PreviewEntry, PreviewRenderer, ResumePreview

logger = logging.getLogger(__name__)

__all__ = [
    "LETTER_HEIGHT_MM",
    "LETTER_WIDTH_MM",
    "export_filename",
    "export_resume",
    "export_to_pdf",
    "get_export_dir",
    "page_height",
    "render_pdf",
]

# US Letter in millimetres
LETTER_WIDTH_MM = 215.9
LETTER_HEIGHT_MM = 279.4
MARGIN_MM = 15.0
# Tallest page used for the measuring pass (PDF caps pages at 200 inches)
_MAX_PAGE_HEIGHT_MM = 5080.0


def _sanitize_filename(name: str) -> str:
    """Remove or replace characters that are invalid in filenames."""
    sanitized = re.sub(r'[<>:"/\\|?*]', "_", name)
    return sanitized.strip(". ")


def export_filename(name: str) -> str:
    """Return the download filename for a resume belonging to *name*.

    Whitespace runs become underscores and ``_Resume.pdf`` is appended;
    an empty name gives ``Resume.pdf``.
    """
    base = _sanitize_filename(re.sub(r"\s+", "_", name.strip()))
    if not base:
        return "Resume.pdf"
    return f"{base}_Resume.pdf"


def get_export_dir() -> Path:
    """Directory exported files are written to (``RESUME_EXPORT_DIR``)."""
    configured = os.environ.get("RESUME_EXPORT_DIR")
    if configured:
        return Path(configured)
    return Path(tempfile.gettempdir()) / "resume_builder_exports"


def _clean_text(text: str) -> str:
    """Encode for the built-in PDF fonts, which only cover latin-1."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _new_pdf(height: float) -> FPDF:
    pdf = FPDF(orientation="P", unit="mm", format=(LETTER_WIDTH_MM, height))
    pdf.set_margins(MARGIN_MM, MARGIN_MM, MARGIN_MM)
    pdf.set_auto_page_break(auto=False)
    pdf.add_page()
    return pdf


def _write_entry(pdf: FPDF, entry: PreviewEntry) -> None:
    date_range = _clean_text(entry.get("date_range", ""))
    heading = _clean_text(entry.get("heading", ""))
    content_width = pdf.w - pdf.l_margin - pdf.r_margin

    top = pdf.get_y()
    pdf.set_font("Helvetica", "I", 10)
    date_width = pdf.get_string_width(date_range) + 2 if date_range else 0
    if date_range:
        pdf.set_xy(pdf.l_margin, top)
        pdf.cell(0, 6, date_range, align="R")

    pdf.set_xy(pdf.l_margin, top)
    pdf.set_font("Helvetica", "B", 11)
    if heading:
        pdf.multi_cell(
            content_width - date_width, 6, heading, new_x=XPos.LMARGIN, new_y=YPos.NEXT
        )
    elif date_range:
        pdf.ln(6)

    subheading = entry.get("subheading")
    if subheading:
        pdf.set_font("Helvetica", "", 10)
        pdf.multi_cell(0, 5, _clean_text(subheading), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    link = entry.get("link")
    if link:
        pdf.set_font("Helvetica", "U", 9)
        pdf.multi_cell(0, 5, _clean_text(link), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    body = entry.get("body")
    if body:
        pdf.set_font("Helvetica", "", 10)
        pdf.multi_cell(0, 5, _clean_text(body), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    pdf.ln(3)


def _write_section_title(pdf: FPDF, title: str) -> None:
    pdf.ln(2)
    pdf.set_font("Helvetica", "B", 12)
    pdf.cell(0, 7, title.upper(), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    y = pdf.get_y()
    pdf.line(pdf.l_margin, y, pdf.w - pdf.r_margin, y)
    pdf.ln(2)


def _layout(pdf: FPDF, preview: ResumePreview) -> None:
    header = preview.get("header")
    if header:
        if header["name"]:
            pdf.set_font("Helvetica", "B", 20)
            pdf.multi_cell(
                0, 10, _clean_text(header["name"]), align="C",
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )  # fmt: skip
        for line in (header["details"], header["links"]):
            if line:
                pdf.set_font("Helvetica", "", 10)
                pdf.multi_cell(
                    0, 5, _clean_text(" | ".join(line)), align="C",
                    new_x=XPos.LMARGIN, new_y=YPos.NEXT,
                )  # fmt: skip
        pdf.ln(4)

    summary = preview.get("summary")
    if summary:
        _write_section_title(pdf, "Professional Summary")
        pdf.set_font("Helvetica", "", 10)
        pdf.multi_cell(0, 5, _clean_text(summary), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(2)

    for section in preview.get("sections", []):
        _write_section_title(pdf, section["title"])
        for entry in section["entries"]:
            _write_entry(pdf, entry)

    skills = preview.get("skills")
    if skills:
        _write_section_title(pdf, "Skills")
        pdf.set_font("Helvetica", "", 10)
        pdf.multi_cell(0, 5, _clean_text(", ".join(skills)), new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def page_height(preview: ResumePreview) -> float:
    """Height in mm of the single page *preview* is laid out on.

    At least letter height; taller when the content needs it.
    """
    measure = _new_pdf(_MAX_PAGE_HEIGHT_MM)
    _layout(measure, preview)
    content_height = measure.get_y() + MARGIN_MM
    return min(max(LETTER_HEIGHT_MM, content_height), _MAX_PAGE_HEIGHT_MM)


def render_pdf(preview: ResumePreview) -> bytes:
    """Lay *preview* out on one US-Letter-wide page and return the PDF bytes.

    The page grows with the content, so the whole resume stays on a single
    logical page.
    """
    pdf = _new_pdf(page_height(preview))
    _layout(pdf, preview)
    return bytes(pdf.output())


def export_to_pdf(preview: ResumePreview, output_path: Path) -> Path:
    """Write *preview* as a PDF to *output_path*.

    The file is written to a temporary sibling first and renamed into place,
    so a failed export never leaves a partial file behind.

    Raises:
        ExportError: If rendering or writing fails.
    """
    output_path = Path(output_path)
    tmp_name: str | None = None
    try:
        data = render_pdf(preview)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            dir=output_path.parent, prefix=".", suffix=".pdf.part", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(data)
        os.replace(tmp_name, output_path)
        return output_path
    except Exception as e:
        logger.exception("Failed to export resume to %s", output_path)
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise ExportError("There was a problem exporting your resume.") from e


def export_resume(
    builder: ResumeBuilder,
    output_dir: Path | None = None,
    renderer: PreviewRenderer | None = None,
) -> Path:
    """Export the currently rendered preview to ``<output_dir>/<filename>``.

    Uses *renderer*'s live preview when it is attached; otherwise a
    detached preview is rendered from the current snapshot.

    Returns:
        Path to the written PDF.
    """
    if renderer is not None and renderer.attached and renderer.preview is not None:
        preview = renderer.preview
    else:
        logger.info("No attached preview; rendering a detached copy for export")
        preview = render_preview(builder.document)

    target_dir = Path(output_dir) if output_dir is not None else get_export_dir()
    filename = export_filename(builder.document.personal_info.name)
    return export_to_pdf(preview, target_dir / filename)
