"""Utility functions and helpers"""

from resume_builder.utils.export import (
    export_filename,
    export_resume,
    export_to_pdf,
    render_pdf,
)

__all__ = [
    "export_filename",
    "export_resume",
    "export_to_pdf",
    "render_pdf",
]
