"""
Host-side collaborators for copying text and delivering exported files.

Both are best effort: a failure is logged and never surfaced to the caller.
The finder page copies to the clipboard in the browser itself; ClipboardWriter
is the seam for hosts that are not a browser, such as a kiosk or desktop shell.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from fastapi.responses import Response

logger = logging.getLogger(__name__)


class ClipboardWriter(Protocol):
    def write_text(self, text: str) -> None: ...


class FileExporter(Protocol):
    def export(self, filename: str, content: bytes, media_type: str) -> Any: ...


class AttachmentExporter:
    """Delivers an export as an HTTP download"""

    def export(self, filename: str, content: bytes, media_type: str) -> Response:
        return Response(
            content=content,
            media_type=media_type,
            headers={"Content-Disposition": f"attachment; filename={filename}"}
        )


def copy_best_effort(writer: ClipboardWriter, text: str) -> bool:
    try:
        writer.write_text(text)
    except Exception as e:
        logger.warning("Clipboard write failed: %s", e)
        return False
    return True


def export_best_effort(exporter: FileExporter, filename: str, content: bytes, media_type: str) -> Any:
    """Hand the file to the exporter; returns its result, or None on failure"""
    try:
        return exporter.export(filename, content, media_type)
    except Exception as e:
        logger.warning("Export of %s failed: %s", filename, e)
        return None
