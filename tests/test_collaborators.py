"""
Tests for best-effort clipboard and export collaborators
"""

from app.services.collaborators import AttachmentExporter, copy_best_effort, export_best_effort

class RecordingClipboard:
    def __init__(self):
        self.texts = []
    
    def write_text(self, text):
        self.texts.append(text)

class BrokenClipboard:
    def write_text(self, text):
        raise PermissionError("clipboard access denied")

class BrokenExporter:
    def export(self, filename, content, media_type):
        raise OSError("disk full")

def test_copy_best_effort_writes_text():
    """Successful copy reaches the clipboard"""
    clipboard = RecordingClipboard()
    assert copy_best_effort(clipboard, "Ana Díaz — Mesa 8")
    assert clipboard.texts == ["Ana Díaz — Mesa 8"]

def test_copy_best_effort_swallows_failure(caplog):
    """Clipboard failure is logged, not raised"""
    assert not copy_best_effort(BrokenClipboard(), "Mesa 8")
    assert "Clipboard write failed" in caplog.text

def test_export_best_effort_swallows_failure(caplog):
    """Export failure is logged and gives None"""
    assert export_best_effort(BrokenExporter(), "invitados_mesas.csv", b"", "text/csv") is None
    assert "invitados_mesas.csv" in caplog.text

def test_attachment_exporter():
    """Attachment exporter builds a download response"""
    response = export_best_effort(AttachmentExporter(), "invitados_mesas.csv", b"nombre,mesa\n", "text/csv")
    assert response.body == b"nombre,mesa\n"
    assert response.headers["content-disposition"] == "attachment; filename=invitados_mesas.csv"
    assert response.media_type == "text/csv"
