"""Modal workflow: popup lifecycle and the text buffer it edits."""

from __future__ import annotations

from taskdeck.models import InputBuffer, Popup


class ModalController:
    """Tracks which popup is open and the text it carries.

    DISABLED --open--> popup --confirm/cancel--> DISABLED. Confirm only
    closes the popup and hands back what was submitted; applying it to the
    store is the caller's job.
    """

    def __init__(self) -> None:
        self.popup = Popup.DISABLED
        self.buffer = InputBuffer()

    @property
    def is_open(self) -> bool:
        return self.popup.is_open

    @property
    def text(self) -> str:
        return self.buffer.text

    def open(self, popup: Popup, seed: str = "") -> None:
        if not popup.is_open:
            raise ValueError("Cannot open the DISABLED popup")
        self.popup = popup
        self.buffer.text = seed
        self.buffer.editable = popup.editable

    def close(self) -> None:
        self.popup = Popup.DISABLED
        self.buffer.clear()

    def cancel(self) -> Popup:
        """Discard the popup. Returns the popup that was open."""
        popup = self.popup
        self.close()
        return popup

    def confirm(self) -> tuple[Popup, str]:
        """Close the popup, returning it with the submitted text."""
        popup, text = self.popup, self.buffer.text
        self.close()
        return popup, text

    # ── Text editing ──────────────────────────────────────────

    def insert(self, text: str) -> bool:
        if not self.buffer.editable or not text:
            return False
        self.buffer.text += text
        return True

    def newline(self) -> bool:
        return self.insert("\n")

    def backspace(self) -> bool:
        if not self.buffer.editable or not self.buffer.text:
            return False
        self.buffer.text = self.buffer.text[:-1]
        return True
