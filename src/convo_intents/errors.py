"""
Conversation intent error types.
"""

from typing import Any, Optional


class ConversationIntentError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ConflictingAttachmentError(ConversationIntentError):
    """Both a media list and a sticker locator were set on the same envelope."""

    def __init__(self, message: str = "Cannot have both sticker and media array"):
        super().__init__("conflicting_attachment", message)


class MissingRequiredFieldError(ConversationIntentError):
    def __init__(self, key: str, message: Optional[str] = None):
        super().__init__(
            "missing_required_field",
            message or f"Envelope is missing required key: {key}",
            {"key": key},
        )
        self.key = key
