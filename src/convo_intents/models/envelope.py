"""
Envelope and decoded parameter models.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field

from convo_intents.models.attachment import Attachment, resolve_attachment
from convo_intents.models.media import MediaItem, StickerLocator
from convo_intents.schema import (
    ACTION_DEFAULT,
    NO_THREAD_ID,
    UNSET_STARTING_POSITION,
    DistributionTypes,
    ScreenTarget,
)


class Envelope(BaseModel):
    """Flat transport form of a conversation launch request."""
    target: str = ScreenTarget.CONVERSATION
    action: str = ACTION_DEFAULT
    data: Optional[str] = None  # primary data slot URI
    type: Optional[str] = None  # primary data slot MIME type
    extras: dict[str, Any] = Field(default_factory=dict)

    def has_extra(self, key: str) -> bool:
        return key in self.extras

    def get_extra(self, key: str, default: Any = None) -> Any:
        return self.extras.get(key, default)


class ConversationParams(BaseModel):
    """Typed parameters decoded from an Envelope. Immutable."""
    recipient_id: str
    thread_id: int = NO_THREAD_ID
    draft_text: Optional[str] = None
    media: Optional[tuple[MediaItem, ...]] = None
    sticker_locator: Optional[StickerLocator] = None
    is_borderless: bool = False
    distribution_type: int = DistributionTypes.DEFAULT
    starting_position: int = UNSET_STARTING_POSITION
    data_uri: Optional[str] = None
    data_type: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def attachment(self) -> Attachment:
        """Media/sticker as a single variant. Raises ConflictingAttachmentError if both are present."""
        return resolve_attachment(self.media, self.sticker_locator)
