"""
Attachment variants — media list and sticker are mutually exclusive.
"""

from typing import Literal, Optional, Sequence, Union
from pydantic import BaseModel

from convo_intents.errors import ConflictingAttachmentError
from convo_intents.models.media import MediaItem, StickerLocator


class NoAttachment(BaseModel):
    kind: Literal["none"] = "none"


class MediaAttachment(BaseModel):
    kind: Literal["media"] = "media"
    items: list[MediaItem]


class StickerAttachment(BaseModel):
    kind: Literal["sticker"] = "sticker"
    locator: StickerLocator


Attachment = Union[NoAttachment, MediaAttachment, StickerAttachment]


def resolve_attachment(
    media: Optional[Sequence[MediaItem]],
    sticker_locator: Optional[StickerLocator],
) -> Attachment:
    """Collapse the two nullable slots into one variant.

    An empty media list next to a sticker is dropped in favour of the sticker.
    """
    if sticker_locator is not None:
        if media:
            raise ConflictingAttachmentError()
        return StickerAttachment(locator=sticker_locator)
    if media is not None:
        return MediaAttachment(items=media)
    return NoAttachment()
