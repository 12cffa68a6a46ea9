"""
Attachment records carried through the envelope without interpretation.
"""

from typing import Optional
from pydantic import BaseModel


class MediaItem(BaseModel):
    """A single attached media entry (media_list)."""
    uri: str
    mime_type: str = ""
    date: int = 0
    width: int = 0
    height: int = 0
    size: int = 0
    duration: int = 0
    borderless: bool = False
    video_gif: bool = False
    bucket_id: Optional[str] = None
    caption: Optional[str] = None

    model_config = {"extra": "allow", "frozen": True}


class StickerLocator(BaseModel):
    """Points at a sticker inside an installed pack (sticker_extra)."""
    pack_id: str
    pack_key: str
    sticker_id: int
    emoji: Optional[str] = None

    model_config = {"extra": "allow", "frozen": True}
