"""
Envelope builder — fluent configuration of a conversation launch envelope.

    envelope = create("R1", 42).with_draft_text("hi").build()
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from convo_intents.models.attachment import MediaAttachment, StickerAttachment, resolve_attachment
from convo_intents.models.envelope import Envelope
from convo_intents.models.media import MediaItem, StickerLocator
from convo_intents.schema import (
    ACTION_DEFAULT,
    EXTRA_BORDERLESS,
    EXTRA_DISTRIBUTION_TYPE,
    EXTRA_MEDIA,
    EXTRA_RECIPIENT,
    EXTRA_STARTING_POSITION,
    EXTRA_STICKER,
    EXTRA_TEXT,
    EXTRA_THREAD_ID,
    UNSET_STARTING_POSITION,
    DistributionTypes,
    ScreenTarget,
)

logger = logging.getLogger(__name__)


class ConversationEnvelopeBuilder:
    def __init__(self, recipient_id: str, thread_id: int, target: str = ScreenTarget.CONVERSATION):
        if not recipient_id:
            raise ValueError("recipient_id is required")
        self._target = target
        self._recipient_id = recipient_id
        self._thread_id = thread_id

        self._draft_text: Optional[str] = None
        self._media: Optional[list[MediaItem]] = None
        self._sticker_locator: Optional[StickerLocator] = None
        self._is_borderless = False
        self._distribution_type = DistributionTypes.DEFAULT
        self._starting_position = UNSET_STARTING_POSITION
        self._data_uri: Optional[str] = None
        self._data_type: Optional[str] = None

    @property
    def target(self) -> str:
        return self._target

    def with_draft_text(self, draft_text: Optional[str]) -> ConversationEnvelopeBuilder:
        self._draft_text = draft_text
        return self

    def with_media(self, media: Optional[Iterable[MediaItem]]) -> ConversationEnvelopeBuilder:
        """Set the media list. The input is copied; later changes to it are not seen.

        Raises TypeError if an entry is not a MediaItem.
        """
        if media is None:
            self._media = None
            return self
        items = list(media)
        for item in items:
            if not isinstance(item, MediaItem):
                raise TypeError(f"media entries must be MediaItem, got {type(item).__name__}")
        self._media = items
        return self

    def with_sticker_locator(self, sticker_locator: Optional[StickerLocator]) -> ConversationEnvelopeBuilder:
        self._sticker_locator = sticker_locator
        return self

    def as_borderless(self, is_borderless: bool) -> ConversationEnvelopeBuilder:
        self._is_borderless = is_borderless
        return self

    def with_distribution_type(self, distribution_type: int) -> ConversationEnvelopeBuilder:
        self._distribution_type = distribution_type
        return self

    def with_starting_position(self, starting_position: int) -> ConversationEnvelopeBuilder:
        self._starting_position = starting_position
        return self

    def with_data_uri(self, data_uri: Optional[str]) -> ConversationEnvelopeBuilder:
        self._data_uri = data_uri
        return self

    def with_data_type(self, data_type: Optional[str]) -> ConversationEnvelopeBuilder:
        self._data_type = data_type
        return self

    def build(self) -> Envelope:
        """Validate and produce the envelope.

        Raises ConflictingAttachmentError if a non-empty media list and a sticker
        locator are both set.
        """
        attachment = resolve_attachment(self._media, self._sticker_locator)

        extras: dict[str, Any] = {
            EXTRA_RECIPIENT: self._recipient_id,
            EXTRA_THREAD_ID: self._thread_id,
            EXTRA_DISTRIBUTION_TYPE: self._distribution_type,
            EXTRA_STARTING_POSITION: self._starting_position,
            EXTRA_BORDERLESS: self._is_borderless,
        }

        if self._draft_text is not None:
            extras[EXTRA_TEXT] = self._draft_text

        if isinstance(attachment, MediaAttachment):
            extras[EXTRA_MEDIA] = list(attachment.items)
        elif isinstance(attachment, StickerAttachment):
            extras[EXTRA_STICKER] = attachment.locator

        # Either half of the data slot may be set on its own.
        envelope = Envelope(
            target=self._target,
            action=ACTION_DEFAULT,
            data=self._data_uri,
            type=self._data_type,
            extras=extras,
        )
        logger.debug(
            "Built %s envelope for recipient %s (thread %s, attachment %s)",
            self._target, self._recipient_id, self._thread_id, attachment.kind,
        )
        return envelope


def create(recipient_id: str, thread_id: int) -> ConversationEnvelopeBuilder:
    """Builder for the regular conversation screen."""
    return ConversationEnvelopeBuilder(recipient_id, thread_id)


def create_for_popup(recipient_id: str, thread_id: int) -> ConversationEnvelopeBuilder:
    """Builder for the popup conversation screen."""
    return ConversationEnvelopeBuilder(recipient_id, thread_id, target=ScreenTarget.CONVERSATION_POPUP)
