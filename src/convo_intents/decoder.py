"""
Envelope decoder — classify an incoming envelope and read it back into ConversationParams.

Callers are expected to run is_invalid() before decode(); try_decode() does both.
"""

import logging
from typing import Any, Optional

from convo_intents.errors import MissingRequiredFieldError
from convo_intents.models.envelope import ConversationParams, Envelope
from convo_intents.models.media import MediaItem, StickerLocator
from convo_intents.schema import (
    EXTRA_BORDERLESS,
    EXTRA_DISTRIBUTION_TYPE,
    EXTRA_MEDIA,
    EXTRA_RECIPIENT,
    EXTRA_STARTING_POSITION,
    EXTRA_STICKER,
    EXTRA_TEXT,
    EXTRA_THREAD_ID,
    NO_THREAD_ID,
    UNSET_STARTING_POSITION,
    DistributionTypes,
)

logger = logging.getLogger(__name__)


def is_invalid(envelope: Envelope) -> bool:
    """True iff the recipient key is absent. No other field is checked."""
    return not envelope.has_extra(EXTRA_RECIPIENT)


def _int_extra(envelope: Envelope, key: str, default: int) -> int:
    value = envelope.get_extra(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Key %s expected int but value was %r; using default %s", key, value, default)
        return default
    return value


def _bool_extra(envelope: Envelope, key: str, default: bool) -> bool:
    value = envelope.get_extra(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        logger.warning("Key %s expected bool but value was %r; using default %s", key, value, default)
        return default
    return value


def _optional_extra(envelope: Envelope, key: str, expected: Any) -> Any:
    value = envelope.get_extra(key)
    if value is None or isinstance(value, expected):
        return value
    logger.warning("Key %s expected %s but value was %r; treating as absent", key, expected, value)
    return None


def _media_extra(envelope: Envelope) -> Optional[tuple[MediaItem, ...]]:
    value = _optional_extra(envelope, EXTRA_MEDIA, (list, tuple))
    if value is None:
        return None
    if not all(isinstance(item, MediaItem) for item in value):
        logger.warning("Key %s holds non-media entries; treating as absent", EXTRA_MEDIA)
        return None
    return tuple(value)


def decode(envelope: Envelope) -> ConversationParams:
    """Read every field, substituting defaults for absent optional keys.

    Absent draft text, media and sticker stay None; absent thread id,
    borderless flag, distribution type and starting position take their
    defaults. Both media and sticker may come back set: the write path is
    the only place the exclusivity rule is enforced.

    Raises MissingRequiredFieldError if the recipient is absent or not a string.
    """
    recipient_id = envelope.get_extra(EXTRA_RECIPIENT)
    if recipient_id is not None and not isinstance(recipient_id, str):
        logger.warning("Key %s expected str but value was %r", EXTRA_RECIPIENT, recipient_id)
        recipient_id = None
    if recipient_id is None:
        raise MissingRequiredFieldError(EXTRA_RECIPIENT)

    params = ConversationParams(
        recipient_id=recipient_id,
        thread_id=_int_extra(envelope, EXTRA_THREAD_ID, NO_THREAD_ID),
        draft_text=_optional_extra(envelope, EXTRA_TEXT, str),
        media=_media_extra(envelope),
        sticker_locator=_optional_extra(envelope, EXTRA_STICKER, StickerLocator),
        is_borderless=_bool_extra(envelope, EXTRA_BORDERLESS, False),
        distribution_type=_int_extra(envelope, EXTRA_DISTRIBUTION_TYPE, DistributionTypes.DEFAULT),
        starting_position=_int_extra(envelope, EXTRA_STARTING_POSITION, UNSET_STARTING_POSITION),
        data_uri=envelope.data,
        data_type=envelope.type,
    )
    if params.media and params.sticker_locator is not None:
        logger.warning("Envelope for %s carries both media and a sticker", params.recipient_id)
    return params


def try_decode(envelope: Envelope) -> Optional[ConversationParams]:
    """Decode an envelope, or return None if it is invalid."""
    if is_invalid(envelope):
        logger.debug("Envelope has no %s; not decoding", EXTRA_RECIPIENT)
        return None
    try:
        return decode(envelope)
    except MissingRequiredFieldError:
        return None
