"""
Envelope wire form — a flat, JSON-ready dict and back.
"""

import json
import logging
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from convo_intents.models.envelope import Envelope
from convo_intents.models.media import MediaItem, StickerLocator
from convo_intents.schema import EXTRA_MEDIA, EXTRA_STICKER

logger = logging.getLogger(__name__)


def _dump_value(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [_dump_value(item) for item in value]
    return value


def dump_envelope(envelope: Envelope) -> dict[str, Any]:
    """Envelope as a plain dict; attachment records become nested dicts."""
    return {
        "target": envelope.target,
        "action": envelope.action,
        "data": envelope.data,
        "type": envelope.type,
        "extras": {key: _dump_value(value) for key, value in envelope.extras.items()},
    }


def _load_extras(extras: dict[str, Any]) -> dict[str, Any]:
    loaded = dict(extras)
    if loaded.get(EXTRA_MEDIA) is not None:
        loaded[EXTRA_MEDIA] = [MediaItem.model_validate(item) for item in loaded[EXTRA_MEDIA]]
    if loaded.get(EXTRA_STICKER) is not None:
        loaded[EXTRA_STICKER] = StickerLocator.model_validate(loaded[EXTRA_STICKER])
    return loaded


def load_envelope(raw: Any) -> Optional[Envelope]:
    """Parse the dict form of an envelope. Returns None if malformed."""
    try:
        envelope = Envelope.model_validate(raw)
        return envelope.model_copy(update={"extras": _load_extras(envelope.extras)})
    except (ValidationError, TypeError) as e:
        logger.debug("Rejected malformed envelope: %s", e)
        return None


def encode_envelope(envelope: Envelope, indent: Optional[int] = None) -> str:
    return json.dumps(dump_envelope(envelope), indent=indent)


def decode_envelope(text: str) -> Optional[Envelope]:
    """Parse the JSON text form of an envelope. Returns None if malformed."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Rejected envelope that is not JSON: %s", e)
        return None
    return load_envelope(raw)
