"""
conversation-intents — typed launch envelopes for the conversation screen.

Builds a flat key/value envelope from typed conversation parameters and
decodes it back, with default substitution and attachment validation.
"""

from convo_intents.builder import ConversationEnvelopeBuilder, create, create_for_popup
from convo_intents.decoder import decode, is_invalid, try_decode
from convo_intents.errors import ConversationIntentError, ConflictingAttachmentError, MissingRequiredFieldError
from convo_intents.models.envelope import ConversationParams, Envelope
from convo_intents.models.media import MediaItem, StickerLocator
from convo_intents.schema import DistributionTypes, ScreenTarget

__version__ = "0.1.0"
__all__ = [
    "ConversationEnvelopeBuilder",
    "create",
    "create_for_popup",
    "decode",
    "is_invalid",
    "try_decode",
    "ConversationIntentError",
    "ConflictingAttachmentError",
    "MissingRequiredFieldError",
    "ConversationParams",
    "Envelope",
    "MediaItem",
    "StickerLocator",
    "DistributionTypes",
    "ScreenTarget",
]
