"""
Envelope key schema — the wire contract shared by the builder and the decoder.

These keys must never be renamed without a migration path.
"""

EXTRA_RECIPIENT = "recipient_id"
EXTRA_THREAD_ID = "thread_id"
EXTRA_TEXT = "draft_text"
EXTRA_MEDIA = "media_list"
EXTRA_STICKER = "sticker_extra"
EXTRA_BORDERLESS = "borderless_extra"
EXTRA_DISTRIBUTION_TYPE = "distribution_type"
EXTRA_STARTING_POSITION = "starting_position"

ALL_EXTRAS = (
    EXTRA_RECIPIENT,
    EXTRA_THREAD_ID,
    EXTRA_TEXT,
    EXTRA_MEDIA,
    EXTRA_STICKER,
    EXTRA_BORDERLESS,
    EXTRA_DISTRIBUTION_TYPE,
    EXTRA_STARTING_POSITION,
)

ACTION_DEFAULT = "default"

NO_THREAD_ID = -1
UNSET_STARTING_POSITION = -1


class ScreenTarget:
    """Downstream screen the envelope is routed to."""
    CONVERSATION = "conversation"
    CONVERSATION_POPUP = "conversation_popup"


class DistributionTypes:
    """Thread distribution types. The value space is owned by thread classification."""
    BROADCAST = 1
    CONVERSATION = 2
    ARCHIVE = 3
    INBOX_ZERO = 4

    DEFAULT = CONVERSATION
