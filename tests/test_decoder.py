"""Envelope decoder tests."""

import logging

import pytest
from pydantic import ValidationError

from convo_intents import (
    ConflictingAttachmentError,
    DistributionTypes,
    Envelope,
    MissingRequiredFieldError,
    create,
    decode,
    is_invalid,
    try_decode,
)
from convo_intents.models.attachment import MediaAttachment, NoAttachment, StickerAttachment


def test_empty_envelope_is_invalid():
    envelope = Envelope()
    assert is_invalid(envelope)
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        decode(envelope)
    assert exc_info.value.key == "recipient_id"


def test_is_invalid_checks_only_recipient():
    assert not is_invalid(Envelope(extras={"recipient_id": "R1"}))
    assert is_invalid(Envelope(extras={"thread_id": 5, "draft_text": "hi"}))


def test_null_recipient_is_not_decoded():
    envelope = Envelope(extras={"recipient_id": None})
    assert not is_invalid(envelope)
    with pytest.raises(MissingRequiredFieldError):
        decode(envelope)


def test_recipient_only_decodes_to_defaults():
    params = decode(Envelope(extras={"recipient_id": "R1"}))
    assert params.recipient_id == "R1"
    assert params.thread_id == -1
    assert params.draft_text is None
    assert params.media is None
    assert params.sticker_locator is None
    assert params.is_borderless is False
    assert params.distribution_type == DistributionTypes.DEFAULT
    assert params.starting_position == -1
    assert params.data_uri is None
    assert params.data_type is None


def test_data_slot_is_read():
    params = decode(Envelope(data="content://x", type="image/gif", extras={"recipient_id": "R1"}))
    assert params.data_uri == "content://x"
    assert params.data_type == "image/gif"


def test_absent_and_empty_are_distinct():
    params = decode(Envelope(extras={"recipient_id": "R1", "draft_text": "", "media_list": []}))
    assert params.draft_text == ""
    assert params.media == ()


class TestTypeMismatch:
    def test_wrong_int_falls_back(self, caplog):
        envelope = Envelope(extras={
            "recipient_id": "R1",
            "thread_id": "seven",
            "distribution_type": True,
            "starting_position": 2.5,
        })
        with caplog.at_level(logging.WARNING, logger="convo_intents.decoder"):
            params = decode(envelope)
        assert params.thread_id == -1
        assert params.distribution_type == DistributionTypes.DEFAULT
        assert params.starting_position == -1
        assert "thread_id" in caplog.text

    def test_wrong_bool_falls_back(self):
        params = decode(Envelope(extras={"recipient_id": "R1", "borderless_extra": 1}))
        assert params.is_borderless is False

    def test_wrong_optional_is_absent(self, m1):
        params = decode(Envelope(extras={
            "recipient_id": "R1",
            "draft_text": 12,
            "sticker_extra": "not-a-sticker",
            "media_list": [m1, "junk"],
        }))
        assert params.draft_text is None
        assert params.sticker_locator is None
        assert params.media is None

    def test_non_string_recipient_is_missing(self, caplog):
        envelope = Envelope(extras={"recipient_id": 12345})
        assert not is_invalid(envelope)
        with caplog.at_level(logging.WARNING, logger="convo_intents.decoder"):
            with pytest.raises(MissingRequiredFieldError) as exc_info:
                decode(envelope)
        assert exc_info.value.key == "recipient_id"
        assert "recipient_id" in caplog.text
        assert try_decode(envelope) is None


class TestNonConformingProducer:
    def test_media_and_sticker_both_decode(self, m1, sticker, caplog):
        envelope = Envelope(extras={"recipient_id": "R1", "media_list": [m1], "sticker_extra": sticker})
        with caplog.at_level(logging.WARNING, logger="convo_intents.decoder"):
            params = decode(envelope)
        assert params.media == (m1,)
        assert params.sticker_locator == sticker
        assert "both media and a sticker" in caplog.text

    def test_attachment_view_rejects_both(self, m1, sticker):
        params = decode(Envelope(extras={"recipient_id": "R1", "media_list": [m1], "sticker_extra": sticker}))
        with pytest.raises(ConflictingAttachmentError):
            params.attachment


class TestAttachmentView:
    def test_none(self):
        assert isinstance(decode(create("R1", 1).build()).attachment, NoAttachment)

    def test_media(self, m1, m2):
        attachment = decode(create("R1", 1).with_media([m1, m2]).build()).attachment
        assert isinstance(attachment, MediaAttachment)
        assert attachment.items == [m1, m2]

    def test_sticker(self, sticker):
        attachment = decode(create("R1", 1).with_sticker_locator(sticker).build()).attachment
        assert isinstance(attachment, StickerAttachment)
        assert attachment.locator == sticker
        assert attachment.kind == "sticker"


class TestTryDecode:
    def test_invalid_returns_none(self):
        assert try_decode(Envelope()) is None

    def test_null_recipient_returns_none(self):
        assert try_decode(Envelope(extras={"recipient_id": None})) is None

    def test_valid(self):
        params = try_decode(create("R1", 3).with_draft_text("yo").build())
        assert params is not None
        assert params.thread_id == 3
        assert params.draft_text == "yo"


def test_params_are_immutable():
    params = decode(create("R1", 1).build())
    with pytest.raises(ValidationError):
        params.draft_text = "changed"


def test_decoded_media_is_read_only(m1, m2):
    params = decode(create("R1", 1).with_media([m1]).build())
    assert isinstance(params.media, tuple)
    with pytest.raises(AttributeError):
        params.media.append(m2)
    assert params.media == (m1,)


def test_decoded_media_is_independent_of_envelope(m1, m2):
    envelope = create("R1", 1).with_media([m1]).build()
    params = decode(envelope)
    envelope.extras["media_list"].append(m2)
    assert params.media == (m1,)
