import pytest

from convo_intents import MediaItem, StickerLocator


@pytest.fixture
def m1() -> MediaItem:
    return MediaItem(uri="content://media/1", mime_type="image/jpeg", width=640, height=480)


@pytest.fixture
def m2() -> MediaItem:
    return MediaItem(uri="content://media/2", mime_type="video/mp4", duration=1200, caption="clip")


@pytest.fixture
def sticker() -> StickerLocator:
    return StickerLocator(pack_id="abc123", pack_key="deadbeef", sticker_id=7, emoji="😀")
