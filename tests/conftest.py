import pytest

from models import ImageFile
from factories import CountingPreviewStore


@pytest.fixture
def image():
    return ImageFile(filename="card.jpg", content_type="image/jpeg", data=b"\xff\xd8\xff fake jpeg")


@pytest.fixture
def other_image():
    return ImageFile(filename="card2.png", content_type="image/png", data=b"\x89PNG fake png")


@pytest.fixture
def previews():
    return CountingPreviewStore()


@pytest.fixture
def alice_json():
    """Alice with hole 3 unreadable and only OUT filled in."""
    scores = [4, 5, None, 4, 3, 5, 4, 4, 5] + [4] * 9
    return (
        '[{"playerName": "Alice", "scores": '
        + "[" + ", ".join("null" if s is None else str(s) for s in scores) + "]"
        + ', "out": 38, "in": null, "total": null}]'
    )
