from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from llm.exceptions import InvalidFormatError
from llm.scorecard_extractor import parse_scorecard
from session.controller import ScorecardController
from session.intake import TempFilePreviewStore

from factories import FakeSheets, make_player

JPEG = b"\xff\xd8\xff fake jpeg"


# ================================================================
# Fixtures
# ================================================================

@pytest.fixture
def extractor():
    ext = MagicMock()
    ext.extract = AsyncMock(return_value=[make_player("Alice", out=36, in_=36, total=72)])
    return ext


@pytest.fixture
def sheets():
    return FakeSheets()


@pytest.fixture
def api(extractor, sheets, tmp_path):
    app = create_app(lambda: ScorecardController(
        extractor=extractor,
        sheets=sheets,
        previews=TempFilePreviewStore(tmp_path),
    ))
    with TestClient(app) as client:
        yield client


def _upload(api, content=JPEG, content_type="image/jpeg", filename="card.jpg"):
    return api.post("/api/scan/image", files={"file": (filename, content, content_type)})


# ================================================================
# Health / state
# ================================================================

def test_health(api):
    assert api.get("/api/health").json() == {"status": "ok"}


def test_initial_state(api):
    body = api.get("/api/scan/state").json()
    assert body["phase"] == "no_image"
    assert body["scorecard_data"] is None
    assert body["can_extract"] is False
    assert body["save_status"] == "idle"


# ================================================================
# Upload / preview / reset
# ================================================================

def test_upload_and_preview(api):
    res = _upload(api)
    assert res.status_code == 200
    body = res.json()
    assert body["phase"] == "previewing"
    assert body["filename"] == "card.jpg"
    assert body["preview_url"] == "/api/scan/preview"

    preview = api.get("/api/scan/preview")
    assert preview.status_code == 200
    assert preview.content == JPEG
    assert preview.headers["content-type"] == "image/jpeg"


def test_upload_rejects_non_images(api):
    res = _upload(api, content=b"%PDF-1.4", content_type="application/pdf", filename="card.pdf")
    assert res.status_code == 400
    assert api.get("/api/scan/state").json()["phase"] == "no_image"


def test_upload_rejects_empty_file(api):
    assert _upload(api, content=b"").status_code == 400


def test_preview_without_image(api):
    assert api.get("/api/scan/preview").status_code == 404


def test_reset(api, tmp_path):
    _upload(api)
    assert len(list(tmp_path.iterdir())) == 1

    body = api.post("/api/scan/reset").json()

    assert body["phase"] == "no_image"
    assert body["preview_url"] is None
    assert list(tmp_path.iterdir()) == []


def test_new_upload_replaces_preview_file(api, tmp_path):
    _upload(api)
    _upload(api, content=b"\x89PNG", content_type="image/png", filename="card.png")

    files = list(tmp_path.iterdir())
    assert len(files) == 1
    assert files[0].suffix == ".png"


# ================================================================
# Extraction and outputs
# ================================================================

def test_extract_without_image(api):
    assert api.post("/api/scan/extract").status_code == 400


def test_extract_and_outputs(api):
    _upload(api)
    body = api.post("/api/scan/extract").json()

    assert body["phase"] == "extracted"
    assert body["scorecard_data"][0]["playerName"] == "Alice"
    assert body["scorecard_data"][0]["in"] == 36

    table = api.get("/api/scan/table").json()
    assert table["rows"][0][0] == "Alice"
    assert table["rows"][0][-1] == "72"

    html = api.get("/api/scan/table.html")
    assert html.headers["content-type"].startswith("text/html")
    assert "<td>Alice</td>" in html.text

    copy = api.get("/api/scan/json")
    assert copy.headers["content-type"].startswith("text/plain")
    assert copy.text.startswith("[\n  {")

    download = api.get("/api/scan/scorecard.json")
    assert download.headers["content-disposition"] == 'attachment; filename="scorecard.json"'
    assert download.json()[0]["playerName"] == "Alice"


def test_outputs_without_data(api):
    for path in ["/api/scan/table", "/api/scan/table.html", "/api/scan/json", "/api/scan/scorecard.json"]:
        assert api.get(path).status_code == 404


def test_extract_empty_result(api, extractor):
    extractor.extract.return_value = parse_scorecard("[]")
    _upload(api)

    body = api.post("/api/scan/extract").json()

    assert body["phase"] == "error"
    assert body["error"].startswith("Could not extract any player data")
    assert body["scorecard_data"] is None
    assert body["can_extract"] is True


def test_extract_format_failure(api, extractor):
    extractor.extract.side_effect = InvalidFormatError()
    _upload(api)

    body = api.post("/api/scan/extract").json()

    assert "invalid data format" in body["error"]


# ================================================================
# Sheets
# ================================================================

def test_save_flow(api, sheets):
    _upload(api)
    api.post("/api/scan/extract")

    not_signed_in = api.post("/api/sheets/save").json()
    assert not_signed_in["save_status"] == "failed"
    assert sheets.appended == []

    assert api.post("/api/sheets/sign-in").json()["is_signed_in"] is True
    saved = api.post("/api/sheets/save").json()

    assert saved["save_status"] == "saved"
    assert saved["save_success"] is True
    assert len(sheets.appended) == 1

    assert api.post("/api/sheets/sign-out").json()["is_signed_in"] is False
