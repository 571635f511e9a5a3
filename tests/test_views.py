import json

from llm.scorecard_extractor import parse_scorecard
from views.scorecard_table import HEADERS, PLACEHOLDER, render, render_html, scorecard_json

from factories import make_player


def test_headers_layout():
    assert HEADERS[0] == "Player"
    assert HEADERS[1:10] == [str(n) for n in range(1, 10)]
    assert HEADERS[10] == "OUT"
    assert HEADERS[11:20] == [str(n) for n in range(10, 19)]
    assert HEADERS[20:] == ["IN", "TOTAL"]
    assert len(HEADERS) == 22


def test_render_alice_with_missing_values(alice_json):
    table = render(parse_scorecard(alice_json))

    assert table.headers == HEADERS
    assert len(table.rows) == 1
    row = dict(zip(table.headers, table.rows[0]))
    assert row["Player"] == "Alice"
    assert row["1"] == "4"
    assert row["2"] == "5"
    assert row["3"] == PLACEHOLDER
    assert row["OUT"] == "38"
    assert row["IN"] == PLACEHOLDER
    assert row["TOTAL"] == PLACEHOLDER


def test_render_keeps_order_and_reported_totals():
    data = [
        make_player("Zed", out=1, in_=2, total=999),
        make_player("Amy", out=36, in_=36, total=72),
    ]
    rows = render(data).rows

    assert [r[0] for r in rows] == ["Zed", "Amy"]
    assert rows[0][10] == "1"
    assert rows[0][21] == "999"        # shown as reported, not recomputed


def test_render_does_not_mutate_data():
    data = [make_player(scores=[None] * 18)]
    before = [p.model_copy(deep=True) for p in data]
    render(data)
    assert data == before


def test_render_html_escapes_names():
    fragment = render_html([make_player("<b>Tom & Jerry</b>")])

    assert "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;" in fragment
    assert "<b>" not in fragment
    assert '<th scope="col">TOTAL</th>' in fragment
    assert fragment.count("<tr>") == 2


def test_scorecard_json_is_indented_wire_json():
    text = scorecard_json([make_player("Alice", out=38)])
    payload = json.loads(text)

    assert payload[0]["playerName"] == "Alice"
    assert payload[0]["in"] is None
    assert "\n  " in text
