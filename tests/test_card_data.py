"""Tests for decoding the bundled catalog document."""

import json

import pytest
from test_helpers import card_payload

from utils.card_data import (
    CardParseError,
    CatalogLoadError,
    encode_catalog,
    parse_catalog,
    read_catalog_file,
)


def _document(*cards):
    return json.dumps({"data": list(cards)})


def test_parse_catalog_preserves_order_and_fields():
    raw = _document(card_payload("Rhystic Study", "18"), card_payload("Necropotence", "34"))

    cards = parse_catalog(raw)

    assert [card.name for card in cards] == ["Rhystic Study", "Necropotence"]
    first = cards[0]
    assert first.collector_number == "18"
    assert first.image_uris.art_crop.endswith("art_crop/rhystic-study-18.jpg")
    assert first.prices.usd == "1.00"
    assert first.prices.usd_foil is None
    assert first.legalities == {"standard": "not_legal", "commander": "legal"}
    assert first.games == ("paper", "mtgo")


def test_parse_catalog_accepts_bytes():
    cards = parse_catalog(_document(card_payload()).encode("utf-8"))

    assert len(cards) == 1


def test_empty_data_list_is_an_empty_catalog():
    assert parse_catalog('{"data": []}') == []


def test_missing_data_key_names_the_field():
    with pytest.raises(CardParseError) as excinfo:
        parse_catalog('{"cards": []}')

    assert excinfo.value.field == "data"
    assert excinfo.value.problem == "missing"


def test_non_object_root_is_rejected():
    with pytest.raises(CardParseError) as excinfo:
        parse_catalog("[1, 2, 3]")

    assert excinfo.value.field == "$"


def test_malformed_json_raises_catalog_load_error():
    with pytest.raises(CatalogLoadError) as excinfo:
        parse_catalog('{"data": [')

    assert not isinstance(excinfo.value, CardParseError)


def test_missing_image_uri_reports_nested_path():
    entry = card_payload()
    del entry["image_uris"]["large"]

    with pytest.raises(CardParseError) as excinfo:
        parse_catalog(_document(card_payload("Fine", "2"), entry))

    assert excinfo.value.field == "data[1].image_uris.large"
    assert excinfo.value.problem == "missing"


def test_wrong_type_reports_expected_type():
    entry = card_payload(collector_number="7")
    entry["collector_number"] = 7

    with pytest.raises(CardParseError) as excinfo:
        parse_catalog(_document(entry))

    assert excinfo.value.field == "data[0].collector_number"
    assert "expected string" in excinfo.value.problem


def test_optional_text_fields_default_to_empty_string():
    entry = card_payload()
    del entry["oracle_text"]
    entry["mana_cost"] = None

    card = parse_catalog(_document(entry))[0]

    assert card.oracle_text == ""
    assert card.mana_cost == ""


def test_missing_prices_means_no_prices():
    entry = card_payload()
    del entry["prices"]

    card = parse_catalog(_document(entry))[0]

    assert card.prices.available() == {}


def test_non_string_legality_is_rejected():
    entry = card_payload(legalities={"modern": True})

    with pytest.raises(CardParseError) as excinfo:
        parse_catalog(_document(entry))

    assert excinfo.value.field == "data[0].legalities.modern"


def test_unknown_fields_are_ignored():
    entry = card_payload(rarity="rare", set="wot")

    card = parse_catalog(_document(entry))[0]

    assert card.name == "Test Card"


def test_encode_catalog_decodes_to_equal_cards():
    cards = parse_catalog(_document(card_payload("A", "1"), card_payload("B", "2")))

    decoded = parse_catalog(encode_catalog(cards))

    assert decoded == cards
    assert [card.to_dict() for card in decoded] == [card.to_dict() for card in cards]


def test_read_catalog_file_missing_raises(tmp_path):
    with pytest.raises(CatalogLoadError, match="not found"):
        read_catalog_file(tmp_path / "missing.json")


def test_read_catalog_file_reads_disk(tmp_path):
    path = tmp_path / "set.json"
    path.write_text(_document(card_payload("Sneak Attack", "47")), encoding="utf-8")

    cards = read_catalog_file(path)

    assert cards[0].name == "Sneak Attack"
