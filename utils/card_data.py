"""Decode and encode the bundled Scryfall card-set document.

The document has the shape ``{"data": [card, ...]}``. Decoding fails closed:
a missing or mistyped field raises :class:`CardParseError` naming the field,
rather than silently defaulting it.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from loguru import logger

from models.card import IMAGE_FIELDS, PRICE_FIELDS, Card, ImageURIs, Prices


class CatalogLoadError(Exception):
    """The bundled catalog could not be read, decoded or validated."""


class CardParseError(CatalogLoadError):
    """A card entry is missing a required field or has the wrong type."""

    def __init__(self, field: str, problem: str) -> None:
        super().__init__(f"{field}: {problem}")
        self.field = field
        self.problem = problem


def parse_catalog(raw: bytes | str) -> list[Card]:
    """Decode a catalog document into an ordered list of cards."""
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(f"Malformed catalog JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise CardParseError("$", f"expected object, got {_type_name(payload)}")
    if "data" not in payload:
        raise CardParseError("data", "missing")
    entries = payload["data"]
    if not isinstance(entries, list):
        raise CardParseError("data", f"expected list, got {_type_name(entries)}")

    return [parse_card(entry, f"data[{index}]") for index, entry in enumerate(entries)]


def parse_card(entry: Any, path: str = "card") -> Card:
    """Build a :class:`Card` from one decoded JSON object."""
    obj = _expect_object(entry, path)
    image_uris = _expect_object(_require(obj, "image_uris", path), f"{path}.image_uris")
    legalities = _expect_object(_require(obj, "legalities", path), f"{path}.legalities")
    games = _require(obj, "games", path)
    if not isinstance(games, list):
        raise CardParseError(f"{path}.games", f"expected list, got {_type_name(games)}")

    prices_raw = obj.get("prices")
    prices_obj = (
        {} if prices_raw is None else _expect_object(prices_raw, f"{path}.prices")
    )

    return Card(
        name=_require_str(obj, "name", path),
        type_line=_require_str(obj, "type_line", path),
        oracle_text=_optional_str(obj, "oracle_text", path) or "",
        mana_cost=_optional_str(obj, "mana_cost", path) or "",
        image_uris=ImageURIs(
            **{key: _require_str(image_uris, key, f"{path}.image_uris") for key in IMAGE_FIELDS}
        ),
        prices=Prices(
            **{key: _optional_str(prices_obj, key, f"{path}.prices") for key in PRICE_FIELDS}
        ),
        legalities={
            fmt: _require_str(legalities, fmt, f"{path}.legalities") for fmt in legalities
        },
        games=tuple(
            _expect_str(game, f"{path}.games[{index}]") for index, game in enumerate(games)
        ),
        collector_number=_require_str(obj, "collector_number", path),
    )


def encode_catalog(cards: Iterable[Card], indent: int | None = None) -> str:
    """Encode cards back into the bundled document shape."""
    return json.dumps(
        {"data": [card.to_dict() for card in cards]}, ensure_ascii=False, indent=indent
    )


def read_catalog_file(path: Path) -> list[Card]:
    """Read and decode a catalog file, raising :class:`CatalogLoadError` on any failure."""
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise CatalogLoadError(f"Catalog resource {path} not found") from exc
    except OSError as exc:
        raise CatalogLoadError(f"Unable to read catalog resource {path}: {exc}") from exc

    cards = parse_catalog(raw)
    logger.debug(f"Decoded {len(cards)} cards from {path}")
    return cards


def _require(obj: dict[str, Any], key: str, path: str) -> Any:
    if key not in obj:
        raise CardParseError(f"{path}.{key}", "missing")
    return obj[key]


def _require_str(obj: dict[str, Any], key: str, path: str) -> str:
    return _expect_str(_require(obj, key, path), f"{path}.{key}")


def _optional_str(obj: dict[str, Any], key: str, path: str) -> str | None:
    value = obj.get(key)
    if value is None:
        return None
    return _expect_str(value, f"{path}.{key}")


def _expect_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise CardParseError(path, f"expected string, got {_type_name(value)}")
    return value


def _expect_object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise CardParseError(path, f"expected object, got {_type_name(value)}")
    return value


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__


__all__ = [
    "CardParseError",
    "CatalogLoadError",
    "encode_catalog",
    "parse_card",
    "parse_catalog",
    "read_catalog_file",
]
