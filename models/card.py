"""
Card model - Immutable records for a single catalog entry.

A card is identified by its large image URI: two printings may share a name
but never an image, so equality and hashing ignore every other field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

PRICE_FIELDS = ("usd", "usd_foil", "eur", "eur_foil")
IMAGE_FIELDS = ("large", "normal", "art_crop", "border_crop")


@dataclass(frozen=True)
class ImageURIs:
    """Remote image locations for a card, kept as plain strings."""

    large: str
    normal: str
    art_crop: str
    border_crop: str

    def to_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in IMAGE_FIELDS}


@dataclass(frozen=True)
class Prices:
    """Decimal prices as text; any of them may be missing."""

    usd: str | None = None
    usd_foil: str | None = None
    eur: str | None = None
    eur_foil: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {name: getattr(self, name) for name in PRICE_FIELDS}

    def available(self) -> dict[str, str]:
        """Return only the prices that are present."""
        return {name: value for name, value in self.to_dict().items() if value is not None}


@dataclass(frozen=True, eq=False)
class Card:
    """A single printing from the bundled card set."""

    name: str
    type_line: str
    image_uris: ImageURIs
    collector_number: str
    oracle_text: str = ""
    mana_cost: str = ""
    prices: Prices = field(default_factory=Prices)
    legalities: dict[str, str] = field(default_factory=dict)
    games: tuple[str, ...] = ()

    @property
    def identity(self) -> str:
        return self.image_uris.large

    @property
    def name_lower(self) -> str:
        return self.name.lower()

    def is_legal_in(self, format_name: str) -> bool:
        return self.legalities.get(format_name) == "legal"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the bundled JSON card shape."""
        return {
            "name": self.name,
            "type_line": self.type_line,
            "oracle_text": self.oracle_text,
            "mana_cost": self.mana_cost,
            "image_uris": self.image_uris.to_dict(),
            "prices": self.prices.to_dict(),
            "legalities": dict(self.legalities),
            "games": list(self.games),
            "collector_number": self.collector_number,
        }


__all__ = ["Card", "ImageURIs", "Prices", "IMAGE_FIELDS", "PRICE_FIELDS"]
