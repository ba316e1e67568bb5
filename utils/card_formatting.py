"""Text helpers for the card detail view."""

from __future__ import annotations

from dataclasses import dataclass

from models.card import Card

PRICE_LABELS = {
    "usd": "USD",
    "usd_foil": "USD (foil)",
    "eur": "EUR",
    "eur_foil": "EUR (foil)",
}
CURRENCY_SYMBOLS = {"usd": "$", "usd_foil": "$", "eur": "€", "eur_foil": "€"}


@dataclass(frozen=True)
class LegalityRow:
    format_label: str
    status_label: str
    is_legal: bool


def humanize(key: str) -> str:
    """``"not_legal"`` -> ``"Not Legal"``, ``"paupercommander"`` -> ``"Paupercommander"``."""
    return " ".join(part.capitalize() for part in key.replace("_", " ").split())


def legality_rows(card: Card) -> list[LegalityRow]:
    """Legalities sorted by format key, ready for a two-column table."""
    return [
        LegalityRow(humanize(fmt), humanize(status), status == "legal")
        for fmt, status in sorted(card.legalities.items())
    ]


def format_price(key: str, value: str | None) -> str:
    if value is None:
        return "—"
    return f"{CURRENCY_SYMBOLS.get(key, '')}{value}"


def price_lines(card: Card) -> list[tuple[str, str]]:
    """Label/value pairs for every price the card has."""
    return [
        (PRICE_LABELS[key], format_price(key, value))
        for key, value in card.prices.available().items()
    ]


def games_label(card: Card) -> str:
    if not card.games:
        return "Not available in any game"
    return ", ".join(humanize(game) for game in card.games)


__all__ = [
    "LegalityRow",
    "format_price",
    "games_label",
    "humanize",
    "legality_rows",
    "price_lines",
]
