"""Mana cost parsing shared by the detail view and its icon renderer."""

from __future__ import annotations

import re

COLOR_SYMBOLS = "WUBRG"

_TOKEN_RE = re.compile(r"\{([^{}]*)\}")


def tokenize_mana_symbols(cost: str) -> list[str]:
    """
    Split a mana cost such as ``"{2}{W}{W/U}"`` into its symbols.

    Text outside braces is ignored and empty braces are skipped.

    Returns:
        Upper-cased symbols without braces, e.g. ``["2", "W", "W/U"]``
    """
    if not cost:
        return []
    return [match.strip().upper() for match in _TOKEN_RE.findall(cost) if match.strip()]


def symbol_colors(symbol: str) -> list[str]:
    """Return the colored mana a symbol represents (``"W/U"`` -> ``["W", "U"]``)."""
    return [part for part in symbol.upper().split("/") if part in COLOR_SYMBOLS]


def mana_value(cost: str) -> int:
    """
    Compute the mana value of a printed cost.

    Generic numbers count at face value, X counts as zero, and every other
    symbol (colored, hybrid, phyrexian, colorless) counts as one, except
    ``{2/W}`` style hybrids which count as two.
    """
    total = 0
    for symbol in tokenize_mana_symbols(cost):
        if symbol.isdigit():
            total += int(symbol)
        elif symbol in {"X", "Y", "Z"}:
            continue
        elif symbol.startswith("2/"):
            total += 2
        else:
            total += 1
    return total


__all__ = ["COLOR_SYMBOLS", "mana_value", "symbol_colors", "tokenize_mana_symbols"]
