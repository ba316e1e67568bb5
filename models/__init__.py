"""Models package - Immutable card records shared by every layer."""

from models.card import IMAGE_FIELDS, PRICE_FIELDS, Card, ImageURIs, Prices

__all__ = ["Card", "ImageURIs", "Prices", "IMAGE_FIELDS", "PRICE_FIELDS"]
