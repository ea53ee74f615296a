"""Persistence for character sheets."""

from .payload_normalizer import normalize_stored_payload
from .repository import CharacterRepository, SQLiteCharacterRepository

__all__ = ["CharacterRepository", "SQLiteCharacterRepository", "normalize_stored_payload"]
