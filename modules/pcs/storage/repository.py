"""SQLite persistence for character sheets in the configured character DB."""

from __future__ import annotations

import json
import sqlite3
from typing import Callable, List, Optional, Protocol

from db.db import CHARACTERS_TABLE, ensure_characters_table, get_connection
from modules.helpers.logging_helper import log_info, log_methods, log_module_import, log_warning
from modules.pcs.models import CharacterRecord, parse_timestamp, utc_now

from .payload_normalizer import normalize_stored_payload

log_module_import(__name__)


class CharacterRepository(Protocol):
    def list(self) -> List[CharacterRecord]: ...

    def get(self, character_id: str) -> Optional[CharacterRecord]: ...

    def save(self, record: CharacterRecord) -> CharacterRecord: ...

    def delete(self, character_id: str) -> None: ...


def _decode(payload_json: str) -> CharacterRecord:
    return CharacterRecord.from_dict(normalize_stored_payload(json.loads(payload_json)))


@log_methods
class SQLiteCharacterRepository:
    TABLE_NAME = CHARACTERS_TABLE

    def __init__(self, connection_factory: Optional[Callable[[], sqlite3.Connection]] = None):
        self._connect = connection_factory or get_connection
        try:
            self._ensure_table()
        except sqlite3.DatabaseError as exc:
            log_warning(f"Character storage unavailable: {exc}")

    def _ensure_table(self) -> None:
        conn = self._connect()
        try:
            ensure_characters_table(conn.cursor())
            conn.commit()
        finally:
            conn.close()

    def list(self) -> List[CharacterRecord]:
        """Return every readable sheet; unreadable storage yields an empty list."""
        try:
            conn = self._connect()
            try:
                cursor = conn.cursor()
                cursor.execute(f"SELECT id, payload_json FROM {self.TABLE_NAME} ORDER BY name COLLATE NOCASE")
                rows = cursor.fetchall()
            finally:
                conn.close()
        except sqlite3.DatabaseError as exc:
            log_warning(f"Could not read characters: {exc}")
            return []

        records: List[CharacterRecord] = []
        for character_id, payload_json in rows:
            try:
                records.append(_decode(payload_json))
            except (AttributeError, TypeError, ValueError) as exc:
                log_warning(f"Skipping malformed character {character_id}: {exc}")
                continue
        return records

    def get(self, character_id: str) -> Optional[CharacterRecord]:
        try:
            conn = self._connect()
            try:
                cursor = conn.cursor()
                cursor.execute(f"SELECT payload_json FROM {self.TABLE_NAME} WHERE id = ?", (character_id,))
                row = cursor.fetchone()
            finally:
                conn.close()
        except sqlite3.DatabaseError as exc:
            log_warning(f"Could not read character {character_id}: {exc}")
            return None
        if not row:
            return None
        try:
            return _decode(row[0])
        except (AttributeError, TypeError, ValueError) as exc:
            log_warning(f"Malformed character {character_id}: {exc}")
            return None

    def save(self, record: CharacterRecord) -> CharacterRecord:
        """Upsert ``record`` by id and return the stored copy with a fresh ``updated_at``."""
        stored = record.copy(
            created_at=parse_timestamp(record.created_at),
            updated_at=max(utc_now(), parse_timestamp(record.updated_at)),
        )
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"""
                INSERT INTO {self.TABLE_NAME} (id, name, payload_json, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name=excluded.name,
                    payload_json=excluded.payload_json,
                    updated_at=excluded.updated_at
                """,
                (
                    stored.id,
                    stored.name,
                    json.dumps(stored.to_dict(), ensure_ascii=False),
                    stored.updated_at.isoformat(),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        log_info(f"Saved character '{stored.name}' ({stored.id})")
        return stored

    def delete(self, character_id: str) -> None:
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(f"DELETE FROM {self.TABLE_NAME} WHERE id = ?", (character_id,))
            conn.commit()
        finally:
            conn.close()
