# db.py
import os
import sqlite3

from modules.helpers.config_helper import ConfigHelper
from modules.helpers.logging_helper import log_info, log_module_import

log_module_import(__name__)

CHARACTERS_TABLE = "characters"


def get_db_path() -> str:
    raw_db_path = ConfigHelper.get_database_path()
    if os.path.exists(raw_db_path):
        return raw_db_path
    return os.path.abspath(os.path.normpath(raw_db_path))


def get_connection():
    db_path = get_db_path()
    parent = os.path.dirname(db_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    return sqlite3.connect(db_path)


def ensure_characters_table(cursor) -> None:
    cursor.execute(
        f"""
        CREATE TABLE IF NOT EXISTS {CHARACTERS_TABLE} (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL DEFAULT '',
            payload_json TEXT NOT NULL,
            updated_at TEXT
        )
        """
    )


def initialize_db():
    conn = get_connection()
    try:
        cursor = conn.cursor()
        ensure_characters_table(cursor)
        conn.commit()
    finally:
        conn.close()
    log_info(f"Character database ready at {get_db_path()}", func_name="db.initialize_db")
