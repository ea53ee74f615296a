import configparser
import os
from pathlib import Path


class ConfigHelper:
    _config = None
    _config_mtime = None
    _config_path: Path = Path("config/config.ini")

    @classmethod
    def load_config(cls):
        """Return the parsed ``config.ini``, re-reading it only after it changes on disk."""
        path = cls._config_path
        mtime = os.path.getmtime(path) if path.exists() else None

        if cls._config is None or mtime != cls._config_mtime:
            cls._config = configparser.ConfigParser()
            if mtime is not None:
                cls._config.read(str(path), encoding="utf-8")
            else:
                print(f"Warning: config file '{path}' not found.")
            cls._config_mtime = mtime

        return cls._config

    @classmethod
    def get(cls, section, key, fallback=None):
        try:
            return cls.load_config().get(section, key, fallback=fallback)
        except (configparser.Error, ValueError) as e:
            print(f"Config error: [{section}] {key} - {e}")
            return fallback

    @classmethod
    def getboolean(cls, section, key, fallback=False):
        try:
            return cls.load_config().getboolean(section, key, fallback=fallback)
        except (configparser.Error, ValueError) as e:
            print(f"Config error: [{section}] {key} - {e}")
            return fallback

    @classmethod
    def get_database_path(cls) -> str:
        """Return the configured character database path."""
        return (cls.get("Database", "path", fallback="characters.db") or "characters.db").strip()
