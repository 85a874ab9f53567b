"""
Configuration management for the API server
"""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

ENV_PREFIX = "TODO_APP_"

DEFAULTS: Dict[str, Any] = {
    "host": "127.0.0.1",
    "port": 8000,
    "seed_demo_data": True,
    "log_level": "INFO",
    "log_dir": None,
}


class Config:
    """Server configuration

    Values are resolved from, lowest to highest precedence: built-in defaults,
    an optional JSON file, TODO_APP_* environment variables, explicit overrides.
    """

    def __init__(self, config_file: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        self.config_file = Path(config_file) if config_file else None
        self.data = dict(DEFAULTS)
        self.data.update(self._load())
        self.data.update(self._from_env())
        self.data.update({k: v for k, v in (overrides or {}).items() if v is not None})

    def _load(self) -> dict:
        """Load configuration from file"""
        if self.config_file and self.config_file.exists():
            with open(self.config_file, 'r') as f:
                return json.load(f)
        return {}

    @staticmethod
    def _from_env() -> dict:
        values = {}
        for key in DEFAULTS:
            raw = os.environ.get(ENV_PREFIX + key.upper())
            if raw is not None:
                values[key] = raw
        return values

    @property
    def host(self) -> str:
        return str(self.data['host'])

    @property
    def port(self) -> int:
        return int(self.data['port'])

    @property
    def seed_demo_data(self) -> bool:
        value = self.data['seed_demo_data']
        if isinstance(value, str):
            return value.strip().lower() in ('1', 'true', 'yes', 'on')
        return bool(value)

    @property
    def log_level(self) -> str:
        return str(self.data['log_level']).upper()

    @property
    def log_dir(self) -> Optional[str]:
        return self.data.get('log_dir') or None
