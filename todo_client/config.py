"""
Configuration management for the client
"""
import json
import os
from pathlib import Path
from typing import Optional

DEFAULT_SERVER_URL = 'http://localhost:8000'
DEFAULT_TIMEOUT = 10.0

# Overrides the saved server URL without touching the config file
SERVER_URL_ENV = 'TODO_CLIENT_SERVER_URL'


class Config:
    """Client configuration stored as JSON in the data directory"""

    def __init__(self, config_dir: Optional[str] = None):
        if config_dir is None:
            config_dir = os.path.expanduser("~/.todo-client")

        self.config_dir = Path(config_dir)
        self.config_file = self.config_dir / "config.json"

        self.data = self._load()

    def _load(self) -> dict:
        if self.config_file.exists():
            with open(self.config_file, 'r') as f:
                return json.load(f)
        return {}

    def save(self):
        """Write the configuration, creating the data directory if needed"""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w') as f:
            json.dump(self.data, f, indent=2)

    @property
    def server_url(self) -> str:
        """Base URL of the task API"""
        return os.environ.get(SERVER_URL_ENV) or self.data.get('server_url', DEFAULT_SERVER_URL)

    @server_url.setter
    def server_url(self, value: str):
        self.data['server_url'] = value.rstrip('/')
        self.save()

    @property
    def timeout(self) -> float:
        """Seconds to wait for each API response"""
        return float(self.data.get('timeout', DEFAULT_TIMEOUT))
