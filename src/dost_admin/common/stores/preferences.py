import json
import logging
import os
from typing import Optional

from dost_admin.common.utils.config import preferences_path

logger = logging.getLogger(__name__)

REMEMBERED_EMAIL_KEY = "dost_remembered_email"


class RememberedEmail:
    """The login form's "remember me" email, kept in a small JSON file."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or preferences_path()

    def get(self) -> Optional[str]:
        return self._load().get(REMEMBERED_EMAIL_KEY)

    def remember(self, email: str):
        prefs = self._load()
        prefs[REMEMBERED_EMAIL_KEY] = email
        self._save(prefs)

    def forget(self):
        prefs = self._load()
        if prefs.pop(REMEMBERED_EMAIL_KEY, None) is not None:
            self._save(prefs)

    def _load(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as err:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {err}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, prefs: dict):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump(prefs, fh)
