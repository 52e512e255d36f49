import json
import logging

from sqlalchemy.orm import Session

from app.models.app_setting import AppSetting

logger = logging.getLogger(__name__)


class SettingsStore:
    """Small key-value store for user preferences, values kept as JSON."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str, default=None):
        row = self.db.query(AppSetting).filter(AppSetting.key == key).first()
        if not row:
            return default
        try:
            return json.loads(row.value)
        except ValueError:
            logger.warning("Setting %s holds invalid JSON; using default", key)
            return default

    def set(self, key: str, value) -> None:
        encoded = json.dumps(value)
        row = self.db.query(AppSetting).filter(AppSetting.key == key).first()
        if not row:
            row = AppSetting(key=key, value=encoded)
            self.db.add(row)
        else:
            row.value = encoded

    def update(self, values: dict) -> None:
        for key, value in values.items():
            self.set(key, value)
        self.db.commit()
