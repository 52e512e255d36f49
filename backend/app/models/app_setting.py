from sqlalchemy import Column, String, Text
from app.db import Base


class AppSetting(Base):
    __tablename__ = "app_settings"

    # e.g. "monthlyGoal", "reminderDays"
    key = Column(String(64), primary_key=True, index=True, nullable=False)

    # JSON-encoded value
    value = Column(Text, nullable=False)
