from sqlalchemy import Column, Integer, DateTime, Float, Text
from sqlalchemy.sql import func
from app.db import Base

class Run(Base):
    __tablename__ = "runs"

    id = Column(Integer, primary_key=True, index=True)

    # Session start time (UTC)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)

    distance_km = Column(Float, nullable=False, default=0.0)

    # Active duration in seconds, paused intervals excluded
    duration_s = Column(Float, nullable=False, default=0.0)

    # Minutes per km; 0 when no distance was covered
    average_pace = Column(Float, nullable=False, default=0.0)

    calories = Column(Float, nullable=False, default=0.0)

    # JSON array of [lat, lon] pairs in recording order
    coordinates = Column(Text, nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
