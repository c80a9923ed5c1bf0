"""SQLAlchemy ORM models."""
from sqlalchemy import BigInteger, Column, DateTime, Float, Index, Integer, String

from robot_logs.infrastructure.database.base import Base


class LogRecord(Base):
    __tablename__ = "logs"

    id = Column(BigInteger().with_variant(Integer(), "sqlite"), primary_key=True, autoincrement=True)
    robot = Column(String(255), nullable=False)
    device_generation = Column("deviceGeneration", String(255), nullable=False)
    start_time = Column("startTime", DateTime(timezone=True), nullable=False)
    end_time = Column("endTime", DateTime(timezone=True), nullable=False)
    # milliseconds, endTime - startTime
    duration = Column(BigInteger, nullable=False)
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)

    __table_args__ = (
        Index("idx_logs_start_time", "startTime"),
        Index("idx_logs_device_generation", "deviceGeneration"),
    )
