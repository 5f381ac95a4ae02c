from sqlalchemy import Column, Integer, String, Text, DateTime
import enum
from pollverify.database import Base


class ComponentStatus(str, enum.Enum):
    OPERATIONAL = "operational"
    DEGRADED = "degraded"
    DOWN = "down"


class AlertType(str, enum.Enum):
    WARNING = "warning"
    INFO = "info"
    ERROR = "error"


class SystemStatus(Base):
    __tablename__ = "system_status"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    component = Column(String, unique=True, nullable=False)  # voter_database, id_scanner, internet, ...
    status = Column(String, nullable=False, default=ComponentStatus.OPERATIONAL.value)
    last_checked = Column(DateTime, nullable=False)
    notes = Column(Text, nullable=True)


class Alert(Base):
    __tablename__ = "alerts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    type = Column(String, nullable=False)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    timestamp = Column(DateTime, nullable=False)


class Message(Base):
    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    sender = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    timestamp = Column(DateTime, nullable=False)
