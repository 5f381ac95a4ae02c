from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
import enum
from pollverify.database import Base


class AnomalyType(str, enum.Enum):
    UNUSUAL_PATTERN = "unusual_pattern"
    SECURITY_THREAT = "security_threat"
    PERFORMANCE_ISSUE = "performance_issue"


class AnomalySeverity(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AnomalyStatus(str, enum.Enum):
    DETECTED = "detected"
    INVESTIGATING = "investigating"
    RESOLVED = "resolved"
    FALSE_POSITIVE = "false_positive"


class Anomaly(Base):
    __tablename__ = "anomalies"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    type = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    severity = Column(String, nullable=False, default=AnomalySeverity.LOW.value)
    status = Column(String, nullable=False, default=AnomalyStatus.DETECTED.value)
    detected_at = Column(DateTime, nullable=False)
    resolved_at = Column(DateTime, nullable=True)
    resolved_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    anomaly_metadata = Column("metadata", JSON, nullable=True)  # "metadata" is reserved on declarative classes
    actions = Column(JSON, nullable=False, default=list)  # Taken or recommended actions, appended on resolve
