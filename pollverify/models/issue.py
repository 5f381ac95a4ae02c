from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
import enum
from pollverify.database import Base


class IssueStatus(str, enum.Enum):
    OPEN = "open"
    RESOLVED = "resolved"


class Issue(Base):
    __tablename__ = "issues"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    type = Column(String, nullable=False)  # id_verification, address_discrepancy, scanner_malfunction, etc.
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default=IssueStatus.OPEN.value)
    reported_at = Column(DateTime, nullable=False)
    reported_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    resolved_at = Column(DateTime, nullable=True)
    resolved_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    resolution_time = Column(Integer, nullable=True)  # in minutes
