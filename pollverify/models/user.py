from sqlalchemy import Column, Integer, String
import enum
from pollverify.database import Base


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    POLL_WORKER = "poll_worker"


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    full_name = Column(String, nullable=False)
    station = Column(Integer, nullable=True)
    role = Column(String, nullable=False, default=UserRole.POLL_WORKER.value)
