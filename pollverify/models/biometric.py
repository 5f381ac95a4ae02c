from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey
import enum
from pollverify.database import Base


class BiometricType(str, enum.Enum):
    FINGERPRINT = "fingerprint"
    FACIAL_RECOGNITION = "facial_recognition"


class Biometric(Base):
    __tablename__ = "biometrics"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    voter_id = Column(Integer, ForeignKey("voters.id"), nullable=False, index=True)
    type = Column(String, nullable=False)
    data_reference = Column(String, nullable=True)  # Pointer to where the template is held, never the template
    verified = Column(Boolean, nullable=False, default=False)
    verified_at = Column(DateTime, nullable=True)
    verified_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
