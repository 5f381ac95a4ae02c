from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey
from pollverify.database import Base


class AccessibilityPreference(Base):
    __tablename__ = "accessibility_preferences"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    voter_id = Column(Integer, ForeignKey("voters.id"), nullable=False, index=True)
    visual_assistance = Column(Boolean, nullable=False, default=False)
    hearing_assistance = Column(Boolean, nullable=False, default=False)
    mobility_assistance = Column(Boolean, nullable=False, default=False)
    language_preference = Column(String, nullable=False, default="english")
    other_needs = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
