from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey
from pollverify.database import Base


class Voter(Base):
    __tablename__ = "voters"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    voter_id = Column(String, unique=True, nullable=False, index=True)  # Number printed on the voter card
    name = Column(String, nullable=False, index=True)
    date_of_birth = Column(String, nullable=False)
    address = Column(Text, nullable=False)
    precinct = Column(String, nullable=False)
    checked_in = Column(Boolean, nullable=False, default=False)
    checked_in_at = Column(DateTime, nullable=True)
    checked_in_by = Column(Integer, ForeignKey("users.id"), nullable=True)
