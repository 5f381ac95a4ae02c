from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, JSON
import enum
from pollverify.database import Base


class TransactionType(str, enum.Enum):
    VOTER_VERIFICATION = "voter_verification"
    CHECK_IN = "check_in"
    VOTE_CAST = "vote_cast"


class BlockchainTransaction(Base):
    __tablename__ = "blockchain_transactions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    transaction_type = Column(String, nullable=False)
    transaction_hash = Column(String, nullable=False, index=True)
    block_number = Column(Integer, nullable=True)
    voter_id = Column(Integer, ForeignKey("voters.id"), nullable=True, index=True)
    polling_station_id = Column(String, nullable=True)
    timestamp = Column(DateTime, nullable=False)
    transaction_metadata = Column("metadata", JSON, nullable=True)  # Non-sensitive transaction details
    verified = Column(Boolean, nullable=False, default=False)
