from typing import Optional, Dict, Any
from datetime import datetime
from pollverify.models.blockchain import TransactionType
from pollverify.schemas.base import CamelModel, StoreInt


class BlockchainTransactionCreate(CamelModel):
    transaction_type: TransactionType
    transaction_hash: str
    block_number: Optional[StoreInt] = None
    voter_id: Optional[StoreInt] = None
    polling_station_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class BlockchainTransactionResponse(CamelModel):
    id: int
    transaction_type: str
    transaction_hash: str
    block_number: Optional[int]
    voter_id: Optional[int]
    polling_station_id: Optional[str]
    timestamp: datetime
    metadata: Optional[Dict[str, Any]]
    verified: bool
