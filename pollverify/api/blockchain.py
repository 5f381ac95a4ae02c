from typing import List
from fastapi import APIRouter, Depends, status
from pollverify.api.deps import get_store
from pollverify.core.exceptions import NotFoundError
from pollverify.core.store import CheckInStore
from pollverify.schemas.blockchain import BlockchainTransactionCreate, BlockchainTransactionResponse

router = APIRouter()


@router.get("/blockchain-transactions", response_model=List[BlockchainTransactionResponse])
async def list_transactions(store: CheckInStore = Depends(get_store)):
    return store.list_blockchain_transactions()


@router.get("/blockchain-transactions/voter/{voter_id}", response_model=List[BlockchainTransactionResponse])
async def get_voter_transactions(voter_id: int, store: CheckInStore = Depends(get_store)):
    """Audit trail for one voter; empty when there is none"""
    return store.get_voter_transactions(voter_id)


@router.get("/blockchain-transactions/hash/{transaction_hash}", response_model=BlockchainTransactionResponse)
async def get_transaction_by_hash(transaction_hash: str, store: CheckInStore = Depends(get_store)):
    transaction = store.get_blockchain_transaction_by_hash(transaction_hash)
    if transaction is None:
        raise NotFoundError("Blockchain transaction", transaction_hash, field="hash", message="Transaction not found")
    return transaction


@router.post("/blockchain-transactions", response_model=BlockchainTransactionResponse, status_code=status.HTTP_201_CREATED)
async def record_transaction(
    transaction_data: BlockchainTransactionCreate,
    store: CheckInStore = Depends(get_store)
):
    """Record a simulated ledger transaction"""
    return store.create_blockchain_transaction(transaction_data)


@router.put("/blockchain-transactions/{transaction_id}/verify", response_model=BlockchainTransactionResponse)
async def verify_transaction(transaction_id: int, store: CheckInStore = Depends(get_store)):
    return store.verify_blockchain_transaction(transaction_id)
