# Pydantic schemas
from pollverify.schemas.user import UserCreate, UserResponse, UserRecord
from pollverify.schemas.voter import VoterCreate, VoterResponse, CheckInResponse
from pollverify.schemas.queue import (
    QueueItemCreate, QueueItemResponse, QueueItemWithVoter,
    QueueStatusUpdate, QueueStats
)
from pollverify.schemas.station import StationCreate, StationResponse, StationWithOperator, StationStatusUpdate
from pollverify.schemas.issue import IssueCreate, IssueResponse, IssueResolve
from pollverify.schemas.system import (
    SystemStatusCreate, SystemStatusResponse, SystemStatusUpdate,
    AlertCreate, AlertResponse,
    MessageCreate, MessageResponse,
    ConnectionStatus
)
from pollverify.schemas.stat import StatCreate, StatResponse, StatsSummary
from pollverify.schemas.biometric import BiometricCreate, BiometricResponse
from pollverify.schemas.accessibility import (
    AccessibilityPreferenceCreate, AccessibilityPreferenceUpdate, AccessibilityPreferenceResponse
)
from pollverify.schemas.notification import (
    MobileNotificationCreate, MobileNotificationResponse,
    VerificationRequest, SendNotificationRequest, SendNotificationResponse
)
from pollverify.schemas.anomaly import AnomalyCreate, AnomalyResponse, AnomalyResolve
from pollverify.schemas.predictive import PredictiveAnalyticCreate, PredictiveAnalyticResponse, ActualsUpdate
from pollverify.schemas.blockchain import BlockchainTransactionCreate, BlockchainTransactionResponse

__all__ = [
    "UserCreate", "UserResponse", "UserRecord",
    "VoterCreate", "VoterResponse", "CheckInResponse",
    "QueueItemCreate", "QueueItemResponse", "QueueItemWithVoter", "QueueStatusUpdate", "QueueStats",
    "StationCreate", "StationResponse", "StationWithOperator", "StationStatusUpdate",
    "IssueCreate", "IssueResponse", "IssueResolve",
    "SystemStatusCreate", "SystemStatusResponse", "SystemStatusUpdate",
    "AlertCreate", "AlertResponse",
    "MessageCreate", "MessageResponse",
    "ConnectionStatus",
    "StatCreate", "StatResponse", "StatsSummary",
    "BiometricCreate", "BiometricResponse",
    "AccessibilityPreferenceCreate", "AccessibilityPreferenceUpdate", "AccessibilityPreferenceResponse",
    "MobileNotificationCreate", "MobileNotificationResponse",
    "VerificationRequest", "SendNotificationRequest", "SendNotificationResponse",
    "AnomalyCreate", "AnomalyResponse", "AnomalyResolve",
    "PredictiveAnalyticCreate", "PredictiveAnalyticResponse", "ActualsUpdate",
    "BlockchainTransactionCreate", "BlockchainTransactionResponse",
]
