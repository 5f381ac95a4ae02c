from pollverify.models.user import User, UserRole
from pollverify.models.voter import Voter
from pollverify.models.queue import QueueItem, QueueStatus, QueueType
from pollverify.models.station import Station, StationStatus
from pollverify.models.issue import Issue, IssueStatus
from pollverify.models.system import SystemStatus, ComponentStatus, Alert, AlertType, Message
from pollverify.models.stat import Stat
from pollverify.models.biometric import Biometric, BiometricType
from pollverify.models.accessibility import AccessibilityPreference
from pollverify.models.notification import MobileNotification, NotificationType
from pollverify.models.anomaly import Anomaly, AnomalyType, AnomalySeverity, AnomalyStatus
from pollverify.models.predictive import PredictiveAnalytic
from pollverify.models.blockchain import BlockchainTransaction, TransactionType

__all__ = [
    "User",
    "UserRole",
    "Voter",
    "QueueItem",
    "QueueStatus",
    "QueueType",
    "Station",
    "StationStatus",
    "Issue",
    "IssueStatus",
    "SystemStatus",
    "ComponentStatus",
    "Alert",
    "AlertType",
    "Message",
    "Stat",
    "Biometric",
    "BiometricType",
    "AccessibilityPreference",
    "MobileNotification",
    "NotificationType",
    "Anomaly",
    "AnomalyType",
    "AnomalySeverity",
    "AnomalyStatus",
    "PredictiveAnalytic",
    "BlockchainTransaction",
    "TransactionType",
]
