"""
In-memory entity store backing every REST endpoint.

Each entity type is a table in a private in-memory SQLite database owned by
one ``CheckInStore``. Ids come from AUTOINCREMENT so they are sequential per
table and never reused. Nothing touches disk; the data lives as long as the
store object does.

Every operation returns a pydantic snapshot, so a record handed out earlier
never changes under the caller. All access goes through one re-entrant lock.
"""
import logging
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from pollverify.core.analytics import (
    count_special_cases,
    prediction_accuracy,
    queue_stats,
    resolution_minutes,
    start_of_day,
    summarize_stats,
)
from pollverify.core.demo import DemoDataSource
from pollverify.core.exceptions import (
    DuplicateRecordError,
    InvalidCodeError,
    NotFoundError,
    NotificationNotVerifiedError,
)
from pollverify.core.security import BCRYPT_ROUNDS, get_password_hash
from pollverify.database import create_memory_engine, create_session_factory, init_db
from pollverify.models import (
    AccessibilityPreference,
    Alert,
    Anomaly,
    AnomalyStatus,
    Biometric,
    BlockchainTransaction,
    Issue,
    IssueStatus,
    Message,
    MobileNotification,
    PredictiveAnalytic,
    QueueItem,
    Stat,
    Station,
    SystemStatus,
    User,
    Voter,
)
from pollverify.models.queue import PROCESSED_STATUSES
from pollverify.schemas import (
    AccessibilityPreferenceCreate,
    AccessibilityPreferenceResponse,
    AccessibilityPreferenceUpdate,
    AlertCreate,
    AlertResponse,
    AnomalyCreate,
    AnomalyResponse,
    BiometricCreate,
    BiometricResponse,
    BlockchainTransactionCreate,
    BlockchainTransactionResponse,
    IssueCreate,
    IssueResponse,
    MessageCreate,
    MessageResponse,
    MobileNotificationCreate,
    MobileNotificationResponse,
    PredictiveAnalyticCreate,
    PredictiveAnalyticResponse,
    QueueItemCreate,
    QueueItemResponse,
    QueueItemWithVoter,
    QueueStats,
    StatCreate,
    StatResponse,
    StationCreate,
    StationResponse,
    StationWithOperator,
    StatsSummary,
    SystemStatusCreate,
    SystemStatusResponse,
    UserCreate,
    UserRecord,
    UserResponse,
    VoterCreate,
    VoterResponse,
)
from pollverify.schemas.base import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _snapshot(schema: Type[SchemaT], row) -> SchemaT:
    """Copy a mapped row into a response schema, keyed by column name"""
    mapper = inspect(row).mapper
    data = {attr.columns[0].name: getattr(row, attr.key) for attr in mapper.column_attrs}
    return schema.model_validate(data)


def _storable(*values) -> bool:
    """False when an integer key could never match a row (outside SQLite INTEGER range)"""
    return all(
        not isinstance(value, int) or SQLITE_INTEGER_MIN <= value <= SQLITE_INTEGER_MAX
        for value in values
    )


class CheckInStore:
    """Entity collections and the operations layered on them"""

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        demo: Optional[DemoDataSource] = None,
        echo: bool = False,
        password_rounds: int = BCRYPT_ROUNDS,
    ):
        self.clock = clock or datetime.now
        self.demo = demo or DemoDataSource()
        self.password_rounds = password_rounds
        self.engine = create_memory_engine(echo=echo)
        init_db(self.engine)
        self._session_factory = create_session_factory(self.engine)
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------
    @contextmanager
    def _session(self) -> Iterator[Session]:
        """Serialized session; commits on success, rolls back on error"""
        with self._lock:
            with self._session_factory() as db:
                try:
                    yield db
                    db.commit()
                except Exception:
                    db.rollback()
                    raise

    @staticmethod
    def _require(db: Session, model, record_id: int, entity: str):
        row = db.get(model, record_id) if _storable(record_id) else None
        if row is None:
            raise NotFoundError(entity, record_id)
        return row

    @staticmethod
    def _ensure_unique(db: Session, column, value, entity: str, field: str) -> None:
        if db.scalars(select(column.class_).where(column == value).limit(1)).first() is not None:
            raise DuplicateRecordError(entity, field, value)

    def _insert(self, row, schema: Type[SchemaT]) -> SchemaT:
        with self._session() as db:
            db.add(row)
            db.flush()
            return _snapshot(schema, row)

    def _get(self, model, schema: Type[SchemaT], record_id: int) -> Optional[SchemaT]:
        if not _storable(record_id):
            return None
        with self._session() as db:
            row = db.get(model, record_id)
            return _snapshot(schema, row) if row is not None else None

    def _first(self, model, schema: Type[SchemaT], *conditions) -> Optional[SchemaT]:
        with self._session() as db:
            row = db.scalars(select(model).where(*conditions).order_by(model.id).limit(1)).first()
            return _snapshot(schema, row) if row is not None else None

    def _all(self, model, schema: Type[SchemaT], *conditions) -> List[SchemaT]:
        with self._session() as db:
            rows = db.scalars(select(model).where(*conditions).order_by(model.id)).all()
            return [_snapshot(schema, row) for row in rows]

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        return self._get(User, UserRecord, user_id)

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        return self._first(User, UserRecord, User.username == username)

    def create_user(self, user: UserCreate) -> UserRecord:
        with self._session() as db:
            self._ensure_unique(db, User.username, user.username, "User", "username")
            row = User(
                username=user.username,
                password_hash=get_password_hash(user.password, self.password_rounds),
                full_name=user.full_name,
                station=user.station,
                role=user.role,
            )
            db.add(row)
            db.flush()
            return _snapshot(UserRecord, row)

    def list_users(self) -> List[UserRecord]:
        return self._all(User, UserRecord)

    # ------------------------------------------------------------------
    # Voters
    # ------------------------------------------------------------------
    def get_voter(self, voter_id: int) -> Optional[VoterResponse]:
        return self._get(Voter, VoterResponse, voter_id)

    def get_voter_by_voter_id(self, voter_id: str) -> Optional[VoterResponse]:
        """Look a voter up by the number on their voter card"""
        return self._first(Voter, VoterResponse, Voter.voter_id == voter_id)

    def create_voter(self, voter: VoterCreate) -> VoterResponse:
        with self._session() as db:
            self._ensure_unique(db, Voter.voter_id, voter.voter_id, "Voter", "voterId")
            row = Voter(**voter.model_dump(), checked_in=False, checked_in_at=None, checked_in_by=None)
            db.add(row)
            db.flush()
            return _snapshot(VoterResponse, row)

    def list_voters(self) -> List[VoterResponse]:
        return self._all(Voter, VoterResponse)

    def check_in_voter(self, voter_id: int, user_id: int, station_id: Optional[int] = None) -> VoterResponse:
        """
        Mark a voter as checked in by ``user_id``.

        Checking in again re-stamps the time and operator. When ``station_id``
        is given, that station's processed counter is bumped in the same
        transaction; an unknown station is skipped.
        """
        with self._session() as db:
            voter = self._require(db, Voter, voter_id, "Voter")
            voter.checked_in = True
            voter.checked_in_at = self.clock()
            voter.checked_in_by = user_id

            if station_id is not None:
                station = db.get(Station, station_id) if _storable(station_id) else None
                if station is not None:
                    station.voters_processed += 1
                else:
                    logger.warning(f"Check-in of voter {voter_id}: station {station_id} not found, counter not updated")

            db.flush()
            logger.info(f"Voter {voter_id} checked in by user {user_id}")
            return _snapshot(VoterResponse, voter)

    # ------------------------------------------------------------------
    # Queue
    # ------------------------------------------------------------------
    def get_queue_item(self, item_id: int) -> Optional[QueueItemResponse]:
        return self._get(QueueItem, QueueItemResponse, item_id)

    def create_queue_item(self, item: QueueItemCreate) -> QueueItemResponse:
        row = QueueItem(
            **item.model_dump(),
            entered_at=self.clock(),
            processed_at=None,
            processed_by=None,
        )
        return self._insert(row, QueueItemResponse)

    def list_queue_items(self) -> List[QueueItemResponse]:
        return self._all(QueueItem, QueueItemResponse)

    def list_queue_with_voters(self) -> List[QueueItemWithVoter]:
        """Queue entries with their voter attached"""
        with self._session() as db:
            items = db.scalars(select(QueueItem).order_by(QueueItem.id)).all()
            result = []
            for item in items:
                voter = db.get(Voter, item.voter_id) if item.voter_id is not None else None
                entry = _snapshot(QueueItemResponse, item).model_dump()
                entry["voter"] = _snapshot(VoterResponse, voter) if voter is not None else None
                result.append(QueueItemWithVoter.model_validate(entry))
            return result

    def update_queue_item_status(self, item_id: int, status: str, user_id: Optional[int] = None) -> QueueItemResponse:
        """Change a queue entry's status; completing or flagging it stamps who processed it"""
        with self._session() as db:
            item = self._require(db, QueueItem, item_id, "Queue item")
            item.status = status
            if status in PROCESSED_STATUSES:
                item.processed_at = self.clock()
                item.processed_by = user_id or None
            db.flush()
            return _snapshot(QueueItemResponse, item)

    def get_queue_stats(self) -> QueueStats:
        return queue_stats(self.list_queue_items())

    # ------------------------------------------------------------------
    # Stations
    # ------------------------------------------------------------------
    def get_station(self, station_id: int) -> Optional[StationResponse]:
        return self._get(Station, StationResponse, station_id)

    def get_station_by_number(self, number: int) -> Optional[StationResponse]:
        if not _storable(number):
            return None
        return self._first(Station, StationResponse, Station.number == number)

    def create_station(self, station: StationCreate) -> StationResponse:
        with self._session() as db:
            self._ensure_unique(db, Station.number, station.number, "Station", "number")
            row = Station(**station.model_dump(), voters_processed=0)
            db.add(row)
            db.flush()
            return _snapshot(StationResponse, row)

    def list_stations(self) -> List[StationResponse]:
        return self._all(Station, StationResponse)

    def list_stations_with_operators(self) -> List[StationWithOperator]:
        """Stations with their operator attached (password excluded)"""
        with self._session() as db:
            stations = db.scalars(select(Station).order_by(Station.id)).all()
            result = []
            for station in stations:
                entry = _snapshot(StationResponse, station).model_dump()
                operator = db.get(User, station.operator_id) if station.operator_id else None
                entry["operator"] = _snapshot(UserResponse, operator) if operator is not None else None
                result.append(StationWithOperator.model_validate(entry))
            return result

    def update_station_status(self, station_id: int, status: str, operator_id: Optional[int] = None) -> StationResponse:
        with self._session() as db:
            station = self._require(db, Station, station_id, "Station")
            station.status = status
            if operator_id:
                station.operator_id = operator_id
            db.flush()
            return _snapshot(StationResponse, station)

    def increment_station_voters_processed(self, station_id: int) -> StationResponse:
        with self._session() as db:
            station = self._require(db, Station, station_id, "Station")
            station.voters_processed += 1
            db.flush()
            return _snapshot(StationResponse, station)

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------
    def get_issue(self, issue_id: int) -> Optional[IssueResponse]:
        return self._get(Issue, IssueResponse, issue_id)

    def create_issue(self, issue: IssueCreate) -> IssueResponse:
        row = Issue(
            **issue.model_dump(),
            status=IssueStatus.OPEN.value,
            reported_at=self.clock(),
            resolved_at=None,
            resolved_by=None,
            resolution_time=None,
        )
        return self._insert(row, IssueResponse)

    def list_issues(self) -> List[IssueResponse]:
        return self._all(Issue, IssueResponse)

    def resolve_issue(self, issue_id: int, user_id: int) -> IssueResponse:
        with self._session() as db:
            issue = self._require(db, Issue, issue_id, "Issue")
            resolved_at = self.clock()
            issue.status = IssueStatus.RESOLVED.value
            issue.resolved_at = resolved_at
            issue.resolved_by = user_id
            issue.resolution_time = resolution_minutes(issue.reported_at, resolved_at)
            db.flush()
            logger.info(f"Issue {issue_id} resolved by user {user_id} after {issue.resolution_time} min")
            return _snapshot(IssueResponse, issue)

    # ------------------------------------------------------------------
    # System status
    # ------------------------------------------------------------------
    def get_system_status(self, status_id: int) -> Optional[SystemStatusResponse]:
        return self._get(SystemStatus, SystemStatusResponse, status_id)

    def get_system_status_by_component(self, component: str) -> Optional[SystemStatusResponse]:
        return self._first(SystemStatus, SystemStatusResponse, SystemStatus.component == component)

    def create_system_status(self, system_status: SystemStatusCreate) -> SystemStatusResponse:
        with self._session() as db:
            self._ensure_unique(db, SystemStatus.component, system_status.component, "System status", "component")
            row = SystemStatus(**system_status.model_dump(), last_checked=self.clock())
            db.add(row)
            db.flush()
            return _snapshot(SystemStatusResponse, row)

    def list_system_statuses(self) -> List[SystemStatusResponse]:
        return self._all(SystemStatus, SystemStatusResponse)

    def update_system_status(self, status_id: int, status: str, notes: Optional[str] = None) -> SystemStatusResponse:
        with self._session() as db:
            row = self._require(db, SystemStatus, status_id, "System status")
            row.status = status
            row.last_checked = self.clock()
            if notes:
                row.notes = notes
            db.flush()
            logger.info(f"Component {row.component} is now {status}")
            return _snapshot(SystemStatusResponse, row)

    # ------------------------------------------------------------------
    # Alerts and messages (append-only)
    # ------------------------------------------------------------------
    def get_alert(self, alert_id: int) -> Optional[AlertResponse]:
        return self._get(Alert, AlertResponse, alert_id)

    def create_alert(self, alert: AlertCreate) -> AlertResponse:
        return self._insert(Alert(**alert.model_dump(), timestamp=self.clock()), AlertResponse)

    def list_alerts(self) -> List[AlertResponse]:
        return self._all(Alert, AlertResponse)

    def get_message(self, message_id: int) -> Optional[MessageResponse]:
        return self._get(Message, MessageResponse, message_id)

    def create_message(self, message: MessageCreate) -> MessageResponse:
        return self._insert(Message(**message.model_dump(), timestamp=self.clock()), MessageResponse)

    def list_messages(self) -> List[MessageResponse]:
        return self._all(Message, MessageResponse)

    # ------------------------------------------------------------------
    # Hourly stats
    # ------------------------------------------------------------------
    def get_stat(self, stat_id: int) -> Optional[StatResponse]:
        return self._get(Stat, StatResponse, stat_id)

    def create_stat(self, stat: StatCreate) -> StatResponse:
        return self._insert(Stat(**stat.model_dump(), date=self.clock()), StatResponse)

    def list_stats(self) -> List[StatResponse]:
        return self._all(Stat, StatResponse)

    def get_today_stats(self) -> List[StatResponse]:
        """Rows recorded since local midnight"""
        return self._all(Stat, StatResponse, Stat.date >= start_of_day(self.clock()))

    def get_stats_summary(self) -> StatsSummary:
        return summarize_stats(self.get_today_stats(), count_special_cases(self.list_queue_items()))

    # ------------------------------------------------------------------
    # Biometrics
    # ------------------------------------------------------------------
    def get_biometric(self, biometric_id: int) -> Optional[BiometricResponse]:
        return self._get(Biometric, BiometricResponse, biometric_id)

    def get_biometric_by_voter_id(self, voter_id: int) -> Optional[BiometricResponse]:
        if not _storable(voter_id):
            return None
        return self._first(Biometric, BiometricResponse, Biometric.voter_id == voter_id)

    def create_biometric(self, biometric: BiometricCreate) -> BiometricResponse:
        now = self.clock()
        row = Biometric(
            **biometric.model_dump(),
            verified=False,
            verified_at=None,
            verified_by=None,
            created_at=now,
            updated_at=now,
        )
        return self._insert(row, BiometricResponse)

    def list_biometrics(self) -> List[BiometricResponse]:
        return self._all(Biometric, BiometricResponse)

    def verify_biometric(self, biometric_id: int, user_id: int) -> BiometricResponse:
        with self._session() as db:
            row = self._require(db, Biometric, biometric_id, "Biometric")
            now = self.clock()
            row.verified = True
            row.verified_at = now
            row.verified_by = user_id
            row.updated_at = now
            db.flush()
            logger.info(f"Biometric {biometric_id} ({row.type}) verified by user {user_id}")
            return _snapshot(BiometricResponse, row)

    # ------------------------------------------------------------------
    # Accessibility preferences
    # ------------------------------------------------------------------
    def get_accessibility_preference(self, preference_id: int) -> Optional[AccessibilityPreferenceResponse]:
        return self._get(AccessibilityPreference, AccessibilityPreferenceResponse, preference_id)

    def get_accessibility_preference_by_voter_id(self, voter_id: int) -> Optional[AccessibilityPreferenceResponse]:
        if not _storable(voter_id):
            return None
        return self._first(
            AccessibilityPreference,
            AccessibilityPreferenceResponse,
            AccessibilityPreference.voter_id == voter_id,
        )

    def create_accessibility_preference(
        self, preference: AccessibilityPreferenceCreate
    ) -> AccessibilityPreferenceResponse:
        now = self.clock()
        row = AccessibilityPreference(**preference.model_dump(), created_at=now, updated_at=now)
        return self._insert(row, AccessibilityPreferenceResponse)

    def list_accessibility_preferences(self) -> List[AccessibilityPreferenceResponse]:
        return self._all(AccessibilityPreference, AccessibilityPreferenceResponse)

    def update_accessibility_preference(
        self, preference_id: int, changes: AccessibilityPreferenceUpdate
    ) -> AccessibilityPreferenceResponse:
        """Apply only the fields that were explicitly provided"""
        with self._session() as db:
            row = self._require(db, AccessibilityPreference, preference_id, "Accessibility preference")
            for field, value in changes.model_dump(exclude_unset=True).items():
                setattr(row, field, value)
            row.updated_at = self.clock()
            db.flush()
            return _snapshot(AccessibilityPreferenceResponse, row)

    # ------------------------------------------------------------------
    # Mobile notifications
    # ------------------------------------------------------------------
    def get_mobile_notification(self, notification_id: int) -> Optional[MobileNotificationResponse]:
        return self._get(MobileNotification, MobileNotificationResponse, notification_id)

    def get_mobile_notification_by_voter_id(self, voter_id: int) -> Optional[MobileNotificationResponse]:
        if not _storable(voter_id):
            return None
        return self._first(MobileNotification, MobileNotificationResponse, MobileNotification.voter_id == voter_id)

    def create_mobile_notification(self, notification: MobileNotificationCreate) -> MobileNotificationResponse:
        row = MobileNotification(
            **notification.model_dump(),
            verification_code=self.demo.verification_code(),
            verified=False,
            last_notified=None,
            created_at=self.clock(),
        )
        return self._insert(row, MobileNotificationResponse)

    def list_mobile_notifications(self) -> List[MobileNotificationResponse]:
        return self._all(MobileNotification, MobileNotificationResponse)

    def verify_mobile_notification(self, notification_id: int, verification_code: str) -> MobileNotificationResponse:
        with self._session() as db:
            row = self._require(db, MobileNotification, notification_id, "Mobile notification")
            if row.verification_code != verification_code:
                raise InvalidCodeError()
            row.verified = True
            db.flush()
            return _snapshot(MobileNotificationResponse, row)

    def send_notification(self, notification_id: int, message: str) -> bool:
        """
        Mock delivery to a verified contact.

        Nothing leaves the process; the message is logged and the record's
        ``last_notified`` is stamped.
        """
        with self._session() as db:
            row = self._require(db, MobileNotification, notification_id, "Mobile notification")
            if not row.verified:
                raise NotificationNotVerifiedError()
            row.last_notified = self.clock()
            target = row.phone_number if row.notification_type == "sms" else row.email
            logger.info(f"Mock {row.notification_type} to {target} for voter {row.voter_id}: {message}")
            return True

    # ------------------------------------------------------------------
    # Anomalies
    # ------------------------------------------------------------------
    def get_anomaly(self, anomaly_id: int) -> Optional[AnomalyResponse]:
        return self._get(Anomaly, AnomalyResponse, anomaly_id)

    def create_anomaly(self, anomaly: AnomalyCreate) -> AnomalyResponse:
        row = Anomaly(
            type=anomaly.type,
            description=anomaly.description,
            severity=anomaly.severity,
            anomaly_metadata=anomaly.metadata,
            status=AnomalyStatus.DETECTED.value,
            detected_at=self.clock(),
            resolved_at=None,
            resolved_by=None,
            actions=[],
        )
        return self._insert(row, AnomalyResponse)

    def create_test_anomaly(self, location: str = "polling_station_1") -> AnomalyResponse:
        """Create a random anomaly for exercising the dashboard"""
        return self.create_anomaly(self.demo.test_anomaly(self.clock(), location))

    def list_anomalies(self) -> List[AnomalyResponse]:
        return self._all(Anomaly, AnomalyResponse)

    def resolve_anomaly(self, anomaly_id: int, user_id: int, resolution: str) -> AnomalyResponse:
        """Mark resolved and append the resolution to the action log"""
        with self._session() as db:
            row = self._require(db, Anomaly, anomaly_id, "Anomaly")
            row.status = AnomalyStatus.RESOLVED.value
            row.resolved_at = self.clock()
            row.resolved_by = user_id
            # Reassign so the JSON column registers the change
            row.actions = [*(row.actions or []), resolution]
            db.flush()
            logger.info(f"Anomaly {anomaly_id} resolved by user {user_id}")
            return _snapshot(AnomalyResponse, row)

    # ------------------------------------------------------------------
    # Predictive analytics
    # ------------------------------------------------------------------
    def get_predictive_analytic(self, analytic_id: int) -> Optional[PredictiveAnalyticResponse]:
        return self._get(PredictiveAnalytic, PredictiveAnalyticResponse, analytic_id)

    def create_predictive_analytic(self, analytic: PredictiveAnalyticCreate) -> PredictiveAnalyticResponse:
        now = self.clock()
        row = PredictiveAnalytic(
            **analytic.model_dump(),
            date=now,
            actual_voter_volume=None,
            actual_wait_time=None,
            accuracy_percentage=None,
            created_at=now,
        )
        return self._insert(row, PredictiveAnalyticResponse)

    def list_predictive_analytics(self) -> List[PredictiveAnalyticResponse]:
        return self._all(PredictiveAnalytic, PredictiveAnalyticResponse)

    def update_predictive_analytic_with_actual(
        self, analytic_id: int, actual_voter_volume: int, actual_wait_time: int
    ) -> PredictiveAnalyticResponse:
        """Record what actually happened and score the prediction"""
        with self._session() as db:
            row = self._require(db, PredictiveAnalytic, analytic_id, "Predictive analytic")
            row.actual_voter_volume = actual_voter_volume
            row.actual_wait_time = actual_wait_time
            row.accuracy_percentage = prediction_accuracy(
                row.predicted_voter_volume,
                actual_voter_volume,
                row.predicted_wait_time,
                actual_wait_time,
            )
            db.flush()
            return _snapshot(PredictiveAnalyticResponse, row)

    def get_prediction_for_time_slot(self, hour_of_day: int, day_of_week: int) -> Optional[PredictiveAnalyticResponse]:
        if not _storable(hour_of_day, day_of_week):
            return None
        return self._first(
            PredictiveAnalytic,
            PredictiveAnalyticResponse,
            PredictiveAnalytic.hour_of_day == hour_of_day,
            PredictiveAnalytic.day_of_week == day_of_week,
        )

    # ------------------------------------------------------------------
    # Blockchain transactions
    # ------------------------------------------------------------------
    def get_blockchain_transaction(self, transaction_id: int) -> Optional[BlockchainTransactionResponse]:
        return self._get(BlockchainTransaction, BlockchainTransactionResponse, transaction_id)

    def get_blockchain_transaction_by_hash(self, transaction_hash: str) -> Optional[BlockchainTransactionResponse]:
        return self._first(
            BlockchainTransaction,
            BlockchainTransactionResponse,
            BlockchainTransaction.transaction_hash == transaction_hash,
        )

    def create_blockchain_transaction(self, transaction: BlockchainTransactionCreate) -> BlockchainTransactionResponse:
        row = BlockchainTransaction(
            transaction_type=transaction.transaction_type,
            transaction_hash=transaction.transaction_hash,
            block_number=transaction.block_number,
            voter_id=transaction.voter_id,
            polling_station_id=transaction.polling_station_id,
            transaction_metadata=transaction.metadata,
            timestamp=self.clock(),
            verified=False,
        )
        return self._insert(row, BlockchainTransactionResponse)

    def list_blockchain_transactions(self) -> List[BlockchainTransactionResponse]:
        return self._all(BlockchainTransaction, BlockchainTransactionResponse)

    def verify_blockchain_transaction(self, transaction_id: int) -> BlockchainTransactionResponse:
        with self._session() as db:
            row = self._require(db, BlockchainTransaction, transaction_id, "Blockchain transaction")
            row.verified = True
            db.flush()
            return _snapshot(BlockchainTransactionResponse, row)

    def get_voter_transactions(self, voter_id: int) -> List[BlockchainTransactionResponse]:
        if not _storable(voter_id):
            return []
        return self._all(
            BlockchainTransaction,
            BlockchainTransactionResponse,
            BlockchainTransaction.voter_id == voter_id,
        )
