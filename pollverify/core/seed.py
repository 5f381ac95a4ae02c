"""
Demo data for a fresh store.

Run on every startup. Each group is only inserted when its collection is
empty (users and system components are checked one by one), so calling it
again never duplicates anything.
"""
import logging

from pollverify.core.analytics import sunday_first_weekday
from pollverify.core.store import CheckInStore
from pollverify.models import (
    AnomalySeverity,
    AnomalyType,
    BiometricType,
    ComponentStatus,
    NotificationType,
    StationStatus,
    TransactionType,
    UserRole,
)
from pollverify.schemas import (
    AccessibilityPreferenceCreate,
    AlertCreate,
    AnomalyCreate,
    BiometricCreate,
    BlockchainTransactionCreate,
    MessageCreate,
    MobileNotificationCreate,
    PredictiveAnalyticCreate,
    StationCreate,
    SystemStatusCreate,
    UserCreate,
    VoterCreate,
)

logger = logging.getLogger(__name__)

DEMO_USERS = [
    UserCreate(username="admin", password="admin123", full_name="Administrator", station=None, role=UserRole.ADMIN),
    UserCreate(username="pollworker", password="poll123", full_name="Alex Thomas", station=1, role=UserRole.POLL_WORKER),
]

SYSTEM_COMPONENTS = [
    "voter_database",
    "id_scanner",
    "internet",
    "central_election_system",
    "biometric_scanner",
    "blockchain_verification",
]

# Components whose seeded status or notes differ from "operational" / "Normal operations"
COMPONENT_OVERRIDES = {
    "internet": (ComponentStatus.DEGRADED, "Slow connection speeds"),
    "biometric_scanner": (ComponentStatus.OPERATIONAL, "Fingerprint and facial recognition active"),
    "blockchain_verification": (ComponentStatus.OPERATIONAL, "Blockchain validation subsystem online"),
}

DEMO_ALERTS = [
    ("warning", "Internet Connection Slow", "Backup connection active. Some operations may be delayed."),
    ("info", "System Update Available", "Update will be automatically applied after closing hours."),
    ("info", "Biometric System Calibrated", "Facial recognition system has been calibrated for optimal performance."),
    ("warning", "AI Anomaly Detection Alert", "Unusual pattern detected in voter check-in rate. Monitoring situation."),
]

DEMO_MESSAGES = [
    ("County Election Office", "Please remind voters to check ballot completion before submission."),
    ("District Coordinator", "Expected increase in turnout between 4-6 PM. Additional support on standby."),
    ("IT Support", "Biometric verification system update completed. New features available."),
    ("Accessibility Coordinator", "New language options available in the accessibility interface."),
]

DEMO_VOTERS = [
    ("100123", "Sarah Johnson", "05/12/1985", "123 Main St, Cityville", "East District 4"),
    ("100456", "Michael Brown", "11/03/1972", "456 Oak Ave, Townsville", "West District 2"),
    ("100789", "Jennifer Smith", "07/25/1990", "789 Pine Rd, Villageton", "North District 1"),
    ("101012", "Robert Williams", "02/18/1965", "101 Cedar Ln, Hamletville", "South District 3"),
    ("101345", "Patricia Brown", "09/30/1988", "234 Birch St, Boroughville", "Central District 5"),
]

DEMO_ACCESSIBILITY = [
    AccessibilityPreferenceCreate(voter_id=1, visual_assistance=True, other_needs="Larger text on screen"),
    AccessibilityPreferenceCreate(voter_id=3, hearing_assistance=True, other_needs="Audio instructions"),
    AccessibilityPreferenceCreate(
        voter_id=4,
        mobility_assistance=True,
        language_preference="spanish",
        other_needs="Wheelchair accessible booth",
    ),
]

DEMO_NOTIFICATIONS = [
    MobileNotificationCreate(
        voter_id=1,
        phone_number="+15551234567",
        email="voter1@example.com",
        opted_in=True,
        notification_type=NotificationType.SMS,
    ),
    MobileNotificationCreate(
        voter_id=2,
        phone_number="+15559876543",
        email="voter2@example.com",
        opted_in=True,
        notification_type=NotificationType.EMAIL,
    ),
]

BIOMETRIC_CYCLE = [BiometricType.FINGERPRINT, BiometricType.FACIAL_RECOGNITION]
PREDICTION_FACTORS = ["historical_data", "weather", "local_events"]
FIRST_HOUR = 8
LAST_PREDICTED_HOUR = 18


def predicted_volume_for(hour: int) -> int:
    """Ramp up through the morning, plateau, then taper after 16:00"""
    if hour < 12:
        return 10 + hour
    if hour > 16:
        return 30 - hour
    return 25


def initialize_system(store: CheckInStore) -> None:
    """Populate the store with demo data, skipping groups already present"""
    now = store.clock()
    demo = store.demo

    logger.info("Checking for existing users...")
    for user in DEMO_USERS:
        if store.get_user_by_username(user.username) is None:
            store.create_user(user)
            logger.info(f"Created user {user.username}")
        else:
            logger.info(f"User {user.username} already exists, skipping...")

    if not store.list_stations():
        for number in range(1, 6):
            active = number <= 4
            store.create_station(StationCreate(
                number=number,
                status=StationStatus.ACTIVE if active else StationStatus.INACTIVE,
                operator_id=2 if active else None,
            ))
        logger.info("Created 5 stations")
    else:
        logger.info("Stations already exist, skipping...")

    for component in SYSTEM_COMPONENTS:
        if store.get_system_status_by_component(component) is None:
            status, notes = COMPONENT_OVERRIDES.get(component, (ComponentStatus.OPERATIONAL, "Normal operations"))
            store.create_system_status(SystemStatusCreate(component=component, status=status, notes=notes))
            logger.info(f"Created system component {component}")

    if not store.list_alerts():
        for alert_type, title, message in DEMO_ALERTS:
            store.create_alert(AlertCreate(type=alert_type, title=title, message=message))
        logger.info(f"Created {len(DEMO_ALERTS)} alerts")
    else:
        logger.info("Alerts already exist, skipping...")

    if not store.list_messages():
        for sender, message in DEMO_MESSAGES:
            store.create_message(MessageCreate(sender=sender, message=message))
        logger.info(f"Created {len(DEMO_MESSAGES)} messages")
    else:
        logger.info("Messages already exist, skipping...")

    if not store.list_voters():
        for voter_id, name, date_of_birth, address, precinct in DEMO_VOTERS:
            store.create_voter(VoterCreate(
                voter_id=voter_id,
                name=name,
                date_of_birth=date_of_birth,
                address=address,
                precinct=precinct,
            ))
        logger.info(f"Created {len(DEMO_VOTERS)} voters")
    else:
        logger.info("Voters already exist, skipping...")

    if not store.get_today_stats():
        for hour in range(FIRST_HOUR, now.hour + 1):
            store.create_stat(demo.hourly_stat(hour))
        logger.info(f"Created hourly stats up to {now.hour}:00")
    else:
        logger.info("Today's stats already exist, skipping...")

    if not store.list_biometrics():
        for voter_id in range(1, 4):
            if store.get_voter(voter_id) is None:
                continue
            biometric_type = BIOMETRIC_CYCLE[voter_id % len(BIOMETRIC_CYCLE)]
            biometric = store.create_biometric(BiometricCreate(
                voter_id=voter_id,
                type=biometric_type,
                data_reference=f"{biometric_type.value}_data_id_{voter_id}_reference",
            ))
            if voter_id == 1:
                store.verify_biometric(biometric.id, 2)
        logger.info("Created biometric records")

    if not store.list_accessibility_preferences():
        for preference in DEMO_ACCESSIBILITY:
            store.create_accessibility_preference(preference)
        logger.info(f"Created {len(DEMO_ACCESSIBILITY)} accessibility preferences")

    if not store.list_mobile_notifications():
        for notification in DEMO_NOTIFICATIONS:
            created = store.create_mobile_notification(notification)
            if created.voter_id == 1:
                store.verify_mobile_notification(created.id, created.verification_code)
        logger.info(f"Created {len(DEMO_NOTIFICATIONS)} mobile notification records")

    if not store.list_anomalies():
        anomalies = [
            AnomalyCreate(
                type=AnomalyType.UNUSUAL_PATTERN,
                description="Unusual spike in check-in rate detected at station 3",
                severity=AnomalySeverity.MEDIUM,
                metadata={"stationId": 3, "timeDetected": now.isoformat()},
            ),
            AnomalyCreate(
                type=AnomalyType.SECURITY_THREAT,
                description="Multiple failed biometric verification attempts for same voter ID",
                severity=AnomalySeverity.HIGH,
                metadata={"voterId": 5, "attempts": 3, "timeSpan": "5 minutes"},
            ),
            AnomalyCreate(
                type=AnomalyType.PERFORMANCE_ISSUE,
                description="Station 2 processing time significantly higher than average",
                severity=AnomalySeverity.LOW,
                metadata={"stationId": 2, "avgTime": "5.2 minutes", "systemAvg": "2.8 minutes"},
            ),
        ]
        created = [store.create_anomaly(anomaly) for anomaly in anomalies]
        store.resolve_anomaly(created[0].id, 1, "False positive - normal variation in check-in pattern")
        logger.info(f"Created {len(anomalies)} anomalies")

    if not store.list_predictive_analytics():
        day_of_week = sunday_first_weekday(now)
        for hour in range(FIRST_HOUR, LAST_PREDICTED_HOUR + 1):
            predicted_volume = predicted_volume_for(hour)
            predicted_wait = max(5, predicted_volume // 3)
            analytic = store.create_predictive_analytic(PredictiveAnalyticCreate(
                hour_of_day=hour,
                day_of_week=day_of_week,
                predicted_voter_volume=predicted_volume,
                predicted_wait_time=predicted_wait,
                factors_considered=PREDICTION_FACTORS,
            ))
            if hour < now.hour:
                actual_volume, actual_wait = demo.actual_outcome(predicted_volume, predicted_wait)
                store.update_predictive_analytic_with_actual(analytic.id, actual_volume, actual_wait)
        logger.info("Created predictions for today")

    if not store.list_blockchain_transactions():
        timestamp = now.isoformat()
        transactions = [
            BlockchainTransactionCreate(
                transaction_type=TransactionType.VOTER_VERIFICATION,
                transaction_hash="0x8f32d45a9e720a4d0e193ea21de9ee97e1971d2c3b7480cf",
                block_number=12345678,
                voter_id=1,
                polling_station_id="station_1",
                metadata={"timestamp": timestamp, "method": "biometric"},
            ),
            BlockchainTransactionCreate(
                transaction_type=TransactionType.CHECK_IN,
                transaction_hash="0x3e7a12c5b8e90d6f2a193ea9fe12d4c78e1234f5a6b7c8d9",
                block_number=12345679,
                voter_id=1,
                polling_station_id="station_1",
                metadata={"timestamp": timestamp, "operator": "poll_worker_2"},
            ),
            BlockchainTransactionCreate(
                transaction_type=TransactionType.VOTE_CAST,
                transaction_hash="0x7b28e39fa4c1d5e6e193ea21de9ee97e1971d2c3b748012",
                block_number=12345680,
                voter_id=1,
                polling_station_id="booth_3",
                metadata={"timestamp": timestamp, "ballot": "encrypted_ballot_hash"},
            ),
        ]
        for transaction in transactions:
            created = store.create_blockchain_transaction(transaction)
            store.verify_blockchain_transaction(created.id)
        logger.info(f"Created {len(transactions)} blockchain transactions")

    logger.info("Demo data ready")
