"""
Random values for demo data.

Everything random the service produces goes through one ``DemoDataSource`` so
tests (and ``RANDOM_SEED``) can make it deterministic.
"""
import random
from datetime import datetime
from typing import Optional, Tuple

from pollverify.models.anomaly import AnomalyType, AnomalySeverity
from pollverify.schemas.anomaly import AnomalyCreate
from pollverify.schemas.stat import StatCreate

TEST_ANOMALY_DESCRIPTIONS = [
    "Unusual spike in voter check-in rate at station 2",
    "Multiple failed biometric verification attempts for same voter ID",
    "Station 3 processing time significantly higher than average",
    "Unexpected network latency detected",
    "Potential duplicate voter entry detected",
]


class DemoDataSource:
    """Source of cosmetic randomness for the demo"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def verification_code(self) -> str:
        """Six digit numeric code, never starting with 0"""
        return str(self.rng.randint(100000, 999999))

    def hourly_stat(self, hour: int) -> StatCreate:
        return StatCreate(
            hour=hour,
            voters_processed=self.rng.randint(5, 14),
            average_processing_time=self.rng.randint(120, 179),  # 2-3 minutes
            wait_time=self.rng.randint(8, 12),
            throughput=self.rng.randint(5, 7),
        )

    def actual_outcome(self, predicted_volume: int, predicted_wait: int) -> Tuple[int, int]:
        """Actual volume and wait time close to a prediction"""
        actual_volume = predicted_volume + self.rng.randint(-2, 2)
        actual_wait = max(1, predicted_wait + self.rng.randint(-1, 1))
        return actual_volume, actual_wait

    def test_anomaly(self, now: datetime, location: str = "polling_station_1") -> AnomalyCreate:
        description = self.rng.choice(TEST_ANOMALY_DESCRIPTIONS)
        return AnomalyCreate(
            type=self.rng.choice(list(AnomalyType)),
            description=description,
            severity=self.rng.choice(list(AnomalySeverity)),
            metadata={
                "detectedAt": now.isoformat(),
                "location": location,
                "confidence": self.rng.randint(70, 99),
            },
        )
