"""
WebSocket event definitions and helpers
"""
from typing import Dict, Any, Optional
from datetime import datetime
from pydantic import BaseModel


def _event(event_type: str, data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": event_type,
        "timestamp": datetime.now().isoformat(),
        "data": data,
    }


def _payload(record: BaseModel) -> Dict[str, Any]:
    """Record as it appears in REST responses (camelCase, JSON-safe)"""
    return record.model_dump(mode="json", by_alias=True)


def create_check_in_event(voter: BaseModel, user_id: int, station_id: Optional[int]) -> Dict[str, Any]:
    """Create voter check-in event for dashboards and the station"""
    return _event("voter_check_in", {
        "voter": _payload(voter),
        "userId": user_id,
        "stationId": station_id,
    })


def create_queue_update_event(item: BaseModel, stats: BaseModel) -> Dict[str, Any]:
    """Create queue change event carrying fresh queue statistics"""
    return _event("queue_update", {
        "item": _payload(item),
        "stats": _payload(stats),
    })


def create_issue_event(issue: BaseModel) -> Dict[str, Any]:
    """Create issue reported/resolved event"""
    return _event("issue_update", {"issue": _payload(issue)})


def create_anomaly_event(anomaly: BaseModel) -> Dict[str, Any]:
    """Create anomaly detected/resolved event"""
    return _event("anomaly_update", {"anomaly": _payload(anomaly)})


def create_alert_event(alert: BaseModel) -> Dict[str, Any]:
    """Create new alert event"""
    return _event("alert_created", {"alert": _payload(alert)})
