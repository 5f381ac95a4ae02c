import asyncio
from datetime import datetime

from pollverify.schemas import AlertResponse, QueueItemResponse, QueueStats
from pollverify.websocket.events import create_alert_event, create_queue_update_event
from pollverify.websocket.manager import ConnectionManager


class FakeWebSocket:
    def __init__(self, broken: bool = False):
        self.accepted = False
        self.broken = broken
        self.sent = []

    async def accept(self):
        self.accepted = True

    async def send_json(self, message):
        if self.broken:
            raise RuntimeError("connection closed")
        self.sent.append(message)


ALERT = AlertResponse(
    id=1, type="warning", title="Internet Connection Slow",
    message="Backup connection active.", timestamp=datetime(2024, 11, 5, 9, 0),
)


def test_publish_reaches_dashboards_and_one_station():
    manager = ConnectionManager()
    dashboard = FakeWebSocket()
    station_one = FakeWebSocket()
    station_two = FakeWebSocket()

    async def scenario():
        await manager.connect(dashboard)
        await manager.connect(station_one, station_id=1)
        await manager.connect(station_two, station_id=2)
        await manager.publish({"type": "voter_check_in"}, station_id=1)

    asyncio.run(scenario())

    assert dashboard.accepted and station_one.accepted
    assert dashboard.sent == [{"type": "voter_check_in"}]
    assert station_one.sent == [{"type": "voter_check_in"}]
    assert station_two.sent == []


def test_broken_connections_are_dropped():
    manager = ConnectionManager()
    healthy = FakeWebSocket()
    broken = FakeWebSocket(broken=True)
    broken_station = FakeWebSocket(broken=True)

    async def scenario():
        await manager.connect(healthy)
        await manager.connect(broken)
        await manager.connect(broken_station, station_id=4)
        await manager.publish({"type": "alert_created"}, station_id=4)

    asyncio.run(scenario())

    assert healthy.sent == [{"type": "alert_created"}]
    assert manager.dashboard_connections == {healthy}
    assert 4 not in manager.station_connections


def test_disconnect():
    manager = ConnectionManager()
    websocket = FakeWebSocket()
    asyncio.run(manager.connect(websocket, station_id=3))

    manager.disconnect(websocket, station_id=3)
    assert manager.station_connections == {}
    manager.disconnect(websocket)
    assert manager.dashboard_connections == set()


def test_events_use_wire_format():
    event = create_alert_event(ALERT)
    assert event["type"] == "alert_created"
    assert event["data"]["alert"]["title"] == "Internet Connection Slow"
    assert event["data"]["alert"]["timestamp"] == "2024-11-05T09:00:00"
    datetime.fromisoformat(event["timestamp"])

    item = QueueItemResponse(
        id=3, voter_id=2, number=3, status="waiting", type="standard", wait_time_minutes=None,
        entered_at=datetime(2024, 11, 5, 9, 5), processed_at=None, processed_by=None,
    )
    queue_event = create_queue_update_event(item, QueueStats(waiting=2, in_progress=1, completed=0))
    assert queue_event["data"]["item"]["voterId"] == 2
    assert queue_event["data"]["stats"] == {"waiting": 2, "inProgress": 1, "completed": 0}
