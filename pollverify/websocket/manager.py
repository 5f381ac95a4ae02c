"""
WebSocket connection manager for live dashboard updates
"""
from typing import Dict, Set
from fastapi import WebSocket
import logging

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Manages WebSocket connections for check-in stations and dashboards"""

    def __init__(self):
        # Map station_id -> Set of WebSocket connections
        self.station_connections: Dict[int, Set[WebSocket]] = {}
        # Dashboard connections
        self.dashboard_connections: Set[WebSocket] = set()

    async def connect(self, websocket: WebSocket, station_id: int = None):
        """Accept and store a WebSocket connection; no station means a dashboard"""
        await websocket.accept()

        if station_id is None:
            self.dashboard_connections.add(websocket)
            logger.info(f"Dashboard WebSocket connected. Total dashboard connections: {len(self.dashboard_connections)}")
        else:
            self.station_connections.setdefault(station_id, set()).add(websocket)
            logger.info(
                f"Station {station_id} WebSocket connected. "
                f"Total connections: {len(self.station_connections[station_id])}"
            )

    def disconnect(self, websocket: WebSocket, station_id: int = None):
        """Remove a WebSocket connection"""
        if station_id is None:
            self.dashboard_connections.discard(websocket)
            logger.info(f"Dashboard WebSocket disconnected. Total dashboard connections: {len(self.dashboard_connections)}")
        elif station_id in self.station_connections:
            self.station_connections[station_id].discard(websocket)
            if not self.station_connections[station_id]:
                del self.station_connections[station_id]
            logger.info(f"Station {station_id} WebSocket disconnected")

    async def _send_all(self, connections: Set[WebSocket], message: dict, target: str) -> Set[WebSocket]:
        """Send to each connection, returning the ones that failed"""
        disconnected = set()
        for connection in list(connections):
            try:
                await connection.send_json(message)
            except Exception as e:
                logger.error(f"Error sending {message.get('type')} to {target}: {e}")
                disconnected.add(connection)
        return disconnected

    async def send_to_station(self, message: dict, station_id: int):
        """Send message to every client watching a station"""
        connections = self.station_connections.get(station_id)
        if not connections:
            return
        for conn in await self._send_all(connections, message, f"station {station_id}"):
            self.disconnect(conn, station_id=station_id)

    async def broadcast_to_dashboard(self, message: dict):
        """Broadcast message to all dashboard connections"""
        for conn in await self._send_all(self.dashboard_connections, message, "dashboard"):
            self.dashboard_connections.discard(conn)

    async def publish(self, message: dict, station_id: int = None):
        """Broadcast to dashboards and optionally one station; errors are logged, never raised"""
        try:
            await self.broadcast_to_dashboard(message)
            if station_id is not None:
                await self.send_to_station(message, station_id)
        except Exception as e:
            logger.error(f"Error broadcasting WebSocket event: {e}")
