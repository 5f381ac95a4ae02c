from fastapi import Request
from pollverify.config import Settings
from pollverify.core.store import CheckInStore
from pollverify.websocket.manager import ConnectionManager


def get_store(request: Request) -> CheckInStore:
    """Store created by the application lifespan"""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    """Settings the application was built with"""
    return request.app.state.settings


def get_manager(request: Request) -> ConnectionManager:
    """Websocket connections belonging to this application"""
    return request.app.state.manager
