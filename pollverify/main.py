import logging
import random
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, WebSocket, WebSocketDisconnect, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from pollverify.api import (
    accessibility, anomalies, biometrics, blockchain, issues, notifications,
    predictive, queue, stations, stats, system, voters
)
from pollverify.config import Settings, get_settings
from pollverify.core.demo import DemoDataSource
from pollverify.core.exceptions import CheckInError
from pollverify.core.seed import initialize_system
from pollverify.core.store import CheckInStore
from pollverify.websocket.manager import ConnectionManager

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


def create_app(settings: Settings = None) -> FastAPI:
    """Build the application; each app owns a fresh in-memory store"""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events"""
        # Startup
        demo = DemoDataSource(random.Random(settings.RANDOM_SEED))
        app.state.store = CheckInStore(demo=demo, echo=settings.SQL_ECHO)
        if settings.SEED_DEMO_DATA:
            initialize_system(app.state.store)
        logger.info(f"PollVerify ready ({settings.ENVIRONMENT})")
        yield
        # Shutdown
        app.state.store.engine.dispose()

    app = FastAPI(
        title="PollVerify",
        description="Voter check-in, queue and polling place monitoring APIs",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.connected = True
    app.state.manager = ConnectionManager()

    if settings.ENVIRONMENT == "development":
        logger.info(f"CORS allowed origins: {settings.cors_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )

    # Add Gzip compression
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.exception_handler(CheckInError)
    async def check_in_error_handler(request: Request, exc: CheckInError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # 400 rather than FastAPI's 422, matching the UI's expectations
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _validation_message(exc)},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc) or "Internal server error"},
        )

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": "PollVerify",
            "version": "1.0.0",
            "docs": "/docs",
            "status": "operational"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT
        }

    app.include_router(system.router, prefix="/api", tags=["System"])
    app.include_router(voters.router, prefix="/api", tags=["Voters"])
    app.include_router(queue.router, prefix="/api", tags=["Queue"])
    app.include_router(stations.router, prefix="/api", tags=["Stations"])
    app.include_router(issues.router, prefix="/api", tags=["Issues"])
    app.include_router(stats.router, prefix="/api", tags=["Stats"])
    app.include_router(biometrics.router, prefix="/api", tags=["Biometrics"])
    app.include_router(accessibility.router, prefix="/api", tags=["Accessibility"])
    app.include_router(notifications.router, prefix="/api", tags=["Mobile Notifications"])
    app.include_router(anomalies.router, prefix="/api", tags=["Anomalies"])
    app.include_router(predictive.router, prefix="/api", tags=["Predictive Analytics"])
    app.include_router(blockchain.router, prefix="/api", tags=["Blockchain"])

    @app.websocket("/ws/dashboard")
    async def websocket_dashboard_endpoint(websocket: WebSocket):
        """WebSocket endpoint for dashboard real-time updates"""
        manager = app.state.manager
        await manager.connect(websocket)
        try:
            while True:
                # Keep connection alive
                await websocket.receive_text()
                await websocket.send_json({"type": "pong", "message": "Dashboard connection active"})
        except WebSocketDisconnect:
            manager.disconnect(websocket)

    @app.websocket("/ws/stations/{station_id}")
    async def websocket_station_endpoint(websocket: WebSocket, station_id: int):
        """WebSocket endpoint for one check-in station"""
        manager = app.state.manager
        await manager.connect(websocket, station_id=station_id)
        try:
            while True:
                await websocket.receive_text()
                await websocket.send_json({"type": "pong", "message": f"Station {station_id} connection active"})
        except WebSocketDisconnect:
            manager.disconnect(websocket, station_id=station_id)

    return app


def run():
    """Console entry point"""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


app = create_app()


if __name__ == "__main__":
    run()
