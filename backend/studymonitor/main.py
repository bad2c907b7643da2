# SPDX-License-Identifier: Apache-2.0
"""FastAPI app factory. Thin layer: security middleware + routers only."""
from fastapi import FastAPI

from studymonitor.core.security import add_security_middleware, get_limiter
from studymonitor.database import create_db_and_tables
from studymonitor.routers import analytics, studies, system


def create_app() -> FastAPI:
    app = FastAPI(title="Study Monitor API", version="0.1.0")
    app.state.limiter = get_limiter()

    add_security_middleware(app)

    @app.on_event("startup")
    def on_startup():
        create_db_and_tables()

    app.include_router(studies.router, prefix="/studies")
    app.include_router(analytics.router, prefix="/analytics")
    app.include_router(system.router, prefix="/system")

    return app


app = create_app()
