"""
DJ Session Recommendations — FastAPI app factory.

Use: uvicorn djrecs_server.app:app
Or:  from djrecs_server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title="DJ Session Recommendations API",
        description="Rule-based session and DJ recommendations over a catalog snapshot",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def load_catalog():
        _, errors = config.validate()
        for error in errors:
            logger.warning("[startup] CONFIG %s", error)
        state = get_state()
        logger.info(
            "[startup] Catalog ready: %s sessions, %s djs (%s)",
            state.current_catalog.session_count,
            state.current_catalog.dj_count,
            state.current_catalog.fingerprint[:12],
        )

    return app


app = create_app()
