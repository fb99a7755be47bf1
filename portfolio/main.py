"""
portfolio API entry point.

On startup the owner admin is provisioned when the admin table is empty
(disable with ``BOOTSTRAP_ADMIN_ON_STARTUP=false``).
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from portfolio.config import settings
from portfolio.api.v1.router import public_router, admin_auth_router, admin_router
from portfolio.api.v1.helpers.responses import register_exception_handlers
from portfolio.db.session import get_session_local, dispose_engine
from portfolio.bootstrap import ensure_default_admin
from logging import getLogger, Filter
import logging

logger = getLogger(__name__)
logger.setLevel(logging.INFO)


class HealthCheckFilter(Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.getMessage().find("/health") == -1


logging.getLogger("uvicorn.access").addFilter(HealthCheckFilter())


app = FastAPI(title=settings.app_name, debug=settings.debug, redirect_slashes=False)


@app.on_event("startup")
async def startup_event():
    logger.info("--- Starting portfolio API ---")
    if not settings.bootstrap_admin_on_startup:
        return

    AsyncSessionLocal = get_session_local()
    async with AsyncSessionLocal() as db:
        try:
            await ensure_default_admin(db)
        except Exception:
            logger.exception("Bootstrap of the default admin failed")

    logger.info("--- Portfolio API startup completed ---")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("--- Server shutting down! ---")
    await dispose_engine()
    logger.info("--- Database connections closed. ---")


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(public_router, prefix="/api")
app.include_router(admin_auth_router, prefix="/api")
app.include_router(admin_router, prefix="/api")


@app.get("/")
def read_root():
    return {"message": "Welcome to the Portfolio API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
