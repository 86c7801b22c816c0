import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from .api.errors import register_exception_handlers
from .api.routes import auth, coaches, members, payments, schedules, dashboard, misc
from .db.session import Base, engine, SessionLocal
from .config import get_settings
from .services.accounts import ensure_admin_exists
from .workers.scheduler import get_scheduler

logger = logging.getLogger(__name__)

app = FastAPI(title="Gym Management API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(auth.router, prefix="/api")
app.include_router(coaches.router, prefix="/api")
app.include_router(members.router, prefix="/api")
app.include_router(payments.router, prefix="/api")
app.include_router(schedules.router, prefix="/api")
app.include_router(dashboard.router, prefix="/api")
app.include_router(misc.router, prefix="/api")

scheduler = get_scheduler()


def _mount_frontend(application: FastAPI, directory: str) -> None:
    if not directory or not Path(directory).is_dir():
        return

    @application.get("/", include_in_schema=False)
    def index() -> RedirectResponse:
        return RedirectResponse(url="/index.html")

    application.mount("/", StaticFiles(directory=directory), name="frontend")
    logger.info("Serving frontend from %s", directory)


_mount_frontend(app, get_settings().frontend_dir)


@app.on_event("startup")
async def startup_event() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as session:
        ensure_admin_exists(
            session,
            settings.default_admin_name,
            settings.default_admin_email,
            settings.default_admin_password,
        )
    scheduler.start()
    logger.info("Gym Management API started (env=%s)", settings.env)


@app.on_event("shutdown")
async def shutdown_event() -> None:
    if scheduler.running:
        scheduler.shutdown(wait=False)
