import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nomina import __version__
from nomina.config import settings
from nomina.database import engine
from nomina.error_handlers import register_error_handlers
from nomina.logging_config import configure_logging
from nomina.middleware import TimingMiddleware
from nomina.routers import banks, divisions, employees, health, jobs, organizations, payrolls

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    logger.info("nomina %s started (%s)", __version__, settings.APP_ENV)
    yield
    # Shutdown
    await engine.dispose()
    logger.info("nomina shutting down")

app = FastAPI(
    title="Nomina API",
    description="Organization, payroll, division, job, bank and employee hierarchy",
    version=__version__,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routers
app.include_router(health.router)
app.include_router(organizations.router)
app.include_router(payrolls.router)
app.include_router(banks.router)
app.include_router(divisions.router)
app.include_router(jobs.router)
app.include_router(employees.router)
