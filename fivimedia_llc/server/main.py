"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fivimedia_llc.core.database import engine
from fivimedia_llc.core.logging_config import get_logger, setup_logging
from fivimedia_llc.core.monitoring import initialize_logfire

from .api.v1 import auth, contact, coverage, faqs, health, languages, orders, promo_codes, quote, states
from .api.v1.admin import add_ons as admin_add_ons
from .api.v1.admin import audit_log as admin_audit_log
from .api.v1.admin import coverage_items as admin_coverage_items
from .api.v1.admin import dashboard as admin_dashboard
from .api.v1.admin import faq_categories as admin_faq_categories
from .api.v1.admin import faqs as admin_faqs
from .api.v1.admin import languages as admin_languages
from .api.v1.admin import leads as admin_leads
from .api.v1.admin import orders as admin_orders
from .api.v1.admin import pricing as admin_pricing
from .api.v1.admin import promo_codes as admin_promo_codes
from .api.v1.admin import states as admin_states
from .api.v1.admin import users as admin_users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.auth import get_current_user

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Schema and seed data are managed by Alembic; startup only announces the
    service, and shutdown releases the database connection pool.
    """
    logger.info("Starting up FiviMedia LLC Formation server...")

    yield

    logger.info("Shutting down FiviMedia LLC Formation server...")
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    FiviMedia LLC Formation API

    Backend of the bilingual (English/Arabic) US LLC formation site. It prices
    formation orders, validates promo codes, takes orders and contact requests,
    and powers the admin back office for orders, pricing, FAQs, leads,
    languages, users and promo codes.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

# Set all CORS enabled origins
cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

# Public API
app.include_router(health.router, tags=["health"])
app.include_router(quote.router, prefix=f"{constant.API_V1_STR}/quote")
app.include_router(orders.router, prefix=f"{constant.API_V1_STR}/orders")
app.include_router(promo_codes.router, prefix=f"{constant.API_V1_STR}/promo-codes")
app.include_router(coverage.router, prefix=f"{constant.API_V1_STR}/coverage")
app.include_router(states.router, prefix=f"{constant.API_V1_STR}/states")
app.include_router(faqs.router, prefix=f"{constant.API_V1_STR}/faqs")
app.include_router(languages.router, prefix=f"{constant.API_V1_STR}/languages")
app.include_router(contact.router, prefix=f"{constant.API_V1_STR}/contact")
app.include_router(auth.router, prefix=f"{constant.API_V1_STR}/auth")

# Back office, every route requires a signed-in admin
ADMIN = f"{constant.API_V1_STR}/admin"
admin_guard = [Depends(get_current_user)]
app.include_router(admin_dashboard.router, prefix=f"{ADMIN}/dashboard", dependencies=admin_guard)
app.include_router(admin_orders.router, prefix=f"{ADMIN}/orders", dependencies=admin_guard)
app.include_router(admin_pricing.router, prefix=f"{ADMIN}/pricing", dependencies=admin_guard)
app.include_router(admin_states.router, prefix=f"{ADMIN}/states", dependencies=admin_guard)
app.include_router(admin_add_ons.router, prefix=f"{ADMIN}/add-ons", dependencies=admin_guard)
app.include_router(admin_coverage_items.router, prefix=f"{ADMIN}/coverage-items", dependencies=admin_guard)
app.include_router(admin_languages.router, prefix=f"{ADMIN}/languages", dependencies=admin_guard)
app.include_router(admin_faq_categories.router, prefix=f"{ADMIN}/faq-categories", dependencies=admin_guard)
app.include_router(admin_faqs.router, prefix=f"{ADMIN}/faqs", dependencies=admin_guard)
app.include_router(admin_leads.router, prefix=f"{ADMIN}/leads", dependencies=admin_guard)
app.include_router(admin_promo_codes.router, prefix=f"{ADMIN}/promo-codes", dependencies=admin_guard)
app.include_router(admin_users.router, prefix=f"{ADMIN}/users", dependencies=admin_guard)
app.include_router(admin_audit_log.router, prefix=f"{ADMIN}/audit-log", dependencies=admin_guard)
