from fastapi import Depends, FastAPI
from starlette.middleware.sessions import SessionMiddleware
import os
from app.api.deps import require_admin
from app.api.routers import auth, catalog, pages, sessions, submissions, sync
from app.config import config, DEFAULT_SESSION_SECRET
from app.database import engine, Base
import logging

import time

# Ensure the system timezone (set in Dockerfile) is applied to the Python process
if os.name != 'nt':  # tzset is not available on Windows
    time.tzset()

logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S %z",
)

logger = logging.getLogger(__name__)

api_prefix = '/api'
admin_prefix = f'{api_prefix}/admin'

def warn_if_default_session_secret():
    if config.SESSION_SECRET == DEFAULT_SESSION_SECRET:
        logger.warning("SESSION_SECRET not provided. Admin session cookies are signed with the built-in default key.")

warn_if_default_session_secret()

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Music Classes Site API")

# Signed admin session cookie
app.add_middleware(
    SessionMiddleware,
    secret_key=config.SESSION_SECRET,
    session_cookie=config.SESSION_COOKIE,
    max_age=config.SESSION_MAX_AGE,
    same_site="strict",
    https_only=config.SESSION_COOKIE_SECURE,
)

app.include_router(auth.router, prefix=f'{api_prefix}/auth', tags=["auth"])
app.include_router(catalog.router, prefix=api_prefix, tags=["catalog"])
app.include_router(sessions.router, prefix=api_prefix, tags=["sessions"])
app.include_router(submissions.router, prefix=api_prefix, tags=["submissions"])
app.include_router(sync.router, prefix=api_prefix, tags=["sync"])
app.include_router(pages.router, prefix=f'{api_prefix}/pages', tags=["pages"])

admin_guard = [Depends(require_admin)]
app.include_router(catalog.admin_router, prefix=admin_prefix, tags=["admin"], dependencies=admin_guard)
app.include_router(sessions.admin_router, prefix=f'{admin_prefix}/sessions', tags=["admin"], dependencies=admin_guard)
app.include_router(submissions.admin_router, prefix=admin_prefix, tags=["admin"], dependencies=admin_guard)
app.include_router(sync.admin_router, prefix=admin_prefix, tags=["admin"], dependencies=admin_guard)
app.include_router(pages.admin_router, prefix=admin_prefix, tags=["admin"], dependencies=admin_guard)
