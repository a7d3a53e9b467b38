import logging
import secrets
from fastapi import APIRouter, HTTPException, Request
from app.api.deps import ADMIN_SESSION_KEY, is_admin
from app.config import config
from app.schemas.auth import LoginRequest, AuthStatusResponse
from app.schemas.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/login", response_model=SuccessResponse)
async def login(body: LoginRequest, request: Request):
    """Checks the shared admin password and starts an admin session."""
    if not config.AUTH_PASSWORD:
        raise HTTPException(status_code=500, detail="AUTH_PASSWORD not configured")

    if not secrets.compare_digest(body.password.encode(), config.AUTH_PASSWORD.encode()):
        logger.warning("Rejected admin login attempt.")
        raise HTTPException(status_code=401, detail="Invalid password")

    request.session[ADMIN_SESSION_KEY] = True
    return SuccessResponse()

@router.post("/logout", response_model=SuccessResponse)
async def logout(request: Request):
    request.session.clear()
    return SuccessResponse()

@router.get("/status", response_model=AuthStatusResponse)
async def status(request: Request):
    return AuthStatusResponse(authenticated=is_admin(request))
