import httpx
from fastapi import HTTPException, Request

ADMIN_SESSION_KEY = "admin"


def is_admin(request: Request) -> bool:
    return request.session.get(ADMIN_SESSION_KEY) is True


def require_admin(request: Request):
    """Rejects requests without a signed admin session cookie."""
    if not is_admin(request):
        raise HTTPException(status_code=401, detail="Unauthorized")


async def get_http_client():
    async with httpx.AsyncClient(follow_redirects=True) as client:
        yield client
