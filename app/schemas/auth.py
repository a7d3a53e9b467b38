from app.schemas.common import ApiModel


class LoginRequest(ApiModel):
    password: str

class AuthStatusResponse(ApiModel):
    authenticated: bool
