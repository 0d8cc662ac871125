
from app.api.schemas.common import CamelModel, Email


class UserRequest(CamelModel):
    email: Email
    name: str | None = None


class UserExistsResponse(CamelModel):
    acknowledged: bool = False
    message: str


class AccessTokenResponse(CamelModel):
    access_token: str


class AdminStatus(CamelModel):
    is_admin: bool
