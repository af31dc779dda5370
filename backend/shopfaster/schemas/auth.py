"""Auth request/response schemas."""

from pydantic import BaseModel, Field


# ── Register / Login ───────────────────────────────
class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=8)


class RegisterResponse(BaseModel):
    user_id: int
    message: str = "Account created"


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    current_store_id: int | None = None


# ── Current User ───────────────────────────────────
class CurrentUser(BaseModel):
    """Identity carried by the bearer token."""
    id: int


class UserProfile(BaseModel):
    id: int
    username: str
    current_store_id: int | None = None

    model_config = {"from_attributes": True}
