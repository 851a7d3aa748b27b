from pydantic import BaseModel, Field, field_validator
from shared.utils.enums import UserRole
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class LoginRequest(EmptyStringModel):
    username: str
    password: str


class RegisterRequest(EmptyStringModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
    role: str = UserRole.RECEPTIONIST.value

    @field_validator("role", mode="before")
    def lower_role(cls, v):
        return v.lower() if isinstance(v, str) else v


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: str


class RegisterResponse(BaseModel):
    message: str
    user_id: int
