from pydantic import BaseModel


class SignUpRequest(BaseModel):
    email: str
    password: str


class SignInRequest(BaseModel):
    email: str
    password: str


class SignInResponse(BaseModel):
    token: str
    expires_in_seconds: int


class UserResponse(BaseModel):
    id: str
    email: str
    is_provider: bool = False
