from pydantic import Field

from eventhub.utils.validators import RequestSchema


class RegisterRequest(RequestSchema):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=8)


class LoginRequest(RequestSchema):
    email: str
    password: str
