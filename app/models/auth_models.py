# path: geojson-mock-api/app/models/auth_models.py

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class LoginInput(BaseModel):
    username: str = Field(examples=["user@example.com"])
    password: str = Field(examples=["P@ssw0rd!"])


class LoginResponse(BaseModel):
    two_factor_required: bool
    temp_token: Optional[str] = Field(default=None, examples=["temp1234567890"])
    message: Optional[str] = Field(
        default=None,
        examples=["2FA required. Please verify using the code sent to your device."],
    )


class VerifyInput(BaseModel):
    temp_token: str = Field(examples=["temp1234567890"])
    code: str = Field(examples=["123456"])


class VerifyResponse(BaseModel):
    token: str = Field(examples=["eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."])
    expires_in: int = Field(examples=[3600])


class Profile(BaseModel):
    id: str = Field(examples=["user-123"])
    username: str = Field(examples=["user@example.com"])
    fullName: str = Field(examples=["John Doe"])
