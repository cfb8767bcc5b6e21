# path: geojson-mock-api/app/api/routes/auth.py

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.models.auth_models import (
    LoginInput,
    LoginResponse,
    Profile,
    VerifyInput,
    VerifyResponse,
)

router = APIRouter(tags=["auth"])

# Fixed example credentials: this group only models the request/response shapes.
TEMP_TOKEN = "temp1234567890"
ACCESS_TOKEN = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
TOKEN_TTL_S = 3600

bearer = HTTPBearer(auto_error=False)


@router.post(
    "/auth/login",
    response_model=LoginResponse,
    responses={401: {"description": "Invalid credentials."}},
    summary="User Login",
)
def login(body: LoginInput) -> LoginResponse:
    if not body.username or not body.password:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials.")
    return LoginResponse(
        two_factor_required=True,
        temp_token=TEMP_TOKEN,
        message="2FA required. Please verify using the code sent to your device.",
    )


@router.post(
    "/auth/verify",
    response_model=VerifyResponse,
    responses={401: {"description": "Invalid or expired 2FA code."}},
    summary="Verify Two-Factor Authentication Code",
)
def verify(body: VerifyInput) -> VerifyResponse:
    if body.temp_token != TEMP_TOKEN or len(body.code) != 6 or not body.code.isdigit():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired 2FA code.")
    return VerifyResponse(token=ACCESS_TOKEN, expires_in=TOKEN_TTL_S)


@router.get(
    "/profile",
    response_model=Profile,
    responses={401: {"description": "Unauthorized - invalid or missing JWT token."}},
    summary="Get User Profile",
)
def get_profile(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer)) -> Profile:
    if credentials is None or credentials.credentials != ACCESS_TOKEN:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized - invalid or missing JWT token.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Profile(id="user-123", username="user@example.com", fullName="John Doe")
