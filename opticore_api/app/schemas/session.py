"""
Pydantic models for the login endpoint.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Demo login payload.

    No password or OTP is involved: the caller states who it is and which
    role it wants.  ``clientId`` binds a client session to one tenant.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(None, examples=["owner@example.com"])
    role: Optional[str] = Field(None, examples=["client"])
    client_id: Optional[int] = Field(None, alias="clientId", examples=[1])


class LoginResponse(BaseModel):
    token: str
    role: str
