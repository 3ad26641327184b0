"""
Captain registration schemas.

Field presence is enforced here; emptiness is left to the registrar so the
API and direct service callers fail the same way.
"""

from datetime import datetime
from typing import Literal, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field


class FullName(BaseModel):
    """First and optional last name."""

    firstname: str = Field(max_length=50)
    lastname: Optional[str] = Field(default=None, max_length=50)


class Vehicle(BaseModel):
    """Captain's vehicle."""

    color: str = Field(max_length=30)
    plate: str = Field(max_length=20)
    capacity: int = Field(ge=0, description="Passenger seats")
    vehicleType: Literal["car", "motorcycle", "auto"] = Field(description="Vehicle category")


class CaptainRegisterRequest(BaseModel):
    """Captain registration request."""

    fullname: FullName
    email: str = Field(max_length=255)
    password: str = Field(max_length=128)
    vehicle: Vehicle

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fullname": {"firstname": "Ravi", "lastname": "Kumar"},
                "email": "ravi@example.com",
                "password": "supersecret",
                "vehicle": {
                    "color": "black",
                    "plate": "MP04 AB 1234",
                    "capacity": 4,
                    "vehicleType": "car",
                },
            }
        }
    )


class CaptainResponse(BaseModel):
    """Captain as returned by the API (password omitted)."""

    id: uuid.UUID
    fullname: FullName
    email: str
    status: str
    vehicle: Vehicle
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CaptainRegisterResponse(BaseModel):
    """Token plus the new captain."""

    token: str
    captain: CaptainResponse
