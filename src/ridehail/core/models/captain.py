"""
Captain (driver) model.

Columns are flat; ``fullname`` and ``vehicle`` expose the nested shape the
API works with.
"""

from typing import Optional

from sqlalchemy import CheckConstraint, Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Captain(BaseModel):
    """Registered driver with a single vehicle."""

    __tablename__ = "captains"

    firstname: Mapped[str] = mapped_column(String(50), nullable=False)
    lastname: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    socket_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="inactive", nullable=False)

    vehicle_color: Mapped[str] = mapped_column(String(30), nullable=False)
    vehicle_plate: Mapped[str] = mapped_column(String(20), nullable=False)
    vehicle_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    vehicle_type: Mapped[str] = mapped_column(String(20), nullable=False)

    location_lat: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    location_lng: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    __table_args__ = (
        CheckConstraint("status IN ('active', 'inactive')", name="ck_captains_status"),
        Index("idx_captains_email", "email"),
        Index("idx_captains_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<Captain(email='{self.email}', plate='{self.vehicle_plate}')>"

    @classmethod
    def from_payload(cls, fullname: dict, email: str, password: str, vehicle: dict) -> "Captain":
        """Build a captain from the nested registration shape."""
        return cls(
            firstname=fullname["firstname"],
            lastname=fullname.get("lastname"),
            email=email,
            password=password,
            vehicle_color=vehicle["color"],
            vehicle_plate=vehicle["plate"],
            vehicle_capacity=vehicle["capacity"],
            vehicle_type=vehicle["vehicleType"],
        )

    @property
    def fullname(self) -> dict:
        return {"firstname": self.firstname, "lastname": self.lastname}

    @property
    def vehicle(self) -> dict:
        return {
            "color": self.vehicle_color,
            "plate": self.vehicle_plate,
            "capacity": self.vehicle_capacity,
            "vehicleType": self.vehicle_type,
        }
