"""
Unit tests for Captain, User and BlacklistToken models.
"""

import uuid
from datetime import datetime

import pytest

from src.ridehail.core.models.blacklist_token import BlacklistToken
from src.ridehail.core.models.captain import Captain
from src.ridehail.core.models.user import User


class TestCaptainModel:
    """Captain model behaviour."""

    def test_from_payload_and_nested_views(self, captain_payload):
        captain = Captain.from_payload(**captain_payload)

        assert captain.fullname == {"firstname": "Ravi", "lastname": "Kumar"}
        assert captain.vehicle == {
            "color": "black",
            "plate": "MP04 AB 1234",
            "capacity": 4,
            "vehicleType": "car",
        }

    def test_from_payload_without_lastname(self, captain_payload):
        captain_payload["fullname"] = {"firstname": "Ravi"}
        captain = Captain.from_payload(**captain_payload)
        assert captain.lastname is None

    @pytest.mark.asyncio
    async def test_defaults_after_insert(self, test_session, captain_payload):
        captain = Captain.from_payload(**captain_payload)
        test_session.add(captain)
        await test_session.commit()
        await test_session.refresh(captain)

        assert isinstance(captain.id, uuid.UUID)
        assert captain.status == "inactive"
        assert captain.location_lat is None
        assert isinstance(captain.created_at, datetime)

    def test_repr(self, captain_payload):
        captain = Captain.from_payload(**captain_payload)
        assert repr(captain) == "<Captain(email='ravi@example.com', plate='MP04 AB 1234')>"


class TestUserModel:
    def test_fullname(self):
        user = User(firstname="Asha", lastname=None, email="a@example.com", password="h")
        assert user.fullname == {"firstname": "Asha", "lastname": None}


class TestBlacklistTokenModel:
    def test_repr_truncates_token(self):
        entry = BlacklistToken(token="abcdefghijklmnop")
        assert repr(entry) == "<BlacklistToken(token=abcdefgh...)>"

    @pytest.mark.asyncio
    async def test_token_is_unique_per_row(self, test_session):
        test_session.add(BlacklistToken(token="same"))
        await test_session.commit()

        from sqlalchemy.exc import IntegrityError

        test_session.add(BlacklistToken(token="same"))
        with pytest.raises(IntegrityError):
            await test_session.commit()
