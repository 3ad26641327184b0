"""Unit tests for the captain registrar (src/ridehail/core/services/captain_service.py)."""

import copy

import pytest

from src.ridehail.core.exceptions import CaptainValidationError
from src.ridehail.core.models.captain import Captain
from src.ridehail.core.services.captain_service import CaptainService, validate_captain_data


class FakeCaptainRepo:
    def __init__(self):
        self.created = []

    async def create_captain(self, captain_data):
        self.created.append(captain_data)
        return Captain.from_payload(**captain_data)


@pytest.fixture
def fake_repo(monkeypatch):
    repo = FakeCaptainRepo()
    from src.ridehail.core.services import captain_service as captain_service_module

    monkeypatch.setattr(captain_service_module, "CaptainRepository", lambda s: repo)
    return repo


def _without(payload, *path):
    data = copy.deepcopy(payload)
    target = data
    for key in path[:-1]:
        target = target[key]
    del target[path[-1]]
    return data


def _with(payload, value, *path):
    data = copy.deepcopy(payload)
    target = data
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = value
    return data


REQUIRED_PATHS = [
    ("fullname", "firstname"),
    ("email",),
    ("password",),
    ("vehicle", "color"),
    ("vehicle", "plate"),
    ("vehicle", "capacity"),
    ("vehicle", "vehicleType"),
]


@pytest.mark.parametrize("path", REQUIRED_PATHS)
async def test_missing_field_rejected_before_persisting(fake_repo, captain_payload, path):
    svc = CaptainService(session=None)

    with pytest.raises(CaptainValidationError, match="All fields are required"):
        await svc.create_captain(_without(captain_payload, *path))

    assert fake_repo.created == []


@pytest.mark.parametrize("falsy", ["", 0, None])
@pytest.mark.parametrize("path", [("email",), ("vehicle", "capacity"), ("fullname", "firstname")])
def test_falsy_values_rejected(captain_payload, path, falsy):
    with pytest.raises(CaptainValidationError):
        validate_captain_data(_with(captain_payload, falsy, *path))


@pytest.mark.parametrize("key", ["fullname", "vehicle"])
def test_missing_nested_object_rejected(captain_payload, key):
    with pytest.raises(CaptainValidationError):
        validate_captain_data(_without(captain_payload, key))


def test_lastname_is_optional(captain_payload):
    fields = validate_captain_data(_without(captain_payload, "fullname", "lastname"))
    assert fields["fullname"] == {"firstname": "Ravi"}


def test_no_format_validation(captain_payload):
    data = _with(captain_payload, "not-an-email", "email")
    data = _with(data, "x", "password")
    assert validate_captain_data(data)["email"] == "not-an-email"


async def test_create_captain_persists_all_fields(fake_repo, captain_payload):
    svc = CaptainService(session=None)

    captain = await svc.create_captain(captain_payload)

    assert fake_repo.created == [captain_payload]
    assert captain.fullname == {"firstname": "Ravi", "lastname": "Kumar"}
    assert captain.email == "ravi@example.com"
    assert captain.vehicle == captain_payload["vehicle"]


async def test_password_stored_as_given(fake_repo, captain_payload):
    captain = await CaptainService(session=None).create_captain(captain_payload)
    assert captain.password == "hashed-elsewhere"


async def test_create_captain_with_database(test_session, captain_payload):
    captain = await CaptainService(test_session).create_captain(captain_payload)

    assert captain.id is not None
    assert captain.status == "inactive"
    assert captain.vehicle_plate == "MP04 AB 1234"
    assert captain.password == captain_payload["password"]
