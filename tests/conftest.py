"""Pytest configuration and shared fixtures.

The Flask app is built once per session (the RESTX Api object is global),
the schema is recreated for every test on in-memory SQLite, and every
external provider is replaced by an in-memory fake through
cbody_ops.vendors.factory.
"""

import os
from decimal import Decimal
from itertools import count

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from cbody_ops.app import create_app
from cbody_ops.config.database import db
from cbody_ops.vendors import factory
from cbody_ops.models import (
    AdminProfile,
    UserProfile,
    City,
    Category,
    Girl,
    GirlStatus,
    Service,
    ServiceDuration,
    GirlService,
    Order,
    OrderSettlement,
    GirlMedia,
)
from cbody_ops.partner.services.rate_limiter import rate_limiter
from cbody_ops.util.exceptions import UnauthorizedException, ExternalServiceException
from cbody_ops.util.helpers import new_uuid


# =============================================================================
# Fake providers
# =============================================================================


class FakeAuthClient:
    """Auth provider keeping users and tokens in memory."""

    def __init__(self):
        self.tokens = {}
        self.passwords = {}
        self.created = []
        self.updated = []
        self.deleted = []

    def issue_token(self, user_id, password=None):
        token = f"token-{user_id}"
        self.tokens[token] = user_id
        if password:
            self.passwords[user_id] = password
        return token

    def sign_in_with_password(self, email, password):
        user_id = email.split("@")[0]
        if self.passwords.get(user_id) != password:
            raise UnauthorizedException("Invalid email or password")
        return {
            "access_token": self.issue_token(user_id),
            "refresh_token": "refresh",
            "expires_in": 3600,
            "user": {"id": user_id, "email": email},
        }

    def get_user(self, access_token):
        if access_token not in self.tokens:
            raise UnauthorizedException("Session is invalid or expired. Please sign in again.")
        return {"id": self.tokens[access_token]}

    def admin_create_user(self, email, password, user_metadata=None):
        user = {"id": new_uuid(), "email": email, "user_metadata": user_metadata or {}}
        self.created.append(user)
        return user

    def admin_update_user(self, user_id, attributes):
        self.updated.append((user_id, attributes))
        return {"id": user_id}

    def admin_delete_user(self, user_id):
        self.deleted.append(user_id)
        return {}


class FakeStorage:
    """Object storage as a dict of {(bucket, key): bytes}."""

    def __init__(self):
        self.objects = {}
        self.fail_uploads = set()

    def put(self, bucket, key, body=b"data"):
        self.objects[(bucket, key)] = body

    def keys(self, bucket):
        return sorted(key for (name, key) in self.objects if name == bucket)

    def download(self, bucket, key):
        if (bucket, key) not in self.objects:
            raise ExternalServiceException("STORAGE_DOWNLOAD_FAILED", f"{bucket}/{key} not found")
        return self.objects[(bucket, key)]

    def upload(self, bucket, key, body, content_type=None):
        if key in self.fail_uploads:
            raise ExternalServiceException("STORAGE_UPLOAD_FAILED", f"{bucket}/{key} rejected")
        self.objects[(bucket, key)] = body

    def delete_files(self, bucket, keys):
        for key in keys:
            self.objects.pop((bucket, key), None)

    def create_signed_url(self, bucket, key, expires_in):
        return f"https://storage.test/{bucket}/{key}?expires_in={expires_in}"

    def delete_folder(self, bucket, prefix):
        doomed = [key for key in self.keys(bucket) if key.startswith(prefix)]
        self.delete_files(bucket, doomed)
        return len(doomed)


class FakeStream:
    def __init__(self):
        self.deleted = []

    def delete_video(self, uid):
        self.deleted.append(uid)
        return True


# =============================================================================
# App and database
# =============================================================================


@pytest.fixture(scope="session")
def app():
    """One app for the session."""
    return create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
    })


@pytest.fixture(autouse=True)
def database(app):
    """Fresh schema per test, inside an app context."""
    with app.app_context():
        db.create_all()
        yield db
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def auth_client(monkeypatch):
    fake = FakeAuthClient()
    monkeypatch.setattr(factory, "get_auth_client", lambda: fake)
    return fake


@pytest.fixture(autouse=True)
def storage(monkeypatch):
    fake = FakeStorage()
    monkeypatch.setattr(factory, "get_storage_client", lambda: fake)
    return fake


@pytest.fixture(autouse=True)
def stream(monkeypatch):
    fake = FakeStream()
    monkeypatch.setattr(factory, "get_stream_client", lambda: fake)
    return fake


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    rate_limiter.reset()
    yield
    rate_limiter.reset()


# =============================================================================
# Admins and auth headers
# =============================================================================


@pytest.fixture
def admins(database, auth_client):
    """One active admin per role, keyed by role."""
    profiles = {}
    for role in ("superadmin", "admin", "finance", "support"):
        profile = AdminProfile(id=f"{role}-id", display_name=f"{role.title()} One", role=role, is_active=True)
        db.session.add(profile)
        profiles[role] = profile
        auth_client.issue_token(profile.id, password="secret-pass")
    db.session.commit()
    return profiles


@pytest.fixture
def headers(admins):
    """headers("finance") -> Authorization header for that role's admin."""

    def build(role="superadmin"):
        return {"Authorization": f"Bearer token-{admins[role].id}"}

    return build


# =============================================================================
# Seeding
# =============================================================================


class Seeder:
    """Builds committed rows with sensible defaults."""

    def __init__(self):
        self._numbers = count(1)

    def _save(self, row):
        db.session.add(row)
        db.session.commit()
        return row

    def user(self, **fields):
        fields.setdefault("username", f"user{next(self._numbers)}")
        fields.setdefault("display_name", fields["username"].title())
        return self._save(UserProfile(**fields))

    def city(self, **fields):
        fields.setdefault("code", f"city{next(self._numbers)}")
        fields.setdefault("name", {"en": "Bangkok"})
        return self._save(City(**fields))

    def category(self, **fields):
        number = next(self._numbers)
        fields.setdefault("code", f"cat{number}")
        fields.setdefault("name", {"en": f"Category {number}"})
        return self._save(Category(**fields))

    def girl(self, status=None, **fields):
        number = next(self._numbers)
        fields.setdefault("girl_number", 1000 + number)
        fields.setdefault("name", f"Girl {number}")
        fields.setdefault("is_verified", True)
        girl = self._save(Girl(**fields))
        if status:
            self._save(GirlStatus(girl_id=girl.id, status=status))
        return girl

    def service(self, code=None, prices=((60, "1000.00"),), **fields):
        service = self._save(Service(
            code=code or f"svc{next(self._numbers)}",
            title=fields.pop("title", {"en": "Massage"}),
            **fields
        ))
        durations = [
            self._save(ServiceDuration(service_id=service.id, duration_minutes=minutes, default_price=Decimal(price)))
            for minutes, price in prices
        ]
        return service, durations

    def qualify(self, girl, service, is_qualified=True):
        return self._save(GirlService(girl_id=girl.id, service_id=service.id, is_qualified=is_qualified))

    def order(self, girl, user, **fields):
        fields.setdefault("order_number", f"ORD{next(self._numbers):05d}")
        fields.setdefault("service_name", {"en": "Massage"})
        fields.setdefault("service_duration", 60)
        fields.setdefault("service_price", Decimal("1000.00"))
        fields.setdefault("service_fee", Decimal("1000.00"))
        fields.setdefault("total_amount", Decimal("1000.00"))
        return self._save(Order(girl_id=girl.id, user_id=user.id, **fields))

    def settlement(self, order, **fields):
        fields.setdefault("service_fee", order.service_fee)
        fields.setdefault("extra_fee", order.extra_fee or 0)
        return self._save(OrderSettlement(order_id=order.id, girl_id=order.girl_id, **fields))

    def media(self, girl, **fields):
        fields.setdefault("kind", "image")
        fields.setdefault("storage_key", f"{girl.id}/{new_uuid()}.jpg")
        return self._save(GirlMedia(girl_id=girl.id, **fields))

    def add(self, row):
        return self._save(row)


@pytest.fixture
def seed(database):
    return Seeder()

