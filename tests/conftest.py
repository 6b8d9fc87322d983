import copy
import itertools

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from stays.core.deps import get_auth_service, get_store, get_sync_service
from stays.core.exceptions import AuthError, PersistenceError
from stays.db.base import Base
from stays.main import app
from stays.schemas.auth import AdminSession, CurrentUser
from stays.services.listing_service import ListingService
from stays.services.property_sync import PropertySyncService
from stays.services.store import SqlStore, Store

TEST_DATABASE_URL = "sqlite://"

ADMIN_TOKEN = "admin-token"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct-password"


class FakeStore(Store):
    """In-memory store; ``fail`` makes matching calls raise PersistenceError."""

    def __init__(self):
        self.tables = {"properties": [], "property_images": []}
        self.calls = []
        self._rules = []
        self._ids = itertools.count(1)
        self._clock = itertools.count(1)

    def fail(self, operation, table, when=None, times=None):
        self._rules.append({"operation": operation, "table": table, "when": when, "times": times})

    def _check(self, operation, table, payload):
        self.calls.append((operation, table))
        for rule in list(self._rules):
            if rule["operation"] != operation or rule["table"] != table:
                continue
            if rule["when"] is not None and not rule["when"](payload):
                continue
            if rule["times"] is not None:
                rule["times"] -= 1
                if rule["times"] <= 0:
                    self._rules.remove(rule)
            raise PersistenceError(f"injected {operation} failure on {table}", operation=operation, table=table)

    @staticmethod
    def _matches(row, filters):
        return all(row.get(column) == value for column, value in (filters or {}).items())

    async def select(self, table, columns="*", filters=None, order_by=None, descending=False):
        self._check("select", table, filters)
        rows = [copy.deepcopy(row) for row in self.tables[table] if self._matches(row, filters)]
        if order_by:
            rows.sort(key=lambda row: row[order_by], reverse=descending)
        if columns.strip() != "*":
            names = [name.strip() for name in columns.split(",")]
            rows = [{name: row[name] for name in names} for row in rows]
        return rows

    async def insert(self, table, rows):
        rows = list(rows)
        self._check("insert", table, rows)
        inserted = []
        for row in rows:
            new = copy.deepcopy(row)
            new.setdefault("id", f"{table}-{next(self._ids)}")
            if table == "properties":
                if any(existing["slug"] == new["slug"] for existing in self.tables[table]):
                    raise PersistenceError(
                        'duplicate key value violates unique constraint "properties_slug_key"',
                        operation="insert",
                        table=table,
                    )
                new["created_at"] = next(self._clock)
            self.tables[table].append(new)
            inserted.append(copy.deepcopy(new))
        return inserted

    async def update(self, table, patch, filters):
        self._check("update", table, patch)
        for row in self.tables[table]:
            if self._matches(row, filters):
                row.update(copy.deepcopy(patch))

    async def delete(self, table, filters):
        self._check("delete", table, filters)
        self.tables[table] = [row for row in self.tables[table] if not self._matches(row, filters)]

    def image_urls(self, property_id):
        rows = [row for row in self.tables["property_images"] if row["property_id"] == property_id]
        return [row["image_url"] for row in sorted(rows, key=lambda row: row["display_order"])]


class FakeAuthService:
    def __init__(self):
        self.sessions = {ADMIN_TOKEN: CurrentUser(id="admin-1", email=ADMIN_EMAIL)}
        self.signed_out = []

    async def sign_in(self, email, password):
        if email != ADMIN_EMAIL or password != ADMIN_PASSWORD:
            raise AuthError("Invalid login credentials")
        self.sessions[ADMIN_TOKEN] = CurrentUser(id="admin-1", email=email)
        return AdminSession(access_token=ADMIN_TOKEN, email=email)

    async def sign_out(self, token):
        self.sessions.pop(token, None)
        self.signed_out.append(token)

    async def current_user(self, token):
        return self.sessions.get(token)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def sync_service(store):
    return PropertySyncService(store)


@pytest.fixture
def listing_service(store):
    return ListingService(store)


@pytest.fixture
def sql_store():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield SqlStore(sessionmaker(autocommit=False, autoflush=False, bind=engine))
    engine.dispose()


@pytest.fixture
def auth_service():
    return FakeAuthService()


@pytest.fixture
def client(store, sync_service, auth_service):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_sync_service] = lambda: sync_service
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def make_form():
    from stays.schemas.property import PropertyForm

    def _make(**overrides):
        data = {
            "title": "Luxury Lakeside Cottage",
            "description": "Cottage on the water",
            "location": "Pawna Lake",
            "category": "cottage",
            "price": 4500,
        }
        data.update(overrides)
        return PropertyForm(**data)

    return _make
