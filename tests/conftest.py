import pytest
from fastapi.testclient import TestClient

from launderette.core.config import Settings
from launderette.core.security import AuthUser, InvalidTokenError, TokenVerifier
from launderette.db.init_db import init_db
from launderette.db.session import build_engine, build_session_factory
from launderette.db.store import RecordStore
from launderette.main import create_app
from launderette.schemas.geocode import GeocodingResult

ADMIN_TOKEN = "admin-token"


class FakeVerifier(TokenVerifier):
    """Accepts exactly one token."""

    def verify(self, token):
        if token != ADMIN_TOKEN:
            raise InvalidTokenError("bad token")
        return AuthUser(uid="admin-uid", email="admin@example.com", name="Admin")


class FakeGeocoder:
    def __init__(self, results=None):
        self.results = results or {}
        self.calls = []

    async def geocode(self, address):
        self.calls.append(address)
        return self.results.get(address)


@pytest.fixture
def store():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield RecordStore(build_session_factory(engine))
    engine.dispose()


@pytest.fixture
def geocoder():
    return FakeGeocoder(
        {
            "10 Downing Street, London": GeocodingResult(
                lat=51.5034, lng=-0.1276, formatted_address="10 Downing Street, London SW1A 2AA"
            )
        }
    )


@pytest.fixture
def app(store, geocoder):
    settings = Settings(site_url="https://launderettes.example.com", log_level="WARNING")
    return create_app(
        settings=settings, store=store, token_verifier=FakeVerifier(), geocoder=geocoder
    )


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def listing_payload():
    return {
        "name": "Bubbles Launderette",
        "address": "12 High Street, Leeds LS1 4AB",
        "city": "Leeds",
        "lat": 53.7997,
        "lng": -1.5492,
        "features": ["Service Wash", "Free WiFi"],
        "isPremium": False,
        "phone": "0113 000 0000",
        "website": "https://bubbles.example.com",
        "openingHours": {
            "monday": "8:00am - 8:00pm",
            "tuesday": "8:00am - 8:00pm",
            "wednesday": "8:00am - 8:00pm",
            "thursday": "8:00am - 8:00pm",
            "friday": "8:00am - 8:00pm",
            "saturday": "9:00am - 5:00pm",
            "sunday": "Closed",
        },
        "priceRange": "budget",
    }
