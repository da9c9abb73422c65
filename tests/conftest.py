"""Pytest configuration: in-memory database, fake email transport and API client."""
from __future__ import annotations

import os
from typing import Iterable, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_API_TOKEN"] = "test-admin-token"
os.environ.pop("RESEND_API_KEY", None)

from waitlist.database import Base, get_db  # noqa: E402
from waitlist.main import app  # noqa: E402
from waitlist.models import EmailSubscriber  # noqa: E402
from waitlist.services.email_service import EmailResult, get_email_sender  # noqa: E402
from waitlist.services.notification_service import NotificationDispatchService  # noqa: E402
from waitlist.services.subscriber_store import DeliveryLog, SubscriberStore  # noqa: E402

ADMIN_HEADERS = {"X-Admin-Token": "test-admin-token"}


class FakeEmailSender:
    """Records every send; recipients in ``fail_for`` get a transport error."""

    def __init__(self, fail_for: Optional[Iterable[str]] = None, configured: bool = True):
        self.fail_for = set(fail_for or [])
        self.configured = configured
        self.sent: List[dict] = []

    def is_configured(self) -> bool:
        return self.configured

    def get_config_info(self) -> dict:
        return {
            "api_key_configured": self.configured,
            "from_email": "CampusConnect Team <noreply@campusconnect.app>",
            "reply_to": None,
            "configured": self.configured,
        }

    async def send(self, to, subject, html, text=None) -> EmailResult:
        self.sent.append({"to": to, "subject": subject, "html": html, "text": text})
        if not self.configured:
            return EmailResult(success=False, message="Email service not configured")
        if to in self.fail_for:
            return EmailResult(success=False, message='{"statusCode":422,"message":"Invalid `to` field"}')
        return EmailResult(success=True, message="Email sent", message_id=f"id-{len(self.sent)}")


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def sender() -> FakeEmailSender:
    return FakeEmailSender()


@pytest.fixture()
def service(db_session, sender) -> NotificationDispatchService:
    return NotificationDispatchService(
        store=SubscriberStore(db_session),
        delivery_log=DeliveryLog(db_session),
        sender=sender,
        site_url="https://campusconnect.app",
    )


@pytest.fixture()
def add_subscriber(db_session):
    """Insert a subscriber row directly, bypassing the service."""

    def _add(email: str, first_name: str, is_active: bool = True, **kwargs) -> EmailSubscriber:
        subscriber = EmailSubscriber(email=email, first_name=first_name, is_active=is_active, **kwargs)
        db_session.add(subscriber)
        db_session.commit()
        return subscriber

    return _add


@pytest.fixture()
def test_client(db_session, sender) -> TestClient:
    """FastAPI test client wired to the in-memory database and the fake sender."""

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_email_sender] = lambda: sender
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
