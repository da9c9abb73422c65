"""Tests for the subscriber store and delivery log adapters."""
from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from waitlist.models import NotificationType
from waitlist.services.subscriber_store import (
    DeliveryLog,
    DuplicateSubscriberError,
    StoreError,
    SubscriberStore,
)


def test_insert_and_find(db_session):
    store = SubscriberStore(db_session)

    created = store.insert("ann@campus.edu", "Ann")

    assert created.id is not None
    assert store.find_by_email("ann@campus.edu").first_name == "Ann"
    assert store.find_by_email("Ann@campus.edu") is None


def test_insert_duplicate_raises_and_rolls_back(db_session):
    store = SubscriberStore(db_session)
    store.insert("ann@campus.edu", "Ann")

    with pytest.raises(DuplicateSubscriberError):
        store.insert("ann@campus.edu", "Annie")

    # la sesión sigue usable después del rollback
    assert store.count_active() == 1


def test_list_active_in_insertion_order(db_session, add_subscriber):
    add_subscriber("b@x.com", "Ben")
    add_subscriber("gone@x.com", "Gone", is_active=False)
    add_subscriber("a@x.com", "Ann")

    store = SubscriberStore(db_session)

    assert [s.email for s in store.list_active()] == ["b@x.com", "a@x.com"]
    assert store.find_active_by_email("gone@x.com") is None
    assert store.count_active() == 2


def test_delivery_log_append(db_session):
    log = DeliveryLog(db_session)

    record = log.append(
        type=NotificationType.LAUNCH,
        title="CampusConnect is LIVE!",
        content="Launch notification sent",
        recipient_email="a@x.com",
        success=True,
    )

    assert record.type == "launch"
    assert record.created_at is not None
    assert log.count() == 1


def test_delivery_log_rejects_unknown_type(db_session):
    with pytest.raises(ValueError):
        DeliveryLog(db_session).append(
            type="newsletter", title="t", content="c", recipient_email="a@x.com", success=True
        )


def test_query_errors_become_store_errors(db_session, monkeypatch):
    def broken_query(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "query", broken_query)

    with pytest.raises(StoreError):
        SubscriberStore(db_session).list_active()
    with pytest.raises(StoreError):
        DeliveryLog(db_session).count()
