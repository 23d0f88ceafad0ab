"""Shared fixtures for pocketdump tests."""

import json
from datetime import timezone

import pytest

from pocketdump.pocketdump import Options


def pocket_item(uid, time_added, url, title="", resolved_title="",
                status="0"):
    """Build a raw Pocket item the way the export API returns it."""
    return {
        "item_id": uid,
        "resolved_id": uid,
        "given_url": url,
        "given_title": title,
        "favorite": "0",
        "status": status,
        "resolved_title": resolved_title,
        "resolved_url": url,
        "excerpt": "",
        "time_added": time_added,
        "time_read": "0",
        "time_favorited": "0",
        "sort_id": 0,
        "lang": "en",
    }


def pocket_dump(*items):
    return json.dumps({
        "status": 1,
        "complete": 1,
        "list": {item["item_id"]: item for item in items},
        "since": 1600000000,
    }, indent=2)


@pytest.fixture
def make_item():
    return pocket_item


@pytest.fixture
def make_dump():
    return pocket_dump


@pytest.fixture
def abc_dump():
    """Three bookmarks at 100, 200 and 300; the middle one is untitled."""
    return pocket_dump(
        pocket_item("3", "300", "http://c", title="C"),
        pocket_item("1", "100", "http://a", title="A"),
        pocket_item("2", "200", "http://b"),
    )


@pytest.fixture
def options():
    return Options()


@pytest.fixture
def utc():
    return timezone.utc


@pytest.fixture(autouse=True)
def utc_localzone(monkeypatch):
    """Pin the local zone so rendered times don't depend on the host."""
    monkeypatch.setattr(
        "pocketdump.pocketdump.tzlocal.get_localzone",
        lambda: timezone.utc)
