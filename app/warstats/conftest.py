import pytest

from warstats.config import ApiConfig
from warstats.models.result import ApiFailure, ApiSuccess
from warstats.services import pagination


class FakeTornClient:
    """Stands in for TornApiClient; attack pages are served in order."""

    def __init__(self, profile=None, faction=None, pages=()):
        self.config = ApiConfig(base_url="https://torn.test", cooldown_seconds=30)
        self.profile = profile or ApiSuccess({"faction": {"faction_id": 42}})
        self.faction = faction or ApiSuccess(
            {"ranked_wars": {"555": {"war": {"start": 1000, "end": 0}}}}
        )
        self.pages = list(pages)
        self.page_calls = []

    def fetch_user_profile(self, api_key):
        return self.profile

    def fetch_faction_info(self, api_key, faction_id):
        return self.faction

    def fetch_attacks_page(self, api_key, faction_id, from_ts, to_ts):
        self.page_calls.append((from_ts, to_ts))
        if not self.pages:
            return ApiSuccess({"attacks": {}})
        page = self.pages.pop(0)
        if isinstance(page, ApiFailure):
            return page
        return ApiSuccess({"attacks": page})


def raw_attack(
    timestamp,
    attacker_id=1,
    attacker_name="Alpha",
    attacker_faction=42,
    result="Hospitalized",
    respect=1.0,
    ranked_war=1,
):
    return {
        "timestamp_started": timestamp,
        "timestamp_ended": timestamp + 5,
        "attacker_id": attacker_id,
        "attacker_name": attacker_name,
        "attacker_faction": attacker_faction,
        "defender_id": 9000,
        "result": result,
        "respect": respect,
        "ranked_war": ranked_war,
    }


def make_page(first_id, count, first_ts):
    """Attack ids share a width so string order matches numeric order."""
    return {
        str(10_000_000 + first_id + i): raw_attack(first_ts + i)
        for i in range(count)
    }


@pytest.fixture
def fake_client():
    return FakeTornClient


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def attack_factory():
    return raw_attack


@pytest.fixture(autouse=True)
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(pagination.time, "sleep", calls.append)
    return calls
