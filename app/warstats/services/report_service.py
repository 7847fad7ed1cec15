import logging
from typing import Optional

from ..config import ApiConfig, load_api_config
from ..models.attack import WarWindow
from ..models.result import ApiFailure, ReportFailure, ReportResult, ReportSuccess
from .aggregation import aggregate_attacks
from .pagination import fetch_war_attacks
from .torn_api import TornApiClient, profile_faction_id

log = logging.getLogger("warstats.report")


def _fail(kind, message: str) -> ReportFailure:
    log.warning("Report aborted (%s): %s", kind, message)
    return ReportFailure(kind, message)


def generate_report(
    api_key: str,
    *,
    client: Optional[TornApiClient] = None,
    config: Optional[ApiConfig] = None,
) -> ReportResult:
    """
    Build the ranked war report for the faction of the key's owner.

    Steps: profile -> faction -> current ranked war -> attack log -> stats.
    The first failure ends the run; nothing partial is returned.
    """
    if client is None:
        client = TornApiClient(config or load_api_config())

    profile = client.fetch_user_profile(api_key)
    if isinstance(profile, ApiFailure):
        return _fail("profile", f"Unable to get user info: {profile.message}")

    faction_id = profile_faction_id(profile.payload)
    if faction_id == 0:
        return _fail("no_faction", "User does not have a faction")

    faction = client.fetch_faction_info(api_key, faction_id)
    if isinstance(faction, ApiFailure):
        return _fail("faction_info", f"Unable to fetch faction info: {faction.message}")

    ranked_wars = faction.payload.get("ranked_wars") or {}
    if not isinstance(ranked_wars, dict) or not ranked_wars:
        return _fail("no_war", "Unable to fetch ranked war info")
    if len(ranked_wars) > 1:
        log.warning("Faction %s has %d ranked wars; using the first", faction_id, len(ranked_wars))

    war_id = next(iter(ranked_wars))
    entry = ranked_wars[war_id]
    war = entry.get("war") if isinstance(entry, dict) else None
    if not isinstance(war, dict):
        return _fail("no_war", "Unable to fetch ranked war info")
    window = WarWindow.from_ranked_war(war)
    log.info(
        "Faction %s war %s: start=%s end=%s",
        faction_id,
        war_id,
        window.start,
        window.end or "ongoing",
    )

    attacks = fetch_war_attacks(client, api_key, faction_id, window)
    if isinstance(attacks, ApiFailure):
        return _fail("attacks", f"Unable to fetch attacks: {attacks.message}")

    members = aggregate_attacks(attacks.payload, faction_id)
    log.info("Report ready: %d attacks, %d members", len(attacks.payload), len(members))

    return ReportSuccess(
        faction_id=faction_id,
        war_id=str(war_id),
        window=window,
        attack_count=len(attacks.payload),
        members=members,
    )
