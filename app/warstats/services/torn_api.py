"""Torn API client: user profile, faction info and faction attack log."""
import logging
from typing import Optional

import requests

from ..config import ApiConfig
from ..models.result import ApiFailure, ApiResult, ApiSuccess

log = logging.getLogger("warstats.torn_api")

ATTACKS_PAGE_SIZE = 100


class TornApiClient:
    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def fetch_user_profile(self, api_key: str) -> ApiResult:
        return self._get("user", {"selections": "profile"}, api_key)

    def fetch_faction_info(self, api_key: str, faction_id: int) -> ApiResult:
        return self._get(f"faction/{faction_id}", {"selections": "basic"}, api_key)

    def fetch_attacks_page(
        self,
        api_key: str,
        faction_id: int,
        from_ts: int,
        to_ts: int,
    ) -> ApiResult:
        """Fetch one page (at most ATTACKS_PAGE_SIZE records) of the faction attack log."""
        params = {"selections": "attacks", "from": from_ts, "to": to_ts}
        return self._get(f"faction/{faction_id}", params, api_key)

    def _get(self, path: str, params: dict, api_key: str) -> ApiResult:
        url = f"{self.config.base_url}/{path}"
        log.debug("GET %s %s", url, params)
        try:
            resp = self.session.get(
                url,
                params={**params, "key": api_key},
                timeout=self.config.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            log.warning("Request to %s failed: %s", url, exc)
            return ApiFailure(str(exc))
        except ValueError as exc:
            log.warning("Invalid JSON from %s: %s", url, exc)
            return ApiFailure(f"Invalid response: {exc}")

        return parse_payload(data)


def parse_payload(data) -> ApiResult:
    """Torn reports errors in-band as ``{"error": {"code": .., "error": ..}}``."""
    if not isinstance(data, dict):
        return ApiFailure("Unexpected response shape")
    if "error" in data:
        error = data.get("error")
        if isinstance(error, dict):
            return ApiFailure(str(error.get("error", "Unknown error")), error.get("code"))
        return ApiFailure(str(error))
    return ApiSuccess(data)


def profile_faction_id(profile: dict) -> int:
    faction = profile.get("faction")
    if not isinstance(faction, dict):
        return 0
    try:
        return int(faction.get("faction_id") or 0)
    except (TypeError, ValueError):
        return 0
