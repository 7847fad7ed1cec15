"""Time-cursor pagination over the faction attack log.

The attacks selection returns at most 100 records and has no offset, so the
``timestamp_started`` of the last record becomes the next ``from``. The range
is inclusive at the cursor, which means the boundary record comes back again
on the next page; records are therefore merged by id.
"""
import logging
import time
from typing import Optional

from ..models.attack import Attack, WarWindow
from ..models.result import ApiFailure, ApiResult, ApiSuccess
from .torn_api import TornApiClient

log = logging.getLogger("warstats.pagination")


def fetch_war_attacks(
    client: TornApiClient,
    api_key: str,
    faction_id: int,
    window: WarWindow,
    cooldown_seconds: Optional[float] = None,
) -> ApiResult:
    """
    Fetch every attack in the war window.

    Returns ApiSuccess with a dict of attack id -> Attack, or the ApiFailure of
    the first page that failed (records fetched so far are dropped).
    """
    if cooldown_seconds is None:
        cooldown_seconds = client.config.cooldown_seconds

    attacks: dict[str, Attack] = {}
    cursor = window.start
    page_no = 0

    while window.unbounded or cursor < window.end:
        page_no += 1
        result = client.fetch_attacks_page(api_key, faction_id, cursor, window.end)
        if isinstance(result, ApiFailure):
            log.warning("Attack page %d failed: %s", page_no, result.message)
            return result

        raw_page = result.payload.get("attacks") or {}
        page = {
            str(attack_id): Attack.from_json(attack_id, data)
            for attack_id, data in raw_page.items()
        }
        log.info("Attack page %d: %d records from %s", page_no, len(page), cursor)

        if not page:
            log.debug("Empty page; no further attacks")
            break

        # boundary records sharing the cursor second come back on every page
        if not page.keys() - attacks.keys():
            log.debug("Only boundary records came back; done")
            break

        attacks.update(page)

        last_id = max(page)
        cursor = page[last_id].timestamp_started

        if not window.unbounded and cursor > window.end:
            log.debug("Cursor %s passed war end %s", cursor, window.end)
            break

        # identical queries are served from cache for a while
        time.sleep(cooldown_seconds)

    log.info("Fetched %d attacks in %d page(s)", len(attacks), page_no)
    return ApiSuccess(attacks)
