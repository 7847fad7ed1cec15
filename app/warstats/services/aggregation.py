import logging
from typing import Iterable, Mapping, Optional, Union

from ..models.attack import Attack
from ..models.member import MemberStats

log = logging.getLogger("warstats.aggregation")

RESULT_FIELDS = {
    "Attacked": "attacked",
    "Mugged": "mugged",
    "Hospitalized": "hospitalized",
    "Assist": "assist",
    "Stalemate": "stalemate",
    "Escape": "escape",
    "Lost": "lost",
    # undocumented upstream; reads like a leave
    "Special": "attacked",
}


def classify_result(result: str) -> Optional[str]:
    """Return the MemberStats counter for a result code, or None if unknown."""
    return RESULT_FIELDS.get(result)


def aggregate_attacks(
    attacks: Union[Mapping[str, Attack], Iterable[Attack]],
    faction_id: int,
) -> list[MemberStats]:
    """
    Fold ranked war hits made by ``faction_id`` into per-member stats,
    highest respect first.
    """
    if isinstance(attacks, Mapping):
        attacks = attacks.values()

    stats: dict[str, MemberStats] = {}
    for attack in attacks:
        if attack.attacker_faction != faction_id:
            continue
        if not attack.ranked_war:
            continue

        member = stats.get(attack.attacker_id)
        if member is None:
            member = MemberStats(attack.attacker_id, attack.attacker_name)
            stats[attack.attacker_id] = member

        field = classify_result(attack.result)
        if field is None:
            log.warning(
                "Skipping attack %s with unrecognized result %r",
                attack.attack_id,
                attack.result,
            )
            continue

        member.record(field, attack.respect)

    return sorted(stats.values(), key=lambda m: m.respect, reverse=True)
