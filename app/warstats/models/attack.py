from dataclasses import dataclass


def _as_int(value) -> int:
    if value in (None, ""):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_float(value) -> float:
    if value in (None, ""):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


@dataclass(frozen=True)
class Attack:
    attack_id: str
    attacker_id: str
    attacker_name: str
    attacker_faction: int
    result: str
    respect: float
    ranked_war: bool
    timestamp_started: int

    @staticmethod
    def from_json(attack_id, data: dict) -> "Attack":
        # stealthed attackers come back with empty id/name/faction
        return Attack(
            attack_id=str(attack_id),
            attacker_id=str(data.get("attacker_id") or ""),
            attacker_name=str(data.get("attacker_name") or ""),
            attacker_faction=_as_int(data.get("attacker_faction")),
            result=str(data.get("result") or ""),
            respect=_as_float(data.get("respect")),
            ranked_war=_as_int(data.get("ranked_war")) == 1,
            timestamp_started=_as_int(data.get("timestamp_started")),
        )


@dataclass(frozen=True)
class WarWindow:
    """Time range of a ranked war. ``end == 0`` while the war is still running."""

    start: int
    end: int = 0

    @property
    def unbounded(self) -> bool:
        return self.end == 0

    @staticmethod
    def from_ranked_war(war: dict) -> "WarWindow":
        start = _as_int(war.get("start"))
        end = _as_int(war.get("end"))
        # "to" is exclusive upstream; widen so the last second is included
        if end != 0:
            end += 1
        return WarWindow(start=start, end=end)
