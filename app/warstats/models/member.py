COUNTER_FIELDS = (
    "attacked",
    "mugged",
    "hospitalized",
    "assist",
    "stalemate",
    "escape",
    "lost",
)


class MemberStats:
    def __init__(
        self,
        attacker_id,
        name,
        attacked=0,
        mugged=0,
        hospitalized=0,
        assist=0,
        stalemate=0,
        escape=0,
        lost=0,
        respect=0.0,
    ):
        self.attacker_id = attacker_id
        self.name = name
        self.attacked = attacked
        self.mugged = mugged
        self.hospitalized = hospitalized
        self.assist = assist
        self.stalemate = stalemate
        self.escape = escape
        self.lost = lost
        self.respect = respect

    @property
    def attacks(self) -> int:
        """Successful hits: leave + mug + hosp."""
        return self.attacked + self.mugged + self.hospitalized

    def record(self, field: str, respect: float) -> None:
        if field not in COUNTER_FIELDS:
            raise ValueError(f"Unknown counter: {field}")
        setattr(self, field, getattr(self, field) + 1)
        self.respect += respect

    def to_json(self):
        return {
            "attacker_id": self.attacker_id,
            "name": self.name,
            "attacked": self.attacked,
            "mugged": self.mugged,
            "hospitalized": self.hospitalized,
            "assist": self.assist,
            "stalemate": self.stalemate,
            "escape": self.escape,
            "lost": self.lost,
            "respect": self.respect,
        }

    def __repr__(self):
        return f"MemberStats({self.attacker_id!r}, {self.name!r}, respect={self.respect:.2f})"
