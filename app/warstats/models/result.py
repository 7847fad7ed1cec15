"""Tagged results for API calls and report runs.

Remote failures are returned, not raised: callers branch on the type.
"""
from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Union

from .attack import WarWindow
from .member import MemberStats


@dataclass(frozen=True)
class ApiSuccess:
    payload: Any


@dataclass(frozen=True)
class ApiFailure:
    message: str
    code: Optional[int] = None


ApiResult = Union[ApiSuccess, ApiFailure]


FailureKind = Literal["profile", "no_faction", "faction_info", "no_war", "attacks"]


@dataclass(frozen=True)
class ReportSuccess:
    faction_id: int
    war_id: str
    window: WarWindow
    attack_count: int
    members: list[MemberStats] = field(default_factory=list)


@dataclass(frozen=True)
class ReportFailure:
    kind: FailureKind
    message: str


ReportResult = Union[ReportSuccess, ReportFailure]
