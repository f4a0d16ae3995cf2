"""Data types shared by the decoder, navigator and renderer.

Everything here is immutable. A refresh builds new objects and replaces the
old ones wholesale; nothing is patched in place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Team:
    """Team as it appears on a scoreboard card."""

    name: str = ""
    short_name: str = ""
    score: str = ""  # empty until the game starts
    logo: str = ""


@dataclass(frozen=True)
class Game:
    id: str
    name: str = ""
    short_name: str = ""
    date: Optional[datetime] = None
    status: str = ""
    state: str = ""  # "pre", "in" or "post"
    is_live: bool = False
    venue: str = ""
    home_team: Team = Team()
    away_team: Team = Team()


@dataclass(frozen=True)
class Statistic:
    label: str
    value: str


@dataclass(frozen=True)
class TeamDetail:
    """Team block of the game detail view, with its box score statistics."""

    id: str = ""
    name: str = ""
    short_name: str = ""
    score: str = ""
    record: str = ""
    logo: str = ""
    statistics: tuple[Statistic, ...] = ()


@dataclass(frozen=True)
class Play:
    period: str = ""
    clock: str = ""
    text: str = ""
    scoring_play: bool = False
    team: str = ""


@dataclass(frozen=True)
class Leader:
    category: str
    team: str = ""
    athlete: str = ""
    value: str = ""


@dataclass(frozen=True)
class GameDetail:
    id: str
    status: str = ""
    status_detail: str = ""
    period: str = ""
    clock: str = ""
    is_live: bool = False
    venue: str = ""
    attendance: str = ""
    home_team: TeamDetail = TeamDetail()
    away_team: TeamDetail = TeamDetail()
    plays: tuple[Play, ...] = ()  # chronological
    leaders: tuple[Leader, ...] = ()
