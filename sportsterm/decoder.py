"""Turn ESPN scoreboard and summary JSON into the types in ``models``.

The feed is loosely typed and its optional sections come and go from game to
game, so nothing here trusts the shape of the document. Every lookup goes
through ``get_value`` and friends, which give back an empty value instead of
raising when a key is missing or holds the wrong type.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Optional

from sportsterm.errors import DecodeFailure
from sportsterm.models import Game, GameDetail, Leader, Play, Statistic, Team, TeamDetail

logger = logging.getLogger(__name__)

MAX_PLAYS = 20


def get_value(doc: Any, *path) -> Any:
    """Walk ``path`` through nested dicts (str keys) and lists (int keys).

    Returns None as soon as a step is missing or the container has the wrong
    type for the key.
    """
    current = doc
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
            current = current[key]
        elif isinstance(current, dict):
            current = current.get(key)
            if current is None:
                return None
        else:
            return None
    return current


def get_string(doc: Any, *path) -> str:
    value = get_value(doc, *path)
    return value if isinstance(value, str) else ""


def get_text(doc: Any, *path) -> str:
    """Like ``get_string`` but numbers are formatted too (attendance, period)."""
    value = get_value(doc, *path)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return ""


def get_bool(doc: Any, *path) -> bool:
    return get_value(doc, *path) is True


def get_list(doc: Any, *path) -> list:
    value = get_value(doc, *path)
    return value if isinstance(value, list) else []


def get_mapping(doc: Any, *path) -> Optional[dict]:
    value = get_value(doc, *path)
    return value if isinstance(value, dict) else None


def parse_date(value: str) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable event date: %r", value)
        return None


def split_home_away(competitors: list) -> tuple[Optional[dict], Optional[dict]]:
    """Pick (home, away) out of a competitor list.

    The first entry tagged ``homeAway == "home"`` is home. Everything else is
    a candidate for away and the first candidate wins; extra entries are
    dropped.
    """
    home = away = None
    for competitor in competitors:
        if not isinstance(competitor, dict):
            continue
        if home is None and competitor.get("homeAway") == "home":
            home = competitor
        elif away is None:
            away = competitor
        else:
            logger.debug("Ignoring extra competitor %r", get_string(competitor, "team", "displayName"))
    return home, away


# Scoreboard


def decode_team(competitor: Optional[dict]) -> Team:
    if competitor is None:
        return Team()
    return Team(
        name=get_string(competitor, "team", "displayName"),
        short_name=get_string(competitor, "team", "shortDisplayName"),
        score=get_text(competitor, "score"),
        logo=get_string(competitor, "team", "logo"),
    )


def decode_game(event: dict) -> Optional[Game]:
    comp = get_mapping(event, "competitions", 0)
    if comp is None:
        return None

    status = get_mapping(comp, "status") or get_mapping(event, "status")
    home, away = split_home_away(get_list(comp, "competitors"))

    return Game(
        id=get_text(event, "id"),
        name=get_string(event, "name"),
        short_name=get_string(event, "shortName"),
        date=parse_date(get_string(event, "date")),
        status=get_string(status, "type", "description"),
        state=get_string(status, "type", "state"),
        is_live=get_string(status, "type", "state") == "in",
        venue=get_string(comp, "venue", "fullName"),
        home_team=decode_team(home),
        away_team=decode_team(away),
    )


def decode_scoreboard(doc: Any) -> list[Game]:
    """Decode a ``/scoreboard`` document into games, in feed order."""
    if not isinstance(doc, dict):
        raise DecodeFailure("failed to parse response: scoreboard is not an object")

    games = []
    for event in get_list(doc, "events"):
        if not isinstance(event, dict):
            continue
        game = decode_game(event)
        if game is not None:
            games.append(game)
    return games


# Summary


def decode_team_detail(competitor: Optional[dict]) -> TeamDetail:
    if competitor is None:
        return TeamDetail()
    return TeamDetail(
        id=get_text(competitor, "id") or get_text(competitor, "team", "id"),
        name=get_string(competitor, "team", "displayName"),
        short_name=get_string(competitor, "team", "abbreviation")
        or get_string(competitor, "team", "shortDisplayName"),
        score=get_text(competitor, "score"),
        record=get_string(competitor, "record", 0, "summary"),
        logo=get_string(competitor, "team", "logos", 0, "href") or get_string(competitor, "team", "logo"),
    )


def decode_statistics(entry: dict) -> tuple[Statistic, ...]:
    stats = []
    for stat in get_list(entry, "statistics"):
        label = get_string(stat, "label") or get_string(stat, "name")
        if not label:
            continue
        stats.append(Statistic(label=label, value=get_text(stat, "displayValue")))
    return tuple(stats)


def attach_statistics(boxscore: dict, home: TeamDetail, away: TeamDetail) -> tuple[TeamDetail, TeamDetail]:
    """Give each side the box score block whose team id matches it."""
    for entry in get_list(boxscore, "teams"):
        if not isinstance(entry, dict):
            continue
        team_id = get_text(entry, "team", "id")
        stats = decode_statistics(entry)

        if team_id and team_id == home.id:
            home = replace(home, statistics=stats)
        elif team_id and team_id == away.id:
            away = replace(away, statistics=stats)
        elif get_string(entry, "homeAway") == "home":
            home = replace(home, statistics=stats)
        elif get_string(entry, "homeAway") == "away":
            away = replace(away, statistics=stats)
        else:
            logger.debug("Box score team %r matches neither side", team_id)
    return home, away


def _drive_plays(doc: dict) -> list:
    """Football summaries keep plays inside drives instead of a flat list."""
    plays = []
    seen = set()
    drives = get_list(doc, "drives", "previous") + [get_value(doc, "drives", "current")]
    for drive in drives:
        for play in get_list(drive, "plays"):
            play_id = get_text(play, "id")
            if play_id and play_id in seen:
                continue
            seen.add(play_id)
            plays.append(play)
    return plays


def select_plays(raw_plays: list, team_names: dict[str, str], limit: int = MAX_PLAYS) -> tuple[Play, ...]:
    """Keep the latest ``limit`` scoring or described plays, oldest first."""
    selected = []
    for play in reversed(raw_plays):
        if len(selected) >= limit:
            break
        scoring = get_bool(play, "scoringPlay")
        text = get_string(play, "text")
        if not (scoring or text):
            continue
        team_id = get_text(play, "team", "id")
        selected.append(
            Play(
                period=get_string(play, "period", "displayValue") or get_text(play, "period", "number"),
                clock=get_string(play, "clock", "displayValue"),
                text=text,
                scoring_play=scoring,
                team=team_names.get(team_id, "") or get_string(play, "team", "abbreviation"),
            )
        )
    selected.reverse()
    return tuple(selected)


def decode_leaders(leader_blocks: list) -> tuple[Leader, ...]:
    leaders = []
    for block in leader_blocks:
        team = get_string(block, "team", "abbreviation") or get_string(block, "team", "displayName")
        for category in get_list(block, "leaders"):
            top = get_mapping(category, "leaders", 0)
            if top is None:
                continue
            leaders.append(
                Leader(
                    category=get_string(category, "displayName") or get_string(category, "name"),
                    team=team,
                    athlete=get_string(top, "athlete", "displayName"),
                    value=get_string(top, "displayValue") or get_string(top, "summary"),
                )
            )
    return tuple(leaders)


def decode_summary(doc: Any, event_id: str) -> GameDetail:
    """Decode a ``/summary`` document.

    Sections (header, boxscore, plays, leaders, gameInfo) are optional. A
    missing section leaves its fields empty.
    """
    if not isinstance(doc, dict):
        raise DecodeFailure("failed to parse response: summary is not an object")

    fields: dict[str, Any] = {}
    home = away = TeamDetail()

    header = get_mapping(doc, "header")
    if header is not None:
        comp = get_mapping(header, "competitions", 0)
        fields.update(
            status=get_string(comp, "status", "type", "description"),
            status_detail=get_string(comp, "status", "type", "detail"),
            period=get_text(comp, "status", "period"),
            clock=get_string(comp, "status", "displayClock"),
            is_live=get_string(comp, "status", "type", "state") == "in",
        )
        home_raw, away_raw = split_home_away(get_list(comp, "competitors"))
        home, away = decode_team_detail(home_raw), decode_team_detail(away_raw)

    boxscore = get_mapping(doc, "boxscore")
    if boxscore is not None:
        home, away = attach_statistics(boxscore, home, away)

    if "plays" in doc:
        raw_plays = get_list(doc, "plays")
    else:
        raw_plays = _drive_plays(doc)
    if raw_plays:
        team_names = {team.id: team.short_name for team in (home, away) if team.id}
        fields["plays"] = select_plays(raw_plays, team_names)

    leader_blocks = get_list(doc, "leaders")
    if leader_blocks:
        fields["leaders"] = decode_leaders(leader_blocks)

    game_info = get_mapping(doc, "gameInfo")
    if game_info is not None:
        fields["venue"] = get_string(game_info, "venue", "fullName")
        fields["attendance"] = get_text(game_info, "attendance")

    return GameDetail(id=event_id, home_team=home, away_team=away, **fields)
