"""ESPN-shaped documents and fakes shared by the tests."""

import threading

from sportsterm.models import Game, GameDetail, Team, TeamDetail


def competitor(home_away, name, abbr, score="", team_id=None, record=None):
    entry = {
        "homeAway": home_away,
        "score": score,
        "team": {
            "displayName": name,
            "shortDisplayName": name.split()[-1],
            "abbreviation": abbr,
            "logo": f"https://a.espncdn.com/{abbr}.png",
        },
    }
    if team_id is not None:
        entry["id"] = team_id
        entry["team"]["id"] = team_id
    if record is not None:
        entry["record"] = [{"type": "total", "summary": record}]
    return entry


def scoreboard_event(event_id, state="pre", description="Scheduled", competitors=None):
    return {
        "id": event_id,
        "name": "Boston Celtics at Los Angeles Lakers",
        "shortName": "BOS @ LAL",
        "date": "2024-01-15T03:30Z",
        "competitions": [
            {
                "venue": {"fullName": "Crypto.com Arena"},
                "status": {"type": {"state": state, "completed": state == "post", "description": description}},
                "competitors": competitors
                if competitors is not None
                else [
                    competitor("home", "Los Angeles Lakers", "LAL", "101"),
                    competitor("away", "Boston Celtics", "BOS", "99"),
                ],
            }
        ],
    }


def make_game(game_id, is_live=False, status="Scheduled"):
    return Game(
        id=game_id,
        name=f"Game {game_id}",
        status=status,
        state="in" if is_live else "pre",
        is_live=is_live,
        home_team=Team(name="Home", score="1"),
        away_team=Team(name="Away", score="2"),
    )


def make_detail(event_id="401585001", is_live=True):
    return GameDetail(
        id=event_id,
        status="In Progress",
        is_live=is_live,
        home_team=TeamDetail(id="13", name="Los Angeles Lakers", short_name="LAL", score="77"),
        away_team=TeamDetail(id="2", name="Boston Celtics", short_name="BOS", score="80"),
    )


class FakeSource:
    """In-memory data source. Calls can be held until ``release`` is set."""

    def __init__(self, games=(), detail=None, error=None):
        self.games = list(games)
        self.detail = detail
        self.error = error
        self.calls = []
        self.release = threading.Event()
        self.release.set()

    def list_games(self, sport, league, upcoming=False):
        self.calls.append(("list", sport, league, upcoming))
        self.release.wait(5)
        if self.error is not None:
            raise self.error
        return list(self.games)

    def game_detail(self, sport, league, event_id):
        self.calls.append(("detail", sport, league, event_id))
        self.release.wait(5)
        if self.error is not None:
            raise self.error
        return self.detail or make_detail(event_id)
