"""ESPN site API data source.

Fetches scoreboards and game summaries and hands the JSON to ``decoder``.
Transport problems, bad status codes and undecodable payloads are raised as
``FetchFailure`` subclasses; callers decide what to do with them.
"""

import http.client
import json
import logging
import socket
import urllib.error
import urllib.parse
import urllib.request
from datetime import date, timedelta
from typing import Optional, Protocol

from sportsterm import __version__
from sportsterm.decoder import decode_scoreboard, decode_summary
from sportsterm.errors import DecodeFailure, ProtocolFailure, TimedOut, TransportFailure
from sportsterm.models import Game, GameDetail

logger = logging.getLogger(__name__)

ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports"

DEFAULT_TIMEOUT = 10.0
UPCOMING_DAYS = 7


class DataSource(Protocol):
    def list_games(self, sport: str, league: str, upcoming: bool = False) -> list[Game]: ...

    def game_detail(self, sport: str, league: str, event_id: str) -> GameDetail: ...


def fetch_json(url: str, timeout: float = DEFAULT_TIMEOUT):
    """Fetch JSON from URL, raising a FetchFailure on any problem."""
    request = urllib.request.Request(url, headers={"User-Agent": f"sportsterm/{__version__}"})
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            body = response.read()
    except urllib.error.HTTPError as e:
        raise ProtocolFailure(e.code, url) from e
    except (socket.timeout, TimeoutError) as e:
        raise TimedOut(timeout) from e
    except urllib.error.URLError as e:
        if isinstance(e.reason, (socket.timeout, TimeoutError)):
            raise TimedOut(timeout) from e
        raise TransportFailure(f"failed to fetch data: {e.reason}") from e
    except (OSError, http.client.HTTPException) as e:
        raise TransportFailure(f"failed to fetch data: {e}") from e

    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise DecodeFailure(f"failed to parse response: {e}") from e


def upcoming_range(today: Optional[date] = None, days: int = UPCOMING_DAYS) -> str:
    """Scoreboard ``dates`` value covering tomorrow through ``days`` ahead."""
    today = today or date.today()
    start = today + timedelta(days=1)
    end = today + timedelta(days=days)
    return f"{start:%Y%m%d}-{end:%Y%m%d}"


class ESPNSource:
    """Blocking client for the two ESPN endpoints the dashboard needs."""

    def __init__(self, base_url: str = ESPN_BASE_URL, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def scoreboard_url(self, sport: str, league: str, upcoming: bool = False) -> str:
        url = f"{self.base_url}/{sport}/{league}/scoreboard"
        if upcoming:
            url += "?" + urllib.parse.urlencode({"dates": upcoming_range()})
        return url

    def summary_url(self, sport: str, league: str, event_id: str) -> str:
        query = urllib.parse.urlencode({"event": event_id})
        return f"{self.base_url}/{sport}/{league}/summary?{query}"

    def list_games(self, sport: str, league: str, upcoming: bool = False) -> list[Game]:
        """Current scoreboard, or games that have not started yet when ``upcoming``."""
        url = self.scoreboard_url(sport, league, upcoming)
        logger.debug("Fetching games: %s", url)
        games = decode_scoreboard(fetch_json(url, self.timeout))
        if upcoming:
            games = [game for game in games if game.state == "pre"]
        return games

    def game_detail(self, sport: str, league: str, event_id: str) -> GameDetail:
        url = self.summary_url(sport, league, event_id)
        logger.debug("Fetching game detail: %s", url)
        return decode_summary(fetch_json(url, self.timeout), event_id)

