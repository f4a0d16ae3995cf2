"""View navigation state machine.

``Navigator.dispatch`` takes one event, updates the navigation state and
returns the commands the caller should run (fetches, timer, exit). It does no
I/O itself, so every transition can be driven directly from tests.

Fetch results are accepted in any view. A result for a view the user already
left lands in a slot that was reset on the way out; the scheduler also drops
results for invalidated requests, see ``Invalidate``.
"""

import enum
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Union

from sportsterm import viewport
from sportsterm.catalog import AVAILABLE_SPORTS, League, Sport
from sportsterm.errors import FetchFailure
from sportsterm.models import Game, GameDetail

logger = logging.getLogger(__name__)

LIST_SLOT = "list"
DETAIL_SLOT = "detail"


class View(enum.Enum):
    SPORT_SELECT = "sport_select"
    LEAGUE_SELECT = "league_select"
    GAME_LIST = "game_list"
    GAME_DETAIL = "game_detail"


# Events


@dataclass(frozen=True)
class Move:
    delta: int


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Refresh:
    pass


@dataclass(frozen=True)
class ToggleUpcoming:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class ListLoaded:
    games: tuple[Game, ...] = ()
    error: Optional[FetchFailure] = None


@dataclass(frozen=True)
class DetailLoaded:
    detail: Optional[GameDetail] = None
    error: Optional[FetchFailure] = None


@dataclass(frozen=True)
class Tick:
    pass


Event = Union[Move, Confirm, Back, Refresh, ToggleUpcoming, Quit, Resize, ListLoaded, DetailLoaded, Tick]


# Commands


@dataclass(frozen=True)
class FetchList:
    sport_id: str
    league_id: str
    upcoming: bool = False
    silent: bool = False


@dataclass(frozen=True)
class FetchDetail:
    sport_id: str
    league_id: str
    event_id: str
    silent: bool = False


@dataclass(frozen=True)
class ScheduleTick:
    pass


@dataclass(frozen=True)
class Invalidate:
    slot: str


@dataclass(frozen=True)
class Exit:
    pass


Command = Union[FetchList, FetchDetail, ScheduleTick, Invalidate, Exit]


def _clamp(index: int, length: int) -> int:
    if length <= 0:
        return 0
    return max(0, min(index, length - 1))


class Navigator:
    """Owns the current view, the selection cursors and the loaded data."""

    def __init__(
        self,
        sports: tuple[Sport, ...] = AVAILABLE_SPORTS,
        auto_refresh: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.sports = sports
        self.auto_refresh = auto_refresh
        self._clock = clock

        self.view = View.SPORT_SELECT
        self.selected_sport: Optional[Sport] = None
        self.selected_league: Optional[League] = None

        self.sport_cursor = 0
        self.league_cursor = 0
        self.game_cursor = 0
        self.game_scroll = 0
        self.detail_scroll = 0

        self.games: tuple[Game, ...] = ()
        self.detail: Optional[GameDetail] = None
        self.loading = False
        self.loading_detail = False
        self.show_upcoming = False
        self.list_error: Optional[FetchFailure] = None
        self.detail_error: Optional[FetchFailure] = None
        self.last_update: datetime = clock()

        self.width = 0
        self.height = 0

    @property
    def leagues(self) -> tuple[League, ...]:
        return self.selected_sport.leagues if self.selected_sport else ()

    @property
    def visible_games(self) -> int:
        return viewport.visible_count(self.height)

    @property
    def selected_game(self) -> Optional[Game]:
        if 0 <= self.game_cursor < len(self.games):
            return self.games[self.game_cursor]
        return None

    def dispatch(self, event: Event) -> list[Command]:
        """Apply one event and return the commands it produced."""
        handler = getattr(self, f"_on_{type(event).__name__.lower()}", None)
        if handler is None:
            logger.debug("Ignoring unknown event %r", event)
            return []
        return handler(event) or []

    # Input

    def _on_quit(self, event: Quit) -> list[Command]:
        return [Exit()]

    def _on_resize(self, event: Resize) -> None:
        self.width = event.width
        self.height = event.height
        self.game_scroll = viewport.follow_cursor(
            self.game_cursor, self.game_scroll, self.visible_games, len(self.games)
        )

    def _on_move(self, event: Move) -> None:
        if self.view == View.SPORT_SELECT:
            self.sport_cursor = _clamp(self.sport_cursor + event.delta, len(self.sports))
        elif self.view == View.LEAGUE_SELECT:
            self.league_cursor = _clamp(self.league_cursor + event.delta, len(self.leagues))
        elif self.view == View.GAME_LIST:
            self.game_cursor = _clamp(self.game_cursor + event.delta, len(self.games))
            self.game_scroll = viewport.follow_cursor(
                self.game_cursor, self.game_scroll, self.visible_games, len(self.games)
            )
        elif self.view == View.GAME_DETAIL:
            # Upper bound is applied at render time, once the body length is known.
            self.detail_scroll = max(0, self.detail_scroll + event.delta)

    def _on_confirm(self, event: Confirm) -> list[Command]:
        if self.view == View.SPORT_SELECT:
            if self.sport_cursor < len(self.sports):
                self.selected_sport = self.sports[self.sport_cursor]
                self.view = View.LEAGUE_SELECT
                self.league_cursor = 0
            return []

        if self.view == View.LEAGUE_SELECT:
            if self.league_cursor >= len(self.leagues):
                return []
            self.selected_league = self.leagues[self.league_cursor]
            self.view = View.GAME_LIST
            self.game_cursor = 0
            self.game_scroll = 0
            self.show_upcoming = False
            self.loading = True
            return [self._fetch_list()]

        if self.view == View.GAME_LIST:
            game = self.selected_game
            if game is None:
                return []
            self.view = View.GAME_DETAIL
            self.detail = None
            self.detail_error = None
            self.detail_scroll = 0
            self.loading_detail = True
            return [FetchDetail(self.selected_sport.id, self.selected_league.id, game.id)]

        return []

    def _on_back(self, event: Back) -> list[Command]:
        if self.view == View.LEAGUE_SELECT:
            self.view = View.SPORT_SELECT
            self.league_cursor = 0
            return []

        if self.view == View.GAME_LIST:
            self.view = View.LEAGUE_SELECT
            self.games = ()
            self.game_cursor = 0
            self.game_scroll = 0
            self.loading = False
            self.list_error = None
            return [Invalidate(LIST_SLOT)]

        if self.view == View.GAME_DETAIL:
            self.view = View.GAME_LIST
            self.detail = None
            self.detail_error = None
            self.detail_scroll = 0
            self.loading_detail = False
            return [Invalidate(DETAIL_SLOT)]

        return []

    def _on_refresh(self, event: Refresh) -> list[Command]:
        if self.view != View.GAME_LIST or not self._has_league():
            return []
        self.loading = True
        return [self._fetch_list()]

    def _on_toggleupcoming(self, event: ToggleUpcoming) -> list[Command]:
        if self.view != View.GAME_LIST or not self._has_league():
            return []
        self.show_upcoming = not self.show_upcoming
        self.game_cursor = 0
        self.game_scroll = 0
        self.loading = True
        return [self._fetch_list()]

    # Fetch results

    def _on_listloaded(self, event: ListLoaded) -> None:
        self.loading = False
        self.last_update = self._clock()
        if event.error is not None:
            self.list_error = event.error
            return
        self.list_error = None
        self.games = tuple(event.games)
        self.game_cursor = _clamp(self.game_cursor, len(self.games))
        self.game_scroll = viewport.follow_cursor(
            self.game_cursor, self.game_scroll, self.visible_games, len(self.games)
        )

    def _on_detailloaded(self, event: DetailLoaded) -> None:
        self.loading_detail = False
        if event.error is not None:
            self.detail_error = event.error
            return
        self.detail_error = None
        self.detail = event.detail

    def _on_tick(self, event: Tick) -> list[Command]:
        commands: list[Command] = []
        if self.auto_refresh and self._has_league():
            if self.view == View.GAME_LIST and any(game.is_live for game in self.games):
                commands.append(self._fetch_list(silent=True))
            elif self.view == View.GAME_DETAIL and self.detail is not None and self.detail.is_live:
                commands.append(
                    FetchDetail(self.selected_sport.id, self.selected_league.id, self.detail.id, silent=True)
                )
        commands.append(ScheduleTick())
        return commands

    def _has_league(self) -> bool:
        return self.selected_sport is not None and self.selected_league is not None

    def _fetch_list(self, silent: bool = False) -> FetchList:
        return FetchList(self.selected_sport.id, self.selected_league.id, self.show_upcoming, silent)
