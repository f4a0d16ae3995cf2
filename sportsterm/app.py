"""Textual application: the single owner of navigation state.

Key presses and fetch completions both arrive as messages on the App's queue
and are handled one at a time, so the navigator never sees concurrent
updates. Fetches and the liveness timer run as separate tasks (see
``scheduler``) and only talk back by posting a ``NavigatorEvent``.
"""

import logging
from typing import Optional

from textual import events, on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Static

from sportsterm.config import Settings
from sportsterm.espn import DataSource, ESPNSource
from sportsterm.navigator import (
    Back,
    Command,
    Confirm,
    Event,
    Exit,
    FetchDetail,
    FetchList,
    Invalidate,
    Move,
    Navigator,
    Quit,
    Refresh,
    Resize,
    ScheduleTick,
    ToggleUpcoming,
)
from sportsterm.render import render_view
from sportsterm.scheduler import RefreshScheduler

logger = logging.getLogger(__name__)


class NavigatorEvent(Message):
    """Carries a navigator event posted from outside the message loop."""

    def __init__(self, event: Event):
        super().__init__()
        self.event = event


def _theme_css(theme_name: str) -> str:
    if theme_name == "light":
        return """
        Screen { background: white; color: black; }
        #view { padding: 1 0; }
        """

    return """
    Screen { background: $background; }
    #view { padding: 1 0; }
    """


class SportsTermApp(App):
    CSS = _theme_css("dark")

    BINDINGS = [
        Binding("up", "nav_move(-1)", "Up", show=False, priority=True),
        Binding("k", "nav_move(-1)", "Up", show=False, priority=True),
        Binding("down", "nav_move(1)", "Down", show=False, priority=True),
        Binding("j", "nav_move(1)", "Down", show=False, priority=True),
        Binding("enter", "nav_confirm", "Select", show=False, priority=True),
        Binding("right", "nav_confirm", "Select", show=False, priority=True),
        Binding("l", "nav_confirm", "Select", show=False, priority=True),
        Binding("escape", "nav_back", "Back", show=False, priority=True),
        Binding("backspace", "nav_back", "Back", show=False, priority=True),
        Binding("r", "nav_refresh", "Refresh", show=False, priority=True),
        Binding("u", "nav_toggle_upcoming", "Upcoming", show=False, priority=True),
        Binding("q", "nav_quit", "Quit", show=False, priority=True),
        Binding("ctrl+c", "nav_quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, settings: Settings, source: Optional[DataSource] = None):
        self.CSS = _theme_css(settings.theme_name)
        super().__init__()
        self.user_settings = settings
        self.nav = Navigator(auto_refresh=settings.auto_refresh)
        self.refresher = RefreshScheduler(
            source or ESPNSource(timeout=settings.fetch_timeout),
            self._post_event,
            timeout=settings.fetch_timeout,
            tick_interval=settings.refresh_interval,
        )

    def compose(self) -> ComposeResult:
        yield Static("", id="view")

    def on_mount(self) -> None:
        self.apply_event(Resize(self.size.width, self.size.height))
        self.refresher.schedule_tick()

    def on_resize(self, event: events.Resize) -> None:
        self.apply_event(Resize(event.size.width, event.size.height))

    def on_unmount(self) -> None:
        self.refresher.shutdown()

    def _post_event(self, event: Event) -> None:
        self.post_message(NavigatorEvent(event))

    @on(NavigatorEvent)
    def _navigator_event(self, message: NavigatorEvent) -> None:
        self.apply_event(message.event)

    def apply_event(self, event: Event) -> None:
        self.run_commands(self.nav.dispatch(event))
        self.show_view()

    def run_commands(self, commands: list[Command]) -> None:
        for command in commands:
            if isinstance(command, FetchList):
                self.refresher.request_list(command.sport_id, command.league_id, command.upcoming)
            elif isinstance(command, FetchDetail):
                self.refresher.request_detail(command.sport_id, command.league_id, command.event_id)
            elif isinstance(command, ScheduleTick):
                self.refresher.schedule_tick()
            elif isinstance(command, Invalidate):
                self.refresher.invalidate(command.slot)
            elif isinstance(command, Exit):
                self.exit()

    def show_view(self) -> None:
        try:
            view = self.query_one("#view", Static)
        except NoMatches:
            return
        renderable, detail_scroll = render_view(self.nav, self.user_settings)
        self.nav.detail_scroll = detail_scroll
        view.update(renderable)

    def action_nav_move(self, delta: int) -> None:
        self.apply_event(Move(delta))

    def action_nav_confirm(self) -> None:
        self.apply_event(Confirm())

    def action_nav_back(self) -> None:
        self.apply_event(Back())

    def action_nav_refresh(self) -> None:
        self.apply_event(Refresh())

    def action_nav_toggle_upcoming(self) -> None:
        self.apply_event(ToggleUpcoming())

    def action_nav_quit(self) -> None:
        self.apply_event(Quit())
