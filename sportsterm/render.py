"""Rich renderables for each view.

Pure presentation: reads the navigator, never changes it. The only value
handed back is the clamped detail scroll offset, which can only be known once
the detail body has been laid out into lines.
"""

from datetime import datetime
from typing import Optional

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sportsterm import viewport
from sportsterm.config import Settings, Theme
from sportsterm.logos import sport_icon, team_emoji
from sportsterm.models import Game, GameDetail, TeamDetail
from sportsterm.navigator import Navigator, View

CURSOR = "❯ "
NO_CURSOR = "  "


def _title(text: str, theme: Theme) -> Text:
    return Text(f"  {text}", style=f"bold {theme.primary}")


def _subtitle(text: str, theme: Theme) -> Text:
    return Text(f"  {text}", style=theme.dim)


def _help(text: str, theme: Theme) -> Text:
    return Text(f"\n  {text}", style=theme.dim)


def _error(error, theme: Theme) -> Text:
    return Text(f"  Error: {error}", style=theme.live)


def format_clock(moment: datetime) -> str:
    """3:04 PM style, without a leading zero."""
    return moment.strftime("%I:%M %p").lstrip("0")


def format_kickoff(game: Game) -> str:
    if game.date is None:
        return "TBD"
    local = game.date.astimezone()
    return f"{local:%a %b} {local.day}, {format_clock(local)}"


def render_view(nav: Navigator, settings: Settings) -> tuple[RenderableType, int]:
    """Return (renderable, detail scroll offset to keep)."""
    if nav.view == View.SPORT_SELECT:
        return render_sports(nav, settings.theme), nav.detail_scroll
    if nav.view == View.LEAGUE_SELECT:
        return render_leagues(nav, settings.theme), nav.detail_scroll
    if nav.view == View.GAME_LIST:
        return render_games(nav, settings.theme), nav.detail_scroll
    return render_detail(nav, settings)


def _menu(labels: list[str], cursor: int, theme: Theme) -> list[Text]:
    items = []
    for i, label in enumerate(labels):
        if i == cursor:
            items.append(Text(f"  {CURSOR}{label}", style=f"bold {theme.accent}"))
        else:
            items.append(Text(f"  {NO_CURSOR}{label}", style=theme.text))
    return items


def render_sports(nav: Navigator, theme: Theme) -> RenderableType:
    labels = [f"{sport_icon(sport.id)} {sport.name}" for sport in nav.sports]
    return Group(
        _title("🏆 Sports Scores", theme),
        _subtitle("Select a sport", theme),
        Text(""),
        *_menu(labels, nav.sport_cursor, theme),
        _help("↑/k up • ↓/j down • enter select • q quit", theme),
    )


def render_leagues(nav: Navigator, theme: Theme) -> RenderableType:
    if nav.selected_sport is None:
        return Text("No sport selected")
    return Group(
        _title(f"🏆 {nav.selected_sport.name}", theme),
        _subtitle("Select a league", theme),
        Text(""),
        *_menu([league.name for league in nav.leagues], nav.league_cursor, theme),
        _help("↑/k up • ↓/j down • enter select • esc back • q quit", theme),
    )


def render_game_card(game: Game, selected: bool, theme: Theme) -> Panel:
    if game.is_live:
        status = Text(f"🔴 LIVE - {game.status}", style=f"bold {theme.live}")
    else:
        status = Text(game.status, style=theme.dim)

    team_style = f"bold {theme.text}"
    away_score = game.away_team.score or "-"
    home_score = game.home_team.score or "-"

    return Panel(
        Group(
            status,
            Text(""),
            Text(f"{game.away_team.name:<30} {away_score:>3}", style=team_style),
            Text(f"{game.home_team.name:<30} {home_score:>3}", style=team_style),
            Text(""),
            Text(f"📍 {game.venue}", style=theme.dim),
            Text(f"🕐 {format_kickoff(game)}", style=theme.dim),
        ),
        box=box.ROUNDED,
        border_style=theme.primary if selected else theme.dim,
        padding=(0, 1),
        width=60,
    )


def render_games(nav: Navigator, theme: Theme) -> RenderableType:
    if nav.selected_league is None:
        return Text("No league selected")

    title = _title(f"🏆 {nav.selected_sport.name} - {nav.selected_league.name}", theme)
    toggle = "u current" if nav.show_upcoming else "u upcoming"

    if nav.loading:
        status = _subtitle("Loading games...", theme)
    else:
        status = _subtitle(f"Last updated: {format_clock(nav.last_update)}", theme)

    if nav.list_error is not None:
        return Group(title, Text(""), _error(nav.list_error, theme), _help("r refresh • esc back • q quit", theme))

    games = nav.games
    if not games and not nav.loading:
        if nav.show_upcoming:
            message = "No upcoming games scheduled."
        else:
            message = "No current games. Press 'u' to view upcoming games."
        return Group(
            title,
            status,
            Text(""),
            Text(f"  {message}", style=theme.text),
            _help(f"{toggle} • r refresh • esc back • q quit", theme),
        )

    visible = nav.visible_games
    start, end = viewport.window(nav.game_scroll, visible, len(games))
    if len(games) > visible:
        status.append(f" (Showing {start + 1}-{end} of {len(games)} games)", style=theme.dim)

    cards = Table.grid(padding=(0, 0, 1, 0))
    cards.add_column(width=2)
    cards.add_column()
    for i in range(start, end):
        selected = i == nav.game_cursor
        cards.add_row(CURSOR if selected else NO_CURSOR, render_game_card(games[i], selected, theme))

    return Group(
        title,
        status,
        Text(""),
        cards,
        _help(f"↑/k up • ↓/j down • enter details • {toggle} • r refresh • esc back • q quit", theme),
    )


def _team_line(team: TeamDetail, theme: Theme, sport_id: Optional[str] = None) -> Text:
    line = Text(f"{team_emoji(team.name, sport_id)} ", style=f"bold {theme.text}")
    line.append(f"{team.name:<32}", style=f"bold {theme.text}")
    if team.record:
        line.append(f" ({team.record})", style=theme.dim)
    line.append(f" {team.score:>5}", style=f"bold {theme.text}")
    return line


def render_detail_header(detail: GameDetail, theme: Theme, width: int, sport_id: Optional[str] = None) -> Panel:
    if detail.is_live:
        status = Text(f"🔴 LIVE - {detail.status}", style=f"bold {theme.live}")
        if detail.period and detail.clock:
            status.append(f" • {detail.period} {detail.clock}", style=theme.dim)
    else:
        status = Text(detail.status_detail or detail.status, style=theme.dim)

    return Panel(
        Group(
            status,
            Text(""),
            _team_line(detail.away_team, theme, sport_id),
            _team_line(detail.home_team, theme, sport_id),
        ),
        box=box.ROUNDED,
        border_style=theme.primary,
        padding=(1, 2),
        width=max(20, width - 8) if width else None,
    )


def detail_lines(detail: GameDetail, theme: Theme, max_stats: int = 12) -> list[Text]:
    """Lay the scrollable part of the detail view out line by line."""
    heading = f"bold {theme.accent}"
    lines: list[Text] = []

    if detail.venue or detail.attendance:
        lines += [Text("📍 Game Info", style=heading), Text("")]
        if detail.venue:
            lines.append(Text(f"  Venue: {detail.venue}", style=theme.dim))
        if detail.attendance:
            lines.append(Text(f"  Attendance: {detail.attendance}", style=theme.dim))
        lines.append(Text(""))

    if detail.leaders:
        lines += [Text("⭐ Game Leaders", style=heading), Text("")]
        for leader in detail.leaders:
            lines.append(
                Text(f"  {leader.category}: {leader.athlete} ({leader.team}) - {leader.value}", style=theme.text)
            )
        lines.append(Text(""))

    away, home = detail.away_team, detail.home_team
    if away.statistics or home.statistics:
        lines += [Text("📊 Team Statistics", style=heading), Text("")]
        away_name = away.short_name or away.name
        home_name = home.short_name or home.name
        lines.append(
            Text(f"  {'Stat':<18} {away_name:>8}    |    {'Stat':<18} {home_name:>8}", style=f"bold {theme.primary}")
        )
        lines.append(Text(f"  {'-' * 18} {'-' * 8}    |    {'-' * 18} {'-' * 8}", style=theme.dim))

        rows = min(max(len(away.statistics), len(home.statistics)), max_stats)
        for i in range(rows):
            left = away.statistics[i] if i < len(away.statistics) else None
            right = home.statistics[i] if i < len(home.statistics) else None
            line = f"  {left.label if left else '':<18} {left.value if left else '':>8}"
            line += f"    |    {right.label if right else '':<18} {right.value if right else '':>8}"
            lines.append(Text(line, style=theme.dim))
        lines.append(Text(""))

    if detail.plays:
        lines += [Text("📝 Recent Plays", style=heading), Text("")]
        for play in detail.plays:
            prefix = "🎯 " if play.scoring_play else "  "
            clock = f"[{play.period} {play.clock}] " if play.period and play.clock else ""
            team = f"{play.team} " if play.team and play.scoring_play else ""
            style = f"bold {theme.live}" if play.scoring_play else theme.dim
            lines.append(Text(f"{prefix}{clock}{team}{play.text}", style=style))

    return lines


def render_detail(nav: Navigator, settings: Settings) -> tuple[RenderableType, int]:
    theme = settings.theme
    title = _title("🏆 Game Details", theme)

    if nav.loading_detail:
        return Group(title, _subtitle("Loading game details...", theme)), 0

    if nav.detail_error is not None:
        return Group(title, Text(""), _error(nav.detail_error, theme), _help("esc back • q quit", theme)), 0

    detail: Optional[GameDetail] = nav.detail
    if detail is None:
        return Text("No game details available"), 0

    lines = detail_lines(detail, theme, settings.max_stats)
    available = viewport.detail_available_lines(nav.height)
    offset = viewport.clamp_offset(nav.detail_scroll, len(lines), available)
    start, end = viewport.window(offset, available, len(lines))

    if len(lines) > available:
        title.append(f" (Scroll: {start + 1}/{len(lines)} lines)", style=theme.dim)

    sport_id = nav.selected_sport.id if nav.selected_sport else None
    body = Group(
        title,
        Text(""),
        render_detail_header(detail, theme, nav.width, sport_id),
        Text(""),
        *lines[start:end],
        _help("↑/k up • ↓/j down • esc back • q quit", theme),
    )
    return body, offset
