"""Emoji stand-ins for sport icons and team logos."""

from typing import Optional

SPORT_ICONS = {
    "football": "🏈",
    "basketball": "🏀",
    "baseball": "⚾",
    "hockey": "🏒",
    "soccer": "⚽",
}

# Keyword (lower case, whole words of the team's display name) -> emoji in
# roughly the team colours.
NBA_EMOJIS = {
    "lakers": "🟡", "warriors": "🏀", "celtics": "🟢", "bulls": "🔴",
    "heat": "🔥", "spurs": "⚫", "pistons": "🔵", "cavaliers": "🏹",
    "knicks": "🟠", "76ers": "🔵", "raptors": "🔴",
    "hawks": "🔴", "hornets": "🟣", "magic": "🔵", "wizards": "🔴",
    "bucks": "🟢", "pacers": "🟡", "rockets": "🔴", "mavericks": "🔵",
    "grizzlies": "🔵", "pelicans": "🟣", "suns": "🟡", "jazz": "🟡",
    "nuggets": "🔵", "timberwolves": "🟢", "thunder": "🟡", "blazers": "🔴",
    "kings": "🟣", "clippers": "🔵", "nets": "⚫",
}

NFL_EMOJIS = {
    "patriots": "🔴", "bills": "🔴", "dolphins": "🔵", "jets": "🟢",
    "steelers": "🟡", "ravens": "🟣", "browns": "🟠", "bengals": "🟠",
    "texans": "🔴", "colts": "🔵", "jaguars": "🟢", "titans": "🔵",
    "chiefs": "🔴", "raiders": "⚫", "chargers": "🔵", "broncos": "🟠",
    "cowboys": "🔵", "eagles": "🟢", "giants": "🔵", "commanders": "🔴",
    "packers": "🟢", "vikings": "🟣", "bears": "🟠", "lions": "🔵",
    "falcons": "🔴", "panthers": "🔵", "saints": "🟣", "buccaneers": "🔴",
    "cardinals": "🔴", "49ers": "🔴", "seahawks": "🟢", "rams": "🟡",
}

MLB_EMOJIS = {
    "yankees": "🔵", "red sox": "🔴", "blue jays": "🔵", "orioles": "🟠",
    "rays": "🔵", "astros": "🟠", "angels": "🔴", "athletics": "🟢",
    "mariners": "🔵", "rangers": "🔴", "twins": "🔵", "white sox": "⚫",
    "guardians": "🔵", "tigers": "🟠", "royals": "🔵", "braves": "🔴",
    "mets": "🔵", "phillies": "🔴", "marlins": "🔵", "nationals": "🔴",
    "cubs": "🔵", "brewers": "🟡", "pirates": "⚫",
    "reds": "🔴", "dodgers": "🔵", "padres": "🟡",
    "diamondbacks": "🔴", "rockies": "🟣",
}

DEFAULT_SPORT_ICON = "🏃"
DEFAULT_TEAM_EMOJI = "🏆"

TEAM_EMOJIS = {
    "basketball": NBA_EMOJIS,
    "football": NFL_EMOJIS,
    "baseball": MLB_EMOJIS,
}


def sport_icon(sport_id: str) -> str:
    return SPORT_ICONS.get(sport_id, DEFAULT_SPORT_ICON)


def _has_words(words: list[str], keyword: str) -> bool:
    wanted = keyword.split()
    return any(words[i:i + len(wanted)] == wanted for i in range(len(words) - len(wanted) + 1))


def team_emoji(team_name: str, sport_id: Optional[str] = None) -> str:
    """Emoji for a team, matched on whole words of its display name.

    With ``sport_id`` only that sport's table is searched, so e.g. the NHL
    Rangers do not pick up the MLB Rangers' colour.
    """
    words = (team_name or "").lower().split()
    if sport_id is None:
        tables = list(TEAM_EMOJIS.values())
    else:
        tables = [TEAM_EMOJIS[sport_id]] if sport_id in TEAM_EMOJIS else []
    for table in tables:
        for keyword, emoji in table.items():
            if _has_words(words, keyword):
                return emoji
    return DEFAULT_TEAM_EMOJI
