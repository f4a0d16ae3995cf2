"""Static catalog of sports and leagues available on the ESPN site API."""

from dataclasses import dataclass


@dataclass(frozen=True)
class League:
    name: str
    id: str


@dataclass(frozen=True)
class Sport:
    name: str
    id: str
    leagues: tuple[League, ...] = ()


AVAILABLE_SPORTS: tuple[Sport, ...] = (
    Sport(
        name="Football",
        id="football",
        leagues=(
            League(name="NFL", id="nfl"),
            League(name="College Football", id="college-football"),
        ),
    ),
    Sport(
        name="Basketball",
        id="basketball",
        leagues=(
            League(name="NBA", id="nba"),
            League(name="WNBA", id="wnba"),
            League(name="College Basketball (Men)", id="mens-college-basketball"),
            League(name="College Basketball (Women)", id="womens-college-basketball"),
        ),
    ),
    Sport(
        name="Baseball",
        id="baseball",
        leagues=(
            League(name="MLB", id="mlb"),
            League(name="College Baseball", id="college-baseball"),
        ),
    ),
    Sport(
        name="Hockey",
        id="hockey",
        leagues=(League(name="NHL", id="nhl"),),
    ),
    Sport(
        name="Soccer",
        id="soccer",
        leagues=(
            League(name="Premier League", id="eng.1"),
            League(name="La Liga", id="esp.1"),
            League(name="Serie A", id="ita.1"),
            League(name="Bundesliga", id="ger.1"),
            League(name="MLS", id="usa.1"),
            League(name="Champions League", id="uefa.champions"),
        ),
    ),
)
