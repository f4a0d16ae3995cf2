"""Shared fixtures."""

import pytest

from helpers import competitor, scoreboard_event


@pytest.fixture
def nba_scoreboard():
    return {
        "events": [
            scoreboard_event("401585001", state="in", description="In Progress"),
            scoreboard_event("401585002", state="pre", description="Scheduled"),
        ]
    }


@pytest.fixture
def summary_doc():
    return {
        "header": {
            "competitions": [
                {
                    "status": {
                        "period": 3,
                        "displayClock": "5:12",
                        "type": {"state": "in", "description": "In Progress", "detail": "5:12 - 3rd Quarter"},
                    },
                    "competitors": [
                        competitor("home", "Los Angeles Lakers", "LAL", "77", team_id="13", record="25-20"),
                        competitor("away", "Boston Celtics", "BOS", "80", team_id="2", record="33-10"),
                    ],
                }
            ]
        },
        "boxscore": {
            "teams": [
                # away team listed first, matching the live feed
                {
                    "team": {"id": "2"},
                    "statistics": [
                        {"label": "FG", "displayValue": "30-60"},
                        {"label": "Rebounds", "displayValue": "33"},
                    ],
                },
                {
                    "team": {"id": "13"},
                    "statistics": [
                        {"label": "FG", "displayValue": "28-65"},
                        {"label": "Rebounds", "displayValue": "29"},
                    ],
                },
            ]
        },
        "plays": [
            {"id": "1", "period": {"number": 1, "displayValue": "1st Quarter"}, "clock": {"displayValue": "12:00"},
             "text": "Jump ball", "scoringPlay": False, "team": {"id": "13"}},
            {"id": "2", "period": {"number": 1, "displayValue": "1st Quarter"}, "clock": {"displayValue": "11:40"},
             "text": "Tatum makes 3-pt jump shot", "scoringPlay": True, "team": {"id": "2"}},
        ],
        "leaders": [
            {
                "team": {"abbreviation": "BOS"},
                "leaders": [
                    {"displayName": "Points", "leaders": [
                        {"displayValue": "28", "athlete": {"displayName": "Jayson Tatum"}},
                        {"displayValue": "20", "athlete": {"displayName": "Jaylen Brown"}},
                    ]},
                    {"displayName": "Assists", "leaders": []},
                ],
            },
        ],
        "gameInfo": {"venue": {"fullName": "Crypto.com Arena"}, "attendance": 18997},
    }
