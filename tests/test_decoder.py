"""Tests for decoding scoreboard and summary documents."""

import pytest

from helpers import competitor, scoreboard_event
from sportsterm.decoder import (
    decode_scoreboard,
    decode_summary,
    get_string,
    get_text,
    get_value,
    select_plays,
    split_home_away,
)
from sportsterm.errors import DecodeFailure


class TestPathLookup:
    def test_walks_nested_mappings(self):
        doc = {"a": {"b": {"c": "value"}}}
        assert get_string(doc, "a", "b", "c") == "value"

    def test_missing_intermediate_key(self):
        assert get_string({"a": {}}, "a", "b", "c") == ""

    def test_intermediate_not_a_mapping(self):
        assert get_string({"a": "text"}, "a", "b") == ""
        assert get_string({"a": [1, 2]}, "a", "b") == ""

    def test_final_value_not_a_string(self):
        assert get_string({"a": 5}, "a") == ""
        assert get_string({"a": {"b": 1}}, "a") == ""
        assert get_string({"a": None}, "a") == ""

    def test_non_mapping_document(self):
        assert get_string(None, "a") == ""
        assert get_string("text", "a") == ""

    def test_list_indices(self):
        doc = {"items": [{"name": "first"}, {"name": "second"}]}
        assert get_string(doc, "items", 1, "name") == "second"
        assert get_value(doc, "items", 5, "name") is None
        assert get_value({"items": {"0": "x"}}, "items", 0) is None

    def test_get_text_formats_numbers(self):
        assert get_text({"n": 18997}, "n") == "18997"
        assert get_text({"n": 3.0}, "n") == "3"
        assert get_text({"n": True}, "n") == ""
        assert get_text({"n": "7"}, "n") == "7"


class TestSplitHomeAway:
    def test_assigns_by_tag(self):
        home, away = split_home_away([{"homeAway": "away", "n": 1}, {"homeAway": "home", "n": 2}])
        assert home["n"] == 2
        assert away["n"] == 1

    def test_no_competitors(self):
        assert split_home_away([]) == (None, None)

    def test_untagged_entries_are_away(self):
        home, away = split_home_away([{"n": 1}, {"n": 2}])
        assert home is None
        assert away["n"] == 1

    def test_first_home_tag_wins(self):
        home, away = split_home_away([{"homeAway": "home", "n": 1}, {"homeAway": "home", "n": 2}])
        assert home["n"] == 1
        assert away["n"] == 2

    def test_extra_competitors_ignored(self):
        entries = [{"homeAway": "away", "n": 1}, {"homeAway": "home", "n": 2}, {"homeAway": "away", "n": 3}]
        home, away = split_home_away(entries)
        assert (home["n"], away["n"]) == (2, 1)

    def test_skips_non_mapping_entries(self):
        home, away = split_home_away(["junk", None, {"homeAway": "home", "n": 1}])
        assert home["n"] == 1
        assert away is None


class TestDecodeScoreboard:
    def test_live_game(self, nba_scoreboard):
        games = decode_scoreboard(nba_scoreboard)

        assert len(games) == 2
        live = games[0]
        assert live.id == "401585001"
        assert live.is_live is True
        assert live.status == "In Progress"
        assert live.venue == "Crypto.com Arena"
        assert live.home_team.name == "Los Angeles Lakers"
        assert live.home_team.score == "101"
        assert live.away_team.short_name == "Celtics"
        assert live.date is not None and live.date.year == 2024

        assert games[1].is_live is False
        assert games[1].state == "pre"

    def test_event_without_competitions_is_skipped(self):
        doc = {"events": [{"id": "1"}, scoreboard_event("2")]}
        assert [game.id for game in decode_scoreboard(doc)] == ["2"]

    def test_zero_competitors_does_not_crash(self):
        games = decode_scoreboard({"events": [scoreboard_event("1", competitors=[])]})
        assert games[0].home_team.name == ""
        assert games[0].away_team.name == ""

    def test_three_competitors(self):
        competitors = [
            competitor("away", "Boston Celtics", "BOS"),
            competitor("home", "Los Angeles Lakers", "LAL"),
            competitor("away", "Miami Heat", "MIA"),
        ]
        game = decode_scoreboard({"events": [scoreboard_event("1", competitors=competitors)]})[0]
        assert game.home_team.name == "Los Angeles Lakers"
        assert game.away_team.name == "Boston Celtics"

    def test_bad_date_is_none(self):
        event = scoreboard_event("1")
        event["date"] = "not a date"
        assert decode_scoreboard({"events": [event]})[0].date is None

    def test_missing_events(self):
        assert decode_scoreboard({}) == []

    def test_non_object_document(self):
        with pytest.raises(DecodeFailure):
            decode_scoreboard(["not", "an", "object"])


class TestDecodeSummary:
    def test_full_document(self, summary_doc):
        detail = decode_summary(summary_doc, "401585001")

        assert detail.id == "401585001"
        assert detail.is_live is True
        assert detail.status == "In Progress"
        assert detail.status_detail == "5:12 - 3rd Quarter"
        assert detail.period == "3"
        assert detail.clock == "5:12"
        assert detail.venue == "Crypto.com Arena"
        assert detail.attendance == "18997"
        assert detail.home_team.short_name == "LAL"
        assert detail.home_team.record == "25-20"
        assert detail.away_team.score == "80"

    def test_statistics_matched_by_team_id(self, summary_doc):
        detail = decode_summary(summary_doc, "1")

        assert detail.away_team.statistics[0].value == "30-60"
        assert detail.home_team.statistics[0].value == "28-65"
        assert detail.home_team.statistics[1].label == "Rebounds"

    def test_statistics_fall_back_to_home_away_tag(self, summary_doc):
        for entry, side in zip(summary_doc["boxscore"]["teams"], ("away", "home")):
            entry["team"] = {}
            entry["homeAway"] = side
        detail = decode_summary(summary_doc, "1")

        assert detail.away_team.statistics[0].value == "30-60"
        assert detail.home_team.statistics[0].value == "28-65"

    def test_missing_boxscore(self, summary_doc):
        del summary_doc["boxscore"]
        detail = decode_summary(summary_doc, "1")

        assert detail.home_team.statistics == ()
        assert detail.away_team.statistics == ()
        assert detail.home_team.name == "Los Angeles Lakers"

    def test_mistyped_sections(self):
        doc = {"header": "oops", "boxscore": [], "plays": {}, "leaders": "none", "gameInfo": 7}
        detail = decode_summary(doc, "1")

        assert detail.status == ""
        assert detail.plays == ()
        assert detail.leaders == ()
        assert detail.venue == ""

    def test_empty_document(self):
        detail = decode_summary({}, "1")
        assert detail.id == "1"
        assert detail.is_live is False

    def test_non_object_document(self):
        with pytest.raises(DecodeFailure):
            decode_summary(None, "1")

    def test_leaders_take_first_entry_and_skip_empty(self, summary_doc):
        detail = decode_summary(summary_doc, "1")

        assert len(detail.leaders) == 1
        leader = detail.leaders[0]
        assert leader.category == "Points"
        assert leader.athlete == "Jayson Tatum"
        assert leader.team == "BOS"
        assert leader.value == "28"

    def test_play_team_resolved_from_header(self, summary_doc):
        detail = decode_summary(summary_doc, "1")

        assert [play.text for play in detail.plays] == ["Jump ball", "Tatum makes 3-pt jump shot"]
        assert detail.plays[1].team == "BOS"
        assert detail.plays[1].scoring_play is True
        assert detail.plays[1].period == "1st Quarter"
        assert detail.plays[1].clock == "11:40"

    def test_football_drive_plays(self):
        doc = {
            "drives": {
                "previous": [{"plays": [{"id": "1", "text": "Kickoff"}, {"id": "2", "text": "Run for 5"}]}],
                "current": {"plays": [{"id": "2", "text": "Run for 5"}, {"id": "3", "text": "Touchdown",
                                                                         "scoringPlay": True}]},
            }
        }
        detail = decode_summary(doc, "1")
        assert [play.text for play in detail.plays] == ["Kickoff", "Run for 5", "Touchdown"]


class TestSelectPlays:
    def test_only_significant_plays_in_order(self):
        raw = [{"id": str(i), "text": ""} for i in range(50)]
        raw[5] = {"id": "5", "text": "Made free throw"}
        raw[20] = {"id": "20", "text": "", "scoringPlay": True}
        raw[41] = {"id": "41", "text": "Turnover"}

        plays = select_plays(raw, {})

        assert len(plays) == 3
        assert [p.text for p in plays] == ["Made free throw", "", "Turnover"]
        assert plays[1].scoring_play is True

    def test_caps_at_twenty_most_recent(self):
        raw = [{"text": f"play {i}", "clock": {"displayValue": str(i)}} for i in range(50)]

        plays = select_plays(raw, {})

        assert len(plays) == 20
        assert plays[0].text == "play 30"
        assert plays[-1].text == "play 49"

    def test_ignores_non_mapping_entries(self):
        plays = select_plays([None, "x", {"text": "ok"}], {})
        assert [p.text for p in plays] == ["ok"]
