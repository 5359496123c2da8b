"""Unit tests for the option families: normalisation and key conventions."""

from __future__ import annotations

import pytest

from lichess.client.core import (
    Color,
    CorrespondenceDays,
    GameType,
    InvalidOptionError,
    OpeningRatings,
    Rules,
    VariantMode,
)
from lichess.client.options import (
    MAX_CLOCK_INCREMENT,
    AIChallengeOptions,
    BulkPairingOptions,
    ChallengeOptions,
    LichessOpeningOptions,
    MastersOpeningOptions,
    OpenChallengeOptions,
    PlayerOpeningOptions,
    SeekOptions,
    UserStatusOptions,
    clamp_increment,
    normalize_clock_limit,
    rating_range,
)

CLOCKED_FAMILIES = [ChallengeOptions, AIChallengeOptions, OpenChallengeOptions, BulkPairingOptions]


class TestClockNormalisation:
    """Clock values are normalised at setter time, never rejected."""

    @pytest.mark.parametrize("limit", [0, 15, 30, 45, 60, 90, 120, 180, 600, 3600, 10800])
    def test_recognised_limits_kept(self, limit):
        assert normalize_clock_limit(limit) == limit

    @pytest.mark.parametrize("limit", [1, 10, 59, 61, 100, 150, 10801, 10860, 20000, -60, -15])
    def test_unrecognised_limits_become_zero(self, limit):
        assert normalize_clock_limit(limit) == 0

    @pytest.mark.parametrize(
        ("increment", "expected"), [(0, 0), (2, 2), (180, 180), (181, 180), (9999, 180), (-5, 0)]
    )
    def test_increment_clamped(self, increment, expected):
        assert clamp_increment(increment) == expected

    @pytest.mark.parametrize("family", CLOCKED_FAMILIES, ids=lambda f: f.__name__)
    @pytest.mark.parametrize(
        ("limit", "increment", "stored"),
        [
            (300, 3, (300, 3)),
            (15, 0, (15, 0)),
            (100, 2, (0, 2)),
            (600, 500, (600, 180)),
            (12000, 181, (0, 180)),
        ],
    )
    def test_setter_stores_normalised_values(self, family, limit, increment, stored):
        options = family.new().with_clock(limit, increment)
        assert (options.clock_limit, options.clock_increment) == stored

    def test_normalisation_also_applies_on_construction(self):
        options = ChallengeOptions.new(clock_limit=7, clock_increment=MAX_CLOCK_INCREMENT + 1)
        assert options.clock_limit == 0
        assert options.clock_increment == MAX_CLOCK_INCREMENT

    def test_seek_time_and_increment_clamped_to_180(self):
        options = SeekOptions.new().with_clock(500, 200)
        assert options.to_pairs() == [("time", "180"), ("increment", "180")]


class TestDottedKeys:
    """Challenge and bulk pairing families send dotted clock keys."""

    def test_challenge_form(self):
        options = (
            ChallengeOptions.new()
            .with_rated(True)
            .with_clock(300, 3)
            .with_color(Color.WHITE)
            .with_variant(VariantMode.CHESS960)
            .with_rules([Rules.NO_ABORT, Rules.NO_REMATCH])
        )
        assert options.to_pairs() == [
            ("rated", "true"),
            ("clock.limit", "300"),
            ("clock.increment", "3"),
            ("color", "white"),
            ("variant", "chess960"),
            ("rules", "noAbort,noRematch"),
        ]
        assert options.encode() == (
            b"rated=true&clock.limit=300&clock.increment=3&color=white"
            b"&variant=chess960&rules=noAbort%2CnoRematch"
        )

    def test_correspondence_days(self):
        options = AIChallengeOptions.new().with_days(CorrespondenceDays.FIVE)
        assert options.to_pairs() == [("days", "5")]

    def test_invalid_days_rejected(self):
        with pytest.raises(InvalidOptionError):
            ChallengeOptions.new().with_days(4)

    def test_open_challenge_aliases(self):
        options = (
            OpenChallengeOptions.new()
            .with_name("Arena final")
            .with_users("alice", "bob")
            .with_expires_at(1_700_000_000_000)
        )
        assert options.to_pairs() == [
            ("name", "Arena final"),
            ("users", "alice,bob"),
            ("expiresAt", "1700000000000"),
        ]

    def test_bulk_pairing_players_and_timestamps(self):
        options = (
            BulkPairingOptions.new()
            .with_clock(180, 2)
            .with_players([("tokA", "tokB"), ("tokC", "tokD")])
            .with_pair_at(1_000)
            .with_start_clocks_at(2_000)
        )
        assert options.to_pairs() == [
            ("clock.limit", "180"),
            ("clock.increment", "2"),
            ("pairAt", "1000"),
            ("players", "tokA:tokB,tokC:tokD"),
            ("startClocksAt", "2000"),
        ]


class TestSeekOptions:
    def test_rating_range_is_dashed(self):
        assert rating_range(1500, 1800) == "1500-1800"
        assert rating_range(-100, 1800) == "0-1800"

    def test_seek_form(self):
        options = (
            SeekOptions.new()
            .with_rated(False)
            .with_clock(5, 3)
            .with_color(Color.RANDOM)
            .with_rating_range(1500, 1800)
        )
        assert options.to_pairs() == [
            ("rated", "false"),
            ("time", "5"),
            ("increment", "3"),
            ("color", "random"),
            ("ratingRange", "1500-1800"),
        ]

    def test_keys_are_not_dotted(self):
        assert not SeekOptions.dotted_keys
        options = SeekOptions.new().with_rating_range(1000, 1200)
        assert options.to_pairs()[0][0] == "ratingRange"


class TestExplorerOptions:
    """Explorer keys keep their camelCase names."""

    def test_masters(self):
        options = (
            MastersOpeningOptions.new()
            .with_play(["e2e4", "e7e5"])
            .with_since(1990)
            .with_top_games(4)
        )
        assert options.to_pairs() == [
            ("play", "e2e4,e7e5"),
            ("since", "1990"),
            ("topGames", "4"),
        ]

    def test_lichess_ratings_and_history(self):
        options = (
            LichessOpeningOptions.new()
            .with_ratings([OpeningRatings.R1600, 1800])
            .with_recent_games(0)
            .with_history(True)
        )
        assert options.to_pairs() == [
            ("ratings", "1600,1800"),
            ("recentGames", "0"),
            ("history", "true"),
        ]

    def test_player_modes(self):
        options = PlayerOpeningOptions.new().with_modes([GameType.RATED]).with_since("2023-01")
        assert options.to_pairs() == [("modes", "rated"), ("since", "2023-01")]

    def test_unknown_rating_group_rejected(self):
        with pytest.raises(InvalidOptionError):
            LichessOpeningOptions.new().with_ratings([1700])


class TestUserStatusOptions:
    def test_aliases(self):
        options = UserStatusOptions.new().with_signal(True).with_game_ids(False)
        assert options.to_pairs() == [("withSignal", "true"), ("withGameIds", "false")]
