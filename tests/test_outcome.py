"""Tests for win probability and single-trial resolution."""

import pytest

from src.simulation_engine.outcome import (
    OutcomeSampler,
    RandomSourceError,
    SeededRandomSource,
    win_probability,
)

from conftest import ScriptedRandomSource


class _BrokenSource:
    def uniform01(self):
        raise RuntimeError("entropy pool empty")


class _ValueSource:
    def __init__(self, value):
        self.value = value

    def uniform01(self):
        return self.value


# ── Win probability ──────────────────────────────────────────────────

class TestWinProbability:
    def test_even_match(self):
        assert win_probability(1000.0, 1000.0) == pytest.approx(0.5)

    def test_ratio_inside_bounds(self):
        assert win_probability(300.0, 700.0) == pytest.approx(0.3)

    def test_clamped_to_floor(self):
        assert win_probability(115.0, 1000.0) == pytest.approx(0.1)

    def test_clamped_to_ceiling(self):
        assert win_probability(1_000_000.0, 1.0) == pytest.approx(0.9)

    def test_both_zero_uses_floor(self):
        assert win_probability(0.0, 0.0) == pytest.approx(0.1)

    def test_zero_team_strength(self):
        assert win_probability(0.0, 500.0) == pytest.approx(0.1)

    def test_zero_opponent_strength(self):
        assert win_probability(500.0, 0.0) == pytest.approx(0.9)

    @pytest.mark.parametrize("team", [1.0, 50.0, 115.0, 999.0, 5000.0, 1e9])
    @pytest.mark.parametrize("opponent", [1.0, 1000.0, 7500.0, 1e6])
    def test_always_within_bounds(self, team, opponent):
        assert 0.1 <= win_probability(team, opponent) <= 0.9


# ── Seeded source ────────────────────────────────────────────────────

class TestSeededRandomSource:
    def test_same_seed_same_sequence(self):
        a = SeededRandomSource(7)
        b = SeededRandomSource(7)
        assert [a.uniform01() for _ in range(20)] == [b.uniform01() for _ in range(20)]

    def test_values_in_unit_interval(self):
        source = SeededRandomSource(1)
        for _ in range(1000):
            assert 0.0 <= source.uniform01() < 1.0


# ── Resolve ──────────────────────────────────────────────────────────

class TestResolve:
    def test_draw_below_probability_wins(self):
        sampler = OutcomeSampler(_ValueSource(0.29))
        assert sampler.resolve(300.0, 700.0) is True

    def test_draw_at_probability_loses(self):
        sampler = OutcomeSampler(_ValueSource(0.5))
        assert sampler.resolve(1000.0, 1000.0) is False

    def test_floor_still_allows_wins(self):
        sampler = OutcomeSampler(_ValueSource(0.05))
        assert sampler.resolve(0.0, 1e9) is True

    def test_ceiling_still_allows_losses(self):
        sampler = OutcomeSampler(_ValueSource(0.95))
        assert sampler.resolve(1e9, 1.0) is False

    def test_one_draw_per_trial(self):
        source = ScriptedRandomSource([0.2, 0.8])
        sampler = OutcomeSampler(source)
        assert sampler.resolve(500.0, 500.0) is True
        assert sampler.resolve(500.0, 500.0) is False
        assert source.calls == 2

    def test_source_failure_wrapped(self):
        sampler = OutcomeSampler(_BrokenSource())
        with pytest.raises(RandomSourceError) as exc_info:
            sampler.resolve(100.0, 100.0)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.parametrize("bad", [1.0, -0.1, 2.5, "0.3", None])
    def test_out_of_range_draw_rejected(self, bad):
        sampler = OutcomeSampler(_ValueSource(bad))
        with pytest.raises(RandomSourceError):
            sampler.resolve(100.0, 100.0)
