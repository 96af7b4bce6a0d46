import pytest
from runa import bench
from runa.bench import lapse, lapse_limit, lapse_sequence
from runa.dna import DnaBlock
from runa.utils.resources import RESOURCES, ConfigError


BLOCKS = [(10, DnaBlock('A' * 10, 'A')), (20, DnaBlock('A' * 20, 'A')), (30, DnaBlock('A' * 30, 'A'))]


def fake_clock(monkeypatch, durations):
    ticks = iter([t for d in durations for t in (0.0, d)])
    monkeypatch.setattr(bench, 'perf_counter', lambda: next(ticks))


class TestLapse:
    def test_measures(self):
        assert lapse(lambda: sum(range(100))) >= 0

    def test_sequence(self, monkeypatch):
        fake_clock(monkeypatch, [0.1, 0.5, 2.0])
        seen = []
        timings = list(lapse_sequence(lambda block: None, BLOCKS, lambda size, s: seen.append(size)))
        assert timings == [(0.1, 10), (0.5, 20), (2.0, 30)]
        assert seen == [10, 20, 30]

    def test_calls_function_with_block(self):
        sizes = []
        list(lapse_sequence(lambda block: sizes.append(len(block)), BLOCKS))
        assert sizes == [10, 20, 30]


class TestLapseLimit:
    def test_stops_at_budget(self, monkeypatch):
        fake_clock(monkeypatch, [0.1, 0.5, 2.0])
        assert lapse_limit(lambda block: None, BLOCKS, budget=1.0) == 20

    def test_first_over_budget(self, monkeypatch):
        fake_clock(monkeypatch, [5.0])
        assert lapse_limit(lambda block: None, BLOCKS, budget=1.0) == 0

    def test_all_within_budget(self, monkeypatch):
        fake_clock(monkeypatch, [0.1, 0.1, 0.1])
        assert lapse_limit(lambda block: None, BLOCKS, budget=1.0) == 30

    def test_budget_from_environment(self, monkeypatch):
        monkeypatch.setenv('RUNA_BENCH_BUDGET', '0.3')
        fake_clock(monkeypatch, [0.1, 0.5])
        assert lapse_limit(lambda block: None, BLOCKS) == 10


class TestResources:
    def test_default_budget(self, monkeypatch):
        monkeypatch.delenv('RUNA_BENCH_BUDGET', raising=False)
        assert RESOURCES.bench_budget == 60.0

    def test_invalid_budget(self, monkeypatch):
        monkeypatch.setenv('RUNA_BENCH_BUDGET', 'soon')
        with pytest.raises(ConfigError, match="number"):
            RESOURCES.bench_budget

    def test_genome_data(self, monkeypatch, tmp_path):
        monkeypatch.setenv('GENOME_DATA', str(tmp_path))
        assert RESOURCES.genome_data == tmp_path

    def test_has_module(self):
        assert RESOURCES.has_module('numpy')
        assert not RESOURCES.has_module('runa_missing_module')
