"""Unit tests for the benchmark harness and charts."""

import io
import json

import matplotlib
matplotlib.use("Agg")

import pytest
from magicsquares.benchmark import Benchmark, Visualizer, run_benchmark
from magicsquares.strategies import ALL_STRATEGIES, DEFAULT, SIAMESE, get_strategy


@pytest.fixture(scope="module")
def benchmark():
    bench = Benchmark(max_order=3)
    bench.run(show_progress=False)
    return bench


class TestBenchmark:
    """Tests for running trials and writing the table."""

    def test_all_trials_recorded(self, benchmark):
        assert len(benchmark.results) == len(ALL_STRATEGIES) * 3

    def test_strategy_major_order(self, benchmark):
        keys = [(r.strategy, r.order) for r in benchmark.results]
        expected = [(s.name, n) for s in ALL_STRATEGIES for n in (1, 2, 3)]
        assert keys == expected

    def test_statuses(self, benchmark):
        for r in benchmark.results:
            if r.order == 2:
                assert r.status == "unsatisfiable"
                assert not r.solved
            else:
                assert r.solved
            assert r.elapsed_ms >= 0

    def test_table_format(self, benchmark):
        sink = io.StringIO()
        benchmark.write_table(sink)
        lines = sink.getvalue().splitlines()

        assert lines[0] == "Strategy\tn=1\tn=2\tn=3"
        assert len(lines) == 1 + len(ALL_STRATEGIES)
        for line, strategy in zip(lines[1:], ALL_STRATEGIES):
            fields = line.split("\t")
            assert fields[0] == strategy.name
            assert len(fields) == 4
            assert all(float(v) >= 0 for v in fields[1:])

    def test_summary(self, benchmark):
        summary = benchmark.get_summary()
        assert summary["time_unit"] == "ms"
        siamese = summary["results_by_strategy"]["siamese"]
        assert siamese["solved"] == [1, 3]
        assert siamese["unsatisfiable"] == [2]
        assert siamese["timed_out"] == []

    def test_save_results(self, benchmark, tmp_path):
        benchmark.save_results(str(tmp_path))
        with open(tmp_path / "benchmark_results.json") as f:
            results = json.load(f)
        assert len(results) == len(benchmark.results)
        assert results[0]["strategy"] == "default"
        assert (tmp_path / "benchmark_summary.json").exists()

    def test_invalid_max_order(self):
        with pytest.raises(ValueError):
            Benchmark(max_order=0)

    def test_time_limit_recorded(self):
        bench = Benchmark(max_order=4, strategies=[DEFAULT], time_limit=0.0)
        results = bench.run(show_progress=False)
        assert results[-1].order == 4
        assert results[-1].status == "timeout"


class TestRunBenchmark:
    """Tests for the sink-based entry point."""

    def test_writes_to_sink(self):
        sink = io.StringIO()
        bench = run_benchmark(2, sink, strategies=[DEFAULT, SIAMESE])
        lines = sink.getvalue().splitlines()
        assert lines[0] == "Strategy\tn=1\tn=2"
        assert [line.split("\t")[0] for line in lines[1:]] == ["default", "siamese"]
        assert len(bench.results) == 4

    def test_sink_failure_propagates(self):
        class BrokenSink(io.StringIO):
            def write(self, s):
                raise OSError("disk full")

        with pytest.raises(OSError):
            run_benchmark(1, BrokenSink(), strategies=[get_strategy("random/random")])


class TestVisualizer:
    """Tests for chart generation."""

    def test_generate_all(self, benchmark, tmp_path):
        visualizer = Visualizer(benchmark.results, str(tmp_path))
        charts = visualizer.generate_all()
        assert len(charts) == 2
        for chart in charts:
            assert (tmp_path / chart.split("/")[-1]).exists()

    def test_summary_table(self, benchmark, tmp_path):
        visualizer = Visualizer(benchmark.results, str(tmp_path))
        path = visualizer.generate_summary_table()
        with open(path) as f:
            content = f.read()
        assert "| Strategy | n=1 | n=2 | n=3 | Total |" in content
        assert "(unsatisfiable)" in content
        assert content.count("\n| ") == len(ALL_STRATEGIES) + 1
