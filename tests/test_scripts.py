"""Tests for the command-line helpers."""

import csv
import importlib.util
from pathlib import Path

import pytest

from demo_utils import format_result, load_world, resolve_bound

ROOT = Path(__file__).resolve().parents[1]


def _load_script(name):
    spec = importlib.util.spec_from_file_location(name, ROOT / "scripts" / f"{name}.py")
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


class TestDemoUtils:

    def test_format_result_text(self):
        finder = load_world()
        ok, text = format_result(finder, "N2", "HNO3")
        assert ok
        assert text.splitlines() == [
            "N2 -> Haber Process -> NH3",
            "NH3 -> Ostwald Oxidation -> NO",
            "NO -> Oxidation -> NO2",
            "NO2 -> Absorption -> HNO3",
        ]

    def test_format_result_trivial(self):
        ok, text = format_result(load_world(), "CH4", "CH4")
        assert ok
        assert text == "CH4 (no reaction needed)\n"

    def test_format_result_failure(self):
        ok, text = format_result(load_world(), "CO2", "CH4")
        assert not ok
        assert text == "No conversion path found."

    def test_resolve_bound(self):
        assert resolve_bound(None, False, 100) == 100
        assert resolve_bound(7, False, 100) == 7
        assert resolve_bound(7, True, 100) is None


class TestBatchPaths:

    def test_run_queries_and_csv(self, tmp_path):
        batch = _load_script("batch_paths")
        rxn = tmp_path / "r.txt"
        rxn.write_text("A -> X -> B\nB -> Y -> C\n", encoding="utf-8")
        queries = [
            {"name": "ok", "start": "A", "end": "C", "reactions": str(rxn)},
            {"name": "same", "start": "B", "end": "B", "reactions": str(rxn)},
            {"name": "none", "start": "C", "end": "A", "reactions": str(rxn)},
            {"name": "missing", "start": "Z", "end": "A", "reactions": str(rxn)},
        ]
        rows = batch.run_queries(queries)
        by_name = {r["name"]: r for r in rows}
        assert by_name["ok"]["steps"] == 2
        assert by_name["ok"]["path"] == "A -> X -> B | B -> Y -> C"
        assert by_name["same"]["path"] == "B"
        assert by_name["none"]["error"] == "path_not_found"
        assert by_name["missing"]["error"] == "compound_not_found:start:Z"

        summary = batch.summarize(rows)
        assert summary["found"] == 2
        assert summary["n_queries"] == 4

        out = tmp_path / "out.csv"
        batch._write_csv(out, rows, fieldnames=batch.FIELDNAMES)
        with out.open(encoding="utf-8") as f:
            read = list(csv.DictReader(f))
        assert [r["name"] for r in read] == ["ok", "same", "none", "missing"]

    def test_capacity_reported_per_query(self, tmp_path):
        batch = _load_script("batch_paths")
        rxn = tmp_path / "r.txt"
        rxn.write_text("A -> X -> B\nB -> Y -> C\n", encoding="utf-8")
        rows = batch.run_queries([{"name": "q", "start": "A", "end": "C", "reactions": str(rxn)}], max_compounds=2)
        assert rows[0]["found"] is False
        assert rows[0]["error"].startswith("capacity_exceeded")

    def test_missing_reactions_file_is_an_error_row(self, tmp_path):
        batch = _load_script("batch_paths")
        rxn = tmp_path / "r.txt"
        rxn.write_text("A -> X -> B\n", encoding="utf-8")
        typo = str(tmp_path / "reactoins.txt")
        rows = batch.run_queries([
            {"name": "bad", "start": "CH4", "end": "CO2", "reactions": typo},
            {"name": "bad_again", "start": "A", "end": "B", "reactions": typo},
            {"name": "good", "start": "A", "end": "B", "reactions": str(rxn)},
        ])
        assert rows[0]["found"] is False
        assert rows[0]["error"] == f"reactions_file_not_found: {typo}"
        assert rows[1]["error"] == rows[0]["error"]
        assert rows[2]["found"] is True

    def test_default_file_still_falls_back(self, tmp_path, monkeypatch):
        batch = _load_script("batch_paths")
        monkeypatch.setattr(batch.config, "reactions_file", tmp_path / "gone.txt")
        rows = batch.run_queries([{"name": "q", "start": "CH4", "end": "CO2", "reactions": None}])
        assert rows[0]["found"] is True
        assert rows[0]["steps"] == 4

    def test_error_detail_column(self, tmp_path):
        batch = _load_script("batch_paths")
        rxn = tmp_path / "r.txt"
        rxn.write_text("A -> X -> B\n", encoding="utf-8")
        rows = batch.run_queries([
            {"name": "none", "start": "B", "end": "A", "reactions": str(rxn)},
            {"name": "missing", "start": "A", "end": "Q", "reactions": str(rxn)},
        ])
        assert rows[0]["detail"] == "no conversion path from B to A"
        assert rows[1]["detail"] == "end compound not found: Q"
        assert "detail" in batch.FIELDNAMES

    def test_unbounded_lifts_capacity(self, tmp_path):
        batch = _load_script("batch_paths")
        rxn = tmp_path / "r.txt"
        rxn.write_text("A -> X -> B\nB -> Y -> C\n", encoding="utf-8")
        q = [{"name": "q", "start": "A", "end": "C", "reactions": str(rxn)}]
        assert batch.run_queries(q, max_compounds=2, unbounded=True)[0]["steps"] == 2
        args = batch._parse_args(["--unbounded"])
        assert args.unbounded is True


class TestLoadWorldBounds:

    def test_bounds_follow_config_at_call_time(self, monkeypatch):
        from rxn_path_core import config
        from rxn_path_repr import CapacityExceeded

        monkeypatch.setattr(config, "max_compounds", 2)
        with pytest.raises(CapacityExceeded):
            load_world()

    def test_explicit_none_is_unbounded(self, monkeypatch):
        from rxn_path_core import config

        monkeypatch.setattr(config, "max_compounds", 2)
        monkeypatch.setattr(config, "max_reactions", 1)
        finder = load_world(max_compounds=None, max_reactions=None)
        assert len(finder.registry) > 2


class TestRunPathDemo:

    def _demo(self):
        spec = importlib.util.spec_from_file_location("run_path_demo", ROOT / "run_path_demo.py")
        mod = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(mod)
        return mod

    def test_reachable_unknown_start(self, capsys):
        rc = self._demo().main(["--reachable", "--start", " Benzene "])
        assert rc == 1
        assert capsys.readouterr().out.splitlines()[-1] == "start compound not found: Benzene"

    def test_reachable_lists_hops(self, capsys):
        rc = self._demo().main(["--reachable", "--start", "CH4"])
        assert rc == 0
        out = capsys.readouterr().out
        assert "  0  CH4" in out
        assert "  4  CO2" in out
