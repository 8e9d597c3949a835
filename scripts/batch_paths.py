from __future__ import annotations

"""
Batch runner for named start/end queries.

Reads queries from a YAML file (see data/queries.yaml), answers each one
against its reactions file (or the default file) and writes one CSV row
per query plus a short summary.

Usage:
  python scripts/batch_paths.py --queries data/queries.yaml --out logs/paths/per_query.csv
"""

import argparse
import csv
import statistics
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

# Make repo imports work when running as a script.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rxn_path_core import ConversionPathFinder, config  # noqa: E402
from rxn_path_core.data_loading import load_or_default, load_queries, load_reactions  # noqa: E402
from rxn_path_repr import CapacityExceeded, CompoundNotFound  # noqa: E402

from demo_utils import resolve_bound  # noqa: E402

FIELDNAMES = ["name", "start", "end", "reactions", "found", "steps", "error", "detail", "path", "visited"]


def _write_csv(path: Path, rows: Sequence[Dict[str, Any]], *, fieldnames: Sequence[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(fieldnames))
        w.writeheader()
        for r in rows:
            w.writerow({k: r.get(k) for k in fieldnames})
    tmp_path.replace(path)


def _load_finder(key: str, explicit: bool, max_compounds, max_reactions) -> ConversionPathFinder:
    # a named reactions file must exist; only the default file falls back to the built-in chain
    reactions = load_reactions(key) if explicit else load_or_default(key)
    return ConversionPathFinder.from_reactions(reactions, max_compounds=max_compounds, max_reactions=max_reactions)


def run_queries(
    queries: Sequence[Dict[str, Optional[str]]],
    *,
    max_compounds: Optional[int] = None,
    max_reactions: Optional[int] = None,
    unbounded: bool = False,
) -> List[Dict[str, Any]]:
    max_compounds = resolve_bound(max_compounds, unbounded, config.max_compounds)
    max_reactions = resolve_bound(max_reactions, unbounded, config.max_reactions)
    finders: Dict[str, ConversionPathFinder] = {}
    failed: Dict[str, str] = {}
    rows: List[Dict[str, Any]] = []
    for q in queries:
        key = q.get("reactions") or str(config.reactions_file)
        row: Dict[str, Any] = {"name": q["name"], "start": q["start"], "end": q["end"], "reactions": key}
        if key not in finders and key not in failed:
            try:
                finders[key] = _load_finder(key, bool(q.get("reactions")), max_compounds, max_reactions)
            except FileNotFoundError:
                failed[key] = f"reactions_file_not_found: {key}"
            except CapacityExceeded as e:
                failed[key] = f"capacity_exceeded: {e}"
        if key in failed:
            row.update(found=False, steps=0, error=failed[key])
            rows.append(row)
            continue
        result = finders[key].find(q["start"], q["end"])
        row["found"] = bool(result.found)
        row["steps"] = result.steps
        row["visited"] = result.extra.get("visited")
        if result.found:
            row["path"] = " | ".join(s.to_line() for s in result.path.steps) or result.path.start
        else:
            if isinstance(result.error, CompoundNotFound):
                row["error"] = f"compound_not_found:{result.error.role}:{result.error.name}"
            else:
                row["error"] = "path_not_found"
            row["detail"] = result.error.message
        rows.append(row)
    return rows


def summarize(rows: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    found = [r for r in rows if r.get("found")]
    steps = [float(r.get("steps") or 0) for r in found]
    return {
        "n_queries": len(rows),
        "found": len(found),
        "success_rate": float(len(found) / max(1, len(rows))),
        "median_steps_found_only": float(statistics.median(steps)) if steps else None,
    }


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Answer named conversion-path queries from a YAML file.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("--queries", type=str, default=str(config.queries_file), help="YAML query file.")
    p.add_argument("--out", type=str, default="logs/paths/per_query.csv", help="Output CSV file.")
    p.add_argument("--max-compounds", type=int, default=None, help="Override the compound bound.")
    p.add_argument("--max-reactions", type=int, default=None, help="Override the reaction bound.")
    p.add_argument("--unbounded", action="store_true", help="Let the registry and catalog grow without limit.")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    queries = load_queries(args.queries)
    rows = run_queries(
        queries, max_compounds=args.max_compounds, max_reactions=args.max_reactions, unbounded=args.unbounded
    )
    out = Path(args.out)
    _write_csv(out, rows, fieldnames=FIELDNAMES)

    for r in rows:
        status = f"{r['steps']} steps" if r.get("found") else r.get("error")
        print(f"[batch_paths] {r['name']}: {r['start']} -> {r['end']}: {status}")
    s = summarize(rows)
    print(f"[batch_paths] found {s['found']}/{s['n_queries']}; wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
