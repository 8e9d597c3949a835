"""
Save a snapshot of the current path-finder settings to a JSON file.

Example:
    python setting/save_vars.py --tag test_run --include-stats
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


def default_settings(include_stats: bool = False) -> Dict[str, Any]:
    from rxn_path_core import config

    data: Dict[str, Any] = {
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "paths": {
            "reactions_file": str(config.reactions_file),
            "queries_file": str(config.queries_file),
        },
        "limits": {
            "max_compounds": config.max_compounds,
            "max_reactions": config.max_reactions,
        },
        "search": {
            "unknown_label": config.unknown_label,
            "default_start": config.default_start,
            "default_end": config.default_end,
        },
        "layout": {
            "width": config.layout_width,
            "height": config.layout_height,
            "label_offset": config.layout_label_offset,
            "node_radius": config.node_radius,
        },
    }

    if include_stats:
        from rxn_path_core import build_graph
        from rxn_path_core.data_loading import load_or_default, load_queries

        try:
            graph, catalog = build_graph(load_or_default(config.reactions_file))
            num_queries = len(load_queries(config.queries_file)) if config.queries_file.exists() else 0
            data["stats"] = {
                "num_compounds": graph.num_compounds,
                "num_reactions": len(catalog),
                "num_edges": graph.num_edges,
                "num_queries": num_queries,
            }
        except Exception as e:  # pragma: no cover
            data["stats_error"] = f"{type(e).__name__}: {e}"
    return data


def main():
    parser = argparse.ArgumentParser(description="Save path-finder settings.")
    parser.add_argument("--tag", type=str, default="", help="Optional tag to include in filename.")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output JSON file. Default: logs/run_settings_<tag>_<timestamp>.json",
    )
    parser.add_argument(
        "--include-stats",
        action="store_true",
        help="Also load data to record compound/reaction/query counts.",
    )
    parser.add_argument("--note", type=str, default="", help="Free-form note to store alongside settings.")
    args = parser.parse_args()

    payload = default_settings(include_stats=args.include_stats)
    if args.note:
        payload["note"] = args.note

    ts = datetime.now().strftime("%m%d%H%M")
    tag_part = args.tag.strip().replace(" ", "_")
    fname = f"run_settings_{tag_part + '_' if tag_part else ''}{ts}.json"
    out_path = args.output or Path("logs") / fname
    out_path.parent.mkdir(parents=True, exist_ok=True)

    with out_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    print(f"Saved settings to {out_path}")


if __name__ == "__main__":
    main()
