"""Find one conversion path between two compounds and print it."""
import argparse
import sys

from rxn_path_core import config
from rxn_path_repr import CapacityExceeded, CompoundNotFound

from demo_utils import format_result, load_world, resolve_bound


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Reaction conversion path finder.")
    ap.add_argument("--reactions", default=None, help=f"Reactions file (default: {config.reactions_file}).")
    ap.add_argument("--start", default=config.default_start, help="Start compound name.")
    ap.add_argument("--end", default=config.default_end, help="Target compound name.")
    ap.add_argument("--json", action="store_true", help="Print the path as JSON.")
    ap.add_argument("--reachable", action="store_true", help="List every compound reachable from --start.")
    ap.add_argument("--max-compounds", type=int, default=None, help=f"Compound bound (default: {config.max_compounds}).")
    ap.add_argument("--max-reactions", type=int, default=None, help=f"Reaction bound (default: {config.max_reactions}).")
    ap.add_argument("--unbounded", action="store_true", help="Let the registry and catalog grow without limit.")
    args = ap.parse_args(argv)

    try:
        finder = load_world(
            args.reactions,
            max_compounds=resolve_bound(args.max_compounds, args.unbounded, config.max_compounds),
            max_reactions=resolve_bound(args.max_reactions, args.unbounded, config.max_reactions),
        )
    except CapacityExceeded as e:
        print(f"[run_path_demo] dataset rejected: {e}", file=sys.stderr)
        return 2

    print(f"[run_path_demo] compounds: {len(finder.registry)}, reactions: {len(finder.catalog)}, "
          f"edges: {finder.graph.num_edges}")

    if args.reachable:
        start = args.start.strip()
        reach = finder.reachable(start)
        if not reach:
            print(CompoundNotFound("start", start).message)
            return 1
        for name, hops in reach.items():
            print(f"{hops:3d}  {name}")
        return 0

    ok, text = format_result(finder, args.start, args.end, as_json=args.json)
    if not args.json:
        print("Conversion path")
    print(text, end="" if text.endswith("\n") else "\n")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
