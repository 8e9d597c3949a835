"""Draw a found conversion path as a chain diagram.

Usage example:
  python scripts/plot_conversion_path.py --start CH4 --end CO2 --out logs/paths/ch4_co2.png
  python scripts/plot_conversion_path.py --reactions data/reactions.txt --start C2H6 --end CO2
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Circle  # noqa: E402

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rxn_path_core import ChainLayout, chain_layout, config  # noqa: E402
from rxn_path_core.planner import message_for  # noqa: E402
from demo_utils import load_world  # noqa: E402


def draw_chain(layout: ChainLayout, out_path: Path, title: Optional[str] = None) -> None:
    width, height = config.layout_width, config.layout_height
    fig, ax = plt.subplots(figsize=(width / 100.0, height / 100.0 + 0.6))

    xs, ys = layout.nodes[:, 0], layout.nodes[:, 1]
    ax.plot(xs, ys, color="dimgray", linewidth=2.0, zorder=1)
    for (x, y), label in zip(layout.edge_anchors, layout.edge_labels):
        ax.text(x, y, label, ha="center", va="bottom", fontsize=8, color="darkblue")
    for (x, y), name in zip(layout.nodes, layout.labels):
        ax.add_patch(Circle((x, y), config.node_radius, color="skyblue", zorder=2))
        ax.text(x, y, name, ha="center", va="center", fontsize=9, color="darkblue", zorder=3)

    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)  # screen coordinates
    ax.set_aspect("equal")
    ax.axis("off")
    if title:
        ax.set_title(title)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def main() -> int:
    ap = argparse.ArgumentParser(description="Plot the conversion path between two compounds.")
    ap.add_argument("--reactions", default=None, help="Reactions file (default: data/reactions.txt).")
    ap.add_argument("--start", default=config.default_start)
    ap.add_argument("--end", default=config.default_end)
    ap.add_argument("--out", default=None, help="Output PNG (default: logs/paths/<start>_<end>.png).")
    args = ap.parse_args()

    finder = load_world(args.reactions)
    result, message = finder.query(args.start, args.end)
    if result is None or not result.found:
        print(message)
        return 1

    layout = chain_layout(result.path)
    out_path = Path(args.out) if args.out else Path("logs") / "paths" / f"{args.start}_{args.end}.png"
    draw_chain(layout, out_path, title="Conversion Graph")
    print(message_for(result), end="")
    print(f"Wrote plot to {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
