"""Default paths and limits."""
from pathlib import Path

from rxn_path_repr.path import UNKNOWN_LABEL

root = Path(__file__).resolve().parents[1]
data_root = root / "data"
reactions_file = data_root / "reactions.txt"
queries_file = data_root / "queries.yaml"

# Capacity bounds; None means grow without limit.
# Overflow raises CapacityExceeded instead of dropping data.
max_compounds = 100
max_reactions = 100

# Label used for a path step with no catalog entry
unknown_label = UNKNOWN_LABEL

# Default query (matches the bundled methane oxidation chain)
default_start = "CH4"
default_end = "CO2"

# Chain diagram geometry
layout_width = 900.0
layout_height = 210.0
layout_label_offset = 15.0
node_radius = 40.0
