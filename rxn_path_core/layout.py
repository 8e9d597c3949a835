"""Rendering-agnostic geometry for drawing a conversion path as a horizontal chain."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from rxn_path_repr import ConversionPath

from . import config


@dataclass
class ChainLayout:
    """Node centres (n, 2) and edge-label anchors (n - 1, 2) for one path."""
    labels: List[str]
    edge_labels: List[str]
    nodes: np.ndarray
    edge_anchors: np.ndarray

    def __len__(self) -> int:
        return len(self.labels)


def chain_layout(
    path: ConversionPath,
    width: float = config.layout_width,
    height: float = config.layout_height,
    x0: float = 0.0,
    y0: float = 0.0,
    label_offset: float = config.layout_label_offset,
) -> ChainLayout:
    """
    Evenly spaced nodes on one horizontal line through the middle of the box.

    Node i sits at x0 + spacing * (i + 1) with spacing = width / (n + 1).
    Each edge label is anchored at its segment midpoint, moved up by
    `label_offset` (screen coordinates, y grows downwards).
    """
    n = len(path.compounds)
    spacing = width / (n + 1)
    xs = x0 + spacing * np.arange(1, n + 1, dtype=float)
    ys = np.full(n, y0 + height / 2.0)
    nodes = np.column_stack([xs, ys])
    if n > 1:
        mids = (nodes[:-1] + nodes[1:]) / 2.0
        mids[:, 1] -= label_offset
    else:
        mids = np.zeros((0, 2))
    return ChainLayout(
        labels=list(path.compounds),
        edge_labels=path.labels,
        nodes=nodes,
        edge_anchors=mids,
    )
