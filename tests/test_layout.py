"""Tests for chain diagram geometry and path values."""

import numpy as np
import pytest

from rxn_path_core import chain_layout
from rxn_path_repr import ConversionPath, PathStep


def _path(names, label="Oxidation"):
    steps = [PathStep(a, label, b) for a, b in zip(names, names[1:])]
    return ConversionPath(indices=list(range(len(names))), compounds=list(names), steps=steps)


class TestChainLayout:

    def test_even_spacing(self):
        layout = chain_layout(_path(["A", "B", "C"]), width=400, height=100, x0=50, y0=630)
        np.testing.assert_allclose(layout.nodes[:, 0], [150, 250, 350])
        np.testing.assert_allclose(layout.nodes[:, 1], [680, 680, 680])

    def test_label_anchors(self):
        layout = chain_layout(_path(["A", "B", "C"]), width=400, height=100, label_offset=15)
        np.testing.assert_allclose(layout.edge_anchors, [[150, 35], [250, 35]])
        assert layout.edge_labels == ["Oxidation", "Oxidation"]

    def test_single_node(self):
        layout = chain_layout(ConversionPath.single(3, "CH4"), width=300, height=80)
        assert len(layout) == 1
        np.testing.assert_allclose(layout.nodes, [[150, 40]])
        assert layout.edge_anchors.shape == (0, 2)


class TestConversionPath:

    def test_rejects_disconnected_steps(self):
        with pytest.raises(ValueError):
            ConversionPath(indices=[0, 1], compounds=["A", "B"], steps=[PathStep("A", "X", "C")])

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            ConversionPath(indices=[], compounds=[], steps=[])

    def test_rejects_wrong_step_count(self):
        with pytest.raises(ValueError):
            ConversionPath(indices=[0, 1], compounds=["A", "B"], steps=[])

    def test_dict_round_trip(self):
        path = _path(["A", "B", "C"])
        again = ConversionPath.from_list_of_dicts(path.to_list_of_dicts(), indices=path.indices)
        assert again == path
        assert again.start == "A" and again.end == "C"
