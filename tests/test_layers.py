# ============================================================================
# Audio CNN Visualizer - Layer Partition Tests
# ============================================================================
# Purpose: Main/internal grouping by dotted layer names
# ============================================================================

from audio_cnn_viz.engine.layers import child_label, split_layers


class TestSplitLayers:
    """Test partitioning of the flat visualization mapping."""

    def test_empty_mapping(self):
        partition = split_layers({})
        assert partition.main == []
        assert partition.internals == {}

    def test_main_and_internal(self, make_layer):
        t1 = make_layer([[1.0]])
        t2 = make_layer([[2.0]])
        t3 = make_layer([[3.0]])

        partition = split_layers({"conv1": t1, "conv1.relu": t2, "conv2": t3})

        assert partition.main == [("conv1", t1), ("conv2", t3)]
        assert partition.internals == {"conv1": [("conv1.relu", t2)]}

    def test_main_keeps_encounter_order(self, make_layer):
        layer = make_layer([[1.0]])
        names = ["layer4", "conv1", "layer2", "layer1"]
        partition = split_layers({name: layer for name in names})
        assert [name for name, _ in partition.main] == names

    def test_internals_keep_append_order(self, make_layer):
        layer = make_layer([[1.0]])
        partition = split_layers({"a.z": layer, "a.b": layer, "a.m": layer})
        assert [name for name, _ in partition.internals["a"]] == ["a.z", "a.b", "a.m"]

    def test_parent_is_text_before_first_dot(self, make_layer):
        layer = make_layer([[1.0]])
        partition = split_layers({"layer1.0.conv1": layer})
        assert list(partition.internals) == ["layer1"]

    def test_empty_parent_is_dropped(self, make_layer):
        layer = make_layer([[1.0]])
        partition = split_layers({".relu": layer, "conv1": layer})
        assert partition.internals == {}
        assert [name for name, _ in partition.main] == ["conv1"]

    def test_unmatched_parent_is_kept(self, make_layer):
        layer = make_layer([[1.0]])
        partition = split_layers({"ghost.relu": layer})
        assert partition.main == []
        assert "ghost" in partition.internals


class TestSortedInternals:
    """Sorting is a display-time concern."""

    def test_sorted_by_full_name(self, make_layer):
        layer = make_layer([[1.0]])
        partition = split_layers({"a.z": layer, "a.b": layer, "a.m": layer})
        assert [name for name, _ in partition.sorted_internals("a")] == ["a.b", "a.m", "a.z"]
        # raw order untouched
        assert [name for name, _ in partition.internals["a"]] == ["a.z", "a.b", "a.m"]

    def test_missing_parent(self):
        assert split_layers({}).sorted_internals("conv1") == []

    def test_child_label(self):
        assert child_label("layer1.conv1", "layer1") == "conv1"
        assert child_label("layer1.0.bn", "layer1") == "0.bn"
        assert child_label("other", "layer1") == "other"
