"""
Tests for Sequential Pipeline and Builder
=========================================

Integration tests covering:
  • Sequential forward / ordering / shape failures
  • Builder width derivation and misuse
  • The 3 → 5 → 2 end-to-end scenario
  • Building from a config mapping
"""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from feedforward.core.activations import ReLU, Sigmoid, Softmax
from feedforward.core.layer import DenseLayer, InputLayer, LayerKind, LayerSpec, OutputLayer
from feedforward.exceptions import ConfigError, ConstructionError, ShapeMismatchError
from feedforward.network.builder import SequentialBuilder, build_from_config
from feedforward.network.sequential import Sequential


def _example_net(seed: int | None = 42) -> Sequential:
    return (
        SequentialBuilder(seed=seed)
        .add_input(3, Sigmoid())
        .add_dense(5, ReLU())
        .add_output(2, Softmax())
        .build()
    )


# ────────────────────────────────────────────────────────────────────
# Sequential
# ────────────────────────────────────────────────────────────────────
class TestSequential:
    def test_forward_threads_layers_in_order(self):
        l0 = InputLayer(3, Sigmoid())
        l1 = DenseLayer(3, 4, ReLU(), seed=0)
        l2 = OutputLayer(4, 2, Softmax(), seed=1)
        net = Sequential(l0, l1, l2)
        x = np.array([0.5, 0.2, 0.1])
        expected = l2.forward(l1.forward(l0.forward(x)))
        np.testing.assert_array_equal(net.forward(x), expected)

    def test_width_mismatch_fails_at_offending_layer(self):
        net = Sequential(
            InputLayer(3, ReLU()),
            DenseLayer(4, 2, ReLU(), seed=0),
        )
        with pytest.raises(ShapeMismatchError) as exc_info:
            net.forward([0.1, 0.2, 0.3])
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3
        assert "DenseLayer(4, 2" in exc_info.value.where

    def test_input_width_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            _example_net().forward([0.5, 0.2])

    def test_predict_alias(self):
        net = _example_net()
        x = [0.5, 0.2, 0.1]
        np.testing.assert_array_equal(net.predict(x), net.forward(x))

    def test_layers_immutable(self):
        net = _example_net()
        assert isinstance(net.layers, tuple)
        with pytest.raises(AttributeError):
            net.layers.append(InputLayer(1, ReLU()))

    def test_sizes_and_len(self):
        net = _example_net()
        assert len(net) == 3
        assert net.input_size == 3
        assert net.output_size == 2
        assert [l.kind for l in net] == [LayerKind.INPUT, LayerKind.DENSE, LayerKind.OUTPUT]

    def test_empty_sequential(self):
        net = Sequential()
        assert net.input_size is None and net.output_size is None
        np.testing.assert_array_equal(net.forward([1.0, 2.0]), [1.0, 2.0])

    def test_count_params(self):
        # dense 3→5: 15 + 5, output 5→2: 10 + 2
        assert _example_net().count_params() == 20 + 12

    def test_summary_string(self):
        s = _example_net().summary()
        assert "InputLayer" in s and "DenseLayer" in s and "OutputLayer" in s
        assert "Total params: 32" in s

    def test_repr(self):
        r = repr(_example_net())
        assert r.startswith("Sequential(")
        assert "Softmax" in r


# ────────────────────────────────────────────────────────────────────
# End-to-end scenario
# ────────────────────────────────────────────────────────────────────
class TestEndToEnd:
    def test_output_is_probability_vector(self):
        y = _example_net().forward([0.5, 0.2, 0.1])
        assert y.shape == (2,)
        assert np.all(y >= 0.0) and np.all(y <= 1.0)
        np.testing.assert_allclose(y.sum(), 1.0, atol=1e-6)

    def test_repeated_forward_identical(self):
        net = _example_net(seed=None)
        x = [0.5, 0.2, 0.1]
        first = net.forward(x)
        for _ in range(5):
            np.testing.assert_array_equal(net.forward(x), first)

    def test_same_seed_same_output(self):
        x = [0.5, 0.2, 0.1]
        np.testing.assert_array_equal(_example_net(7).forward(x), _example_net(7).forward(x))

    def test_concurrent_forward(self):
        net = _example_net()
        rng = np.random.default_rng(0)
        inputs = [rng.standard_normal(3) for _ in range(32)]
        expected = [net.forward(x) for x in inputs]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(net.forward, inputs))
        for got, want in zip(results, expected):
            np.testing.assert_array_equal(got, want)


# ────────────────────────────────────────────────────────────────────
# Builder
# ────────────────────────────────────────────────────────────────────
class TestSequentialBuilder:
    def test_width_derivation(self):
        net = _example_net()
        dense, out = net.layers[1], net.layers[2]
        assert dense.W.shape == (5, 3)
        assert out.W.shape == (2, 5)
        for prev, nxt in zip(net.layers, net.layers[1:]):
            assert prev.output_size() == nxt.input_size

    def test_chaining_returns_builder(self):
        b = SequentialBuilder()
        assert b.add_input(2, ReLU()) is b
        assert len(b) == 1

    def test_activation_names(self):
        net = SequentialBuilder(seed=0).add_input(2, "relu").add_output(3, "softmax").build()
        assert isinstance(net.layers[1].activation, Softmax)

    def test_dense_first_rejected(self):
        with pytest.raises(ConstructionError, match="input layer"):
            SequentialBuilder().add_dense(5, ReLU())

    def test_output_first_rejected(self):
        with pytest.raises(ConstructionError):
            SequentialBuilder().add_output(2, Softmax())

    def test_input_not_first_rejected(self):
        b = SequentialBuilder().add_input(3, Sigmoid()).add_dense(5, ReLU())
        with pytest.raises(ConstructionError):
            b.add_input(5, ReLU())

    def test_nothing_after_output(self):
        b = SequentialBuilder().add_input(3, Sigmoid()).add_output(2, Softmax())
        with pytest.raises(ConstructionError):
            b.add_dense(4, ReLU())

    def test_build_empty_rejected(self):
        with pytest.raises(ConstructionError):
            SequentialBuilder().build()

    def test_builder_consumed(self):
        b = SequentialBuilder().add_input(3, Sigmoid())
        b.build()
        with pytest.raises(ConstructionError):
            b.build()
        with pytest.raises(ConstructionError):
            b.add_dense(2, ReLU())

    def test_failed_add_leaves_builder_usable(self):
        b = SequentialBuilder().add_input(3, Sigmoid())
        with pytest.raises(ConstructionError):
            b.add_dense(0, ReLU())
        net = b.add_dense(2, ReLU()).build()
        assert net.output_size == 2

    def test_add_spec_dispatch(self):
        net = (
            SequentialBuilder(seed=0)
            .add(LayerSpec(LayerKind.INPUT, 3, Sigmoid()))
            .add(LayerSpec(LayerKind.DENSE, 5, ReLU()))
            .add(LayerSpec(LayerKind.OUTPUT, 2, Softmax()))
            .build()
        )
        assert [type(l) for l in net] == [InputLayer, DenseLayer, OutputLayer]

    def test_specs_round_trip(self):
        net = _example_net()
        rebuilt = SequentialBuilder(seed=42)
        for layer in net:
            rebuilt.add(layer.spec)
        rebuilt_net = rebuilt.build()
        x = [0.5, 0.2, 0.1]
        np.testing.assert_array_equal(rebuilt_net.forward(x), net.forward(x))

    def test_weight_init_by_name(self):
        net = SequentialBuilder(seed=0, weight_init="he").add_input(4, ReLU()).add_dense(3, ReLU()).build()
        assert net.layers[1].W.shape == (3, 4)

    def test_unknown_weight_init(self):
        with pytest.raises(ConfigError):
            SequentialBuilder(weight_init="orthogonal")


# ────────────────────────────────────────────────────────────────────
# build_from_config
# ────────────────────────────────────────────────────────────────────
class TestBuildFromConfig:
    CFG = {
        "seed": 42,
        "layers": [
            {"type": "input", "units": 3, "activation": "sigmoid"},
            {"type": "dense", "units": 5, "activation": "relu"},
            {"type": "output", "units": 2, "activation": "softmax"},
        ],
    }

    def test_matches_builder(self):
        x = [0.5, 0.2, 0.1]
        np.testing.assert_array_equal(build_from_config(self.CFG).forward(x), _example_net(42).forward(x))

    def test_dense_first_in_config(self):
        cfg = {"layers": [{"type": "dense", "units": 5, "activation": "relu"}]}
        with pytest.raises(ConstructionError):
            build_from_config(cfg)

    def test_missing_layers(self):
        with pytest.raises(ConfigError):
            build_from_config({"seed": 1})

    def test_bad_seed(self):
        with pytest.raises(ConfigError):
            build_from_config({**self.CFG, "seed": "abc"})
