import random

import pytest

from mnistlab.layer import Layer


def make_layer(num_neurons=3, input_size=4, use_relu=True, seed=0):
    return Layer(num_neurons, input_size, use_relu, random.Random(seed))


def test_construction_sizes():
    layer = make_layer(5, 7)
    assert len(layer) == 5
    assert all(neuron.num_inputs == 7 for neuron in layer.neurons)


def test_use_relu_propagates_to_neurons():
    layer = make_layer(use_relu=False)
    assert all(not neuron.use_relu for neuron in layer.neurons)


def test_add_neuron_keeps_settings():
    layer = make_layer(2, 6, use_relu=False)
    layer.add_neuron()
    assert len(layer) == 3
    assert layer.neurons[-1].num_inputs == 6
    assert layer.neurons[-1].use_relu is False


def test_forward_returns_one_output_per_neuron():
    layer = make_layer(3, 4)
    outputs = layer.forward([0.1, 0.2, 0.3, 0.4])
    assert len(outputs) == 3
    assert outputs == layer.outputs


def test_forward_rejects_wrong_size():
    layer = make_layer(3, 4)
    with pytest.raises(ValueError):
        layer.forward([1.0, 2.0])


def test_weights_rows_match_neurons():
    layer = make_layer(3, 4)
    assert layer.weights == [n.weights for n in layer.neurons]


def test_output_layer_gradients_copy_incoming():
    layer = make_layer(3, 2, use_relu=False)
    layer.compute_gradients([0.1, -0.4, 0.3], [], True)
    assert layer.gradients == [0.1, -0.4, 0.3]


def test_output_layer_gradient_count_checked():
    layer = make_layer(3, 2, use_relu=False)
    with pytest.raises(ValueError):
        layer.compute_gradients([0.1], [], True)


def test_hidden_gradients_masked_by_activation():
    layer = make_layer(2, 1)
    layer.neurons[0].weights = [1.0]
    layer.neurons[0].bias = 0.0
    layer.neurons[1].weights = [-1.0]
    layer.neurons[1].bias = 0.0
    layer.forward([2.0])
    layer.compute_gradients([0.5], [[1.0, 1.0]], False)
    assert layer.gradients[0] == pytest.approx(0.5)
    assert layer.gradients[1] == 0.0


def test_hidden_gradients_zero_without_next_neurons():
    layer = make_layer(2, 1)
    layer.neurons[0].weights = [1.0]
    layer.neurons[0].bias = 1.0
    layer.forward([1.0])
    layer.compute_gradients([], [], False)
    assert layer.gradients == [0.0, 0.0]


def test_hidden_gradient_weight_mismatch_rejected():
    layer = make_layer(2, 1)
    with pytest.raises(ValueError):
        layer.compute_gradients([0.5, 0.2], [[1.0, 1.0]], False)


def test_update_weights_with_zero_gradient_is_noop():
    layer = make_layer(3, 2)
    layer.forward([1.0, 1.0])
    before = layer.weights
    layer.compute_gradients([0.0, 0.0, 0.0], [], True)
    layer.update_weights(0.5)
    assert layer.weights == before


def test_update_weights_changes_every_neuron():
    layer = make_layer(3, 2, use_relu=False)
    layer.forward([1.0, 1.0])
    before = layer.weights
    layer.compute_gradients([1.0, 1.0, 1.0], [], True)
    layer.update_weights(0.1)
    after = layer.weights
    assert all(a != b for a, b in zip(after, before))