import pytest

from mnistlab.editor import (
    LAYER_HEIGHT,
    LAYER_SPACING,
    LAYER_WIDTH,
    LAYER_X_START,
    LAYER_Y,
    NEURON_PADDING,
    NEURON_RADIUS,
    ArchitectureEditor,
)


def build(*sizes):
    editor = ArchitectureEditor()
    for size in sizes:
        editor.add_layer()
        for _ in range(size):
            editor.add_neuron()
    return editor


def test_add_layer_selects_new_layer():
    editor = ArchitectureEditor()
    assert editor.add_layer() == 0
    assert editor.add_layer() == 1
    assert editor.selected_layer == 1
    assert editor.layer_sizes == [0, 0]


def test_add_neuron_without_selection_raises():
    editor = ArchitectureEditor()
    with pytest.raises(RuntimeError):
        editor.add_neuron()


def test_add_neuron_grows_selected_layer():
    editor = build(3, 2)
    assert editor.layer_sizes == [3, 2]
    editor.select_layer(LAYER_X_START + LAYER_WIDTH / 2, LAYER_Y + LAYER_HEIGHT / 2)
    assert editor.add_neuron() == 4
    assert editor.layer_sizes == [4, 2]


def test_select_layer_hit_and_miss():
    editor = build(1, 1)
    second_x = LAYER_X_START + LAYER_SPACING + LAYER_WIDTH / 2
    assert editor.select_layer(second_x, LAYER_Y + 10) == 1
    assert editor.select_layer(0.0, 0.0) is None
    assert editor.selected_layer is None
    with pytest.raises(RuntimeError):
        editor.add_neuron()


def test_layer_rect_and_label_position():
    editor = build(0, 0)
    assert editor.layer_rect(0) == (LAYER_X_START, LAYER_Y, LAYER_WIDTH, LAYER_HEIGHT)
    x, _, _, _ = editor.layer_rect(1)
    assert x - LAYER_X_START == LAYER_SPACING
    label_x, label_y = editor.count_label_position(1)
    assert label_x == x + LAYER_WIDTH / 2
    assert label_y > LAYER_Y + LAYER_HEIGHT
    with pytest.raises(IndexError):
        editor.layer_rect(2)


def test_empty_layer_has_no_neurons():
    assert build(0).neuron_positions(0) == []


def test_single_neuron_centred_in_layer():
    editor = build(1)
    [(x, y)] = editor.neuron_positions(0)
    rx, ry, rw, rh = editor.layer_rect(0)
    assert x + NEURON_RADIUS == rx + rw / 2
    assert y + NEURON_RADIUS == ry + rh / 2


def test_multiple_neurons_evenly_spaced():
    editor = build(5)
    positions = editor.neuron_positions(0)
    ys = [y for _, y in positions]
    assert len(positions) == 5
    assert len({x for x, _ in positions}) == 1
    assert ys[0] == LAYER_Y + NEURON_PADDING
    gaps = [b - a for a, b in zip(ys, ys[1:])]
    assert all(gap == pytest.approx(gaps[0]) for gap in gaps)
    assert ys[-1] - ys[0] == pytest.approx(LAYER_HEIGHT - 2 * NEURON_PADDING - 2 * NEURON_RADIUS)


def test_connections_join_adjacent_layers():
    editor = build(2, 3, 1)
    groups = editor.connections()
    assert [len(group) for group in groups] == [6, 3]
    (start, end) = groups[0][0]
    sx, sy = editor.neuron_positions(0)[0]
    tx, ty = editor.neuron_positions(1)[0]
    assert start == (sx + 2 * NEURON_RADIUS, sy + NEURON_RADIUS)
    assert end == (tx, ty + NEURON_RADIUS)
    assert groups[0][1][1][1] == editor.neuron_positions(1)[1][1] + NEURON_RADIUS


def test_single_layer_has_no_connections():
    assert build(4).connections() == []


def test_network_sizes_prepends_input_layer():
    assert build(3, 2).network_sizes() == [784, 3, 2]


def test_network_sizes_without_layers_raises():
    with pytest.raises(ValueError):
        ArchitectureEditor().network_sizes()