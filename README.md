# mnistlab

A small, dependency-free toolkit for experimenting with fully connected
neural networks on MNIST handwritten digits stored as CSV.

Each CSV row holds a label followed by 784 pixel values in the range
0–255. Pixels are divided by 255 on load, so they lie in `[0, 1]`, and a
row with any other number of pixels is rejected with a `ValueError`. A
trailing comma at the end of a row is tolerated.

## What is inside

- `mnistlab.dataset` — `load_dataset(path)` reads a CSV file into a
  `Dataset`; `parse_line(line)` parses a single row into
  `(label, pixels)`. A `Dataset` has a length, iterates over
  `(label, pixels)` pairs, and offers `label(index)` and `sample(index)`,
  which raise `IndexError` for an index out of range.
- `mnistlab.neuron`, `mnistlab.layer`, `mnistlab.network` — a plain
  multilayer perceptron: ReLU hidden layers, a linear output layer,
  softmax with cross-entropy loss, trained by per-sample gradient descent.
  Weights and biases start uniformly in `[-1, 1]`. Without an explicit
  `random.Random`, every neuron draws from one shared generator with a
  fixed seed, so runs are repeatable.
- `mnistlab.editor` — `ArchitectureEditor`: add layers, select a layer
  by point, add neurons to the selected layer, and get the on-screen
  layout (`layer_rect`, `neuron_positions`, `connections`,
  `count_label_position`) and the network sizes (`network_sizes()`, which
  puts the 784-wide input layer in front).
- `mnistlab.input_display` — `InputDisplay`, a 28×28 grid of grey cells
  showing one sample, dark on light.
- `mnistlab.button` — `Button`, a rectangle with a centred label and a
  `contains(x, y)` hit test.
- `mnistlab.app` — `SimulationApp`, which ties the editor, the input
  view, the datasets and the network together behind five buttons
  (Add Layer, Add Neuron, Build, Train, Test), and the `mnistlab` command.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
import random

from mnistlab.dataset import load_dataset
from mnistlab.network import Network

train = load_dataset("mnist_train.csv")
test = load_dataset("mnist_test.csv")

net = Network([784, 32, 10], 0.01, random.Random(0))
losses = net.train(train, 5)   # mean loss per epoch, also printed
accuracy = net.test(test)      # fraction correct, also printed
print(f"accuracy: {accuracy:.2%}")
```

The first entry of the layer sizes is the input width (784 for MNIST) and
the last is the number of classes. `Network.forward` returns the softmax
probabilities for one sample, and `Network.compute_loss` gives the
cross-entropy loss of such an output against a label; a label outside the
output range raises `ValueError`.

## Running a training session

```
mnistlab mnist_train.csv mnist_test.csv --layers 32 10 --learning-rate 0.01 --epochs 5
```

The command loads both files, prints their sample counts, builds a network
with the given layers after the 784-wide input layer, trains it (printing
the mean loss after every epoch) and tests it (printing the accuracy).
`--layers` defaults to a single layer of 10, `--learning-rate` to 0.01 and
`--epochs` to 50. The last layer should have as many neurons as there are
classes. On a read or data error it prints `Error: ...` to standard error
and exits with status 1. `python -m mnistlab.app` runs the same command.

## Drawing the interface

`SimulationApp` renders onto any object you pass in that provides
`is_open`, `clear(color)`, `rectangle(...)`, `circle(...)`, `line(...)`,
`text(...)` and `present()`; colours are `(r, g, b, a)` tuples. Feed mouse
clicks to `SimulationApp.handle_click(x, y)`: a click on a button runs its
action, any other click selects the layer under it or clears the
selection. While training, the current sample is shown and the interface
is redrawn every 100 samples, and training stops early once the canvas's
`is_open` becomes false.

## What it does not do

The package opens no window and talks to no graphics library. The
`mnistlab` command runs without a display, building the layers given on
the command line; to click through the interface you must supply a canvas
that draws to a screen of your choosing. Trained networks are not saved
to disk.