"""Small fully connected neural networks for MNIST digits, with an architecture editor and training session."""

__version__ = "0.1.0"