from .module import Module, Neuron, Layer, MLP

__all__ = ["Module", "Neuron", "Layer", "MLP"]
