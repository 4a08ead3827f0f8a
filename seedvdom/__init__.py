"""A virtual DOM model: tags, events, CSS properties, attributes, styles, nodes, listeners and element-building shortcuts."""

__version__ = "0.1.0"