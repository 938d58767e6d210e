"""Classic algorithms and data structures: arrays, sequences, graphs, trees, heaps, tries and caches."""

__version__ = "0.1.0"