"""Classic data structures and algorithms: lists, queues, heaps, trees, sorting, graphs and maze solving."""

__version__ = "0.1.0"