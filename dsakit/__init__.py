"""Classic data structures and algorithms: linked lists, stacks, queues, expressions, arrays, sorting, heaps and trees."""

__version__ = "0.1.0"