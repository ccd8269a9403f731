"""Sort integers with two stacks and a limited set of stack operations."""

__version__ = "0.1.0"