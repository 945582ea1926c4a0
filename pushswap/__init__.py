"""Sort integers on two stacks with a limited set of instructions."""

__version__ = "1.0.0"