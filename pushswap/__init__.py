"""Sort integers with two stacks and print the push, swap and rotate operations used."""

__version__ = "1.0.0"