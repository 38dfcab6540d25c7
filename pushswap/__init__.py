"""Two-stack sorting puzzle solver that lists the operations it uses."""

__version__ = "0.1.0"