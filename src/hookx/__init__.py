"""hookx - run Git hooks declared next to your project's tasks."""

__version__ = "0.1.0"
