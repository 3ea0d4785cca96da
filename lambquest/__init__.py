"""Frame-by-frame model of a small top-down arcade game: a lamb, a bat, a cloak and coins."""

__version__ = "0.1.0"