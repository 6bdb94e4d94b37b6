"""A terminal falling-block puzzle game with wall kicks, a ghost piece, combos and a score log."""

__version__ = "0.1.0"