"""habitgrid - habit tracking with contribution grids and streaks."""

__version__ = "1.0.0"
