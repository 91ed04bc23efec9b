"""Fixed-timestep snake game loop."""

__version__ = "0.1.0"
