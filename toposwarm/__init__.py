"""Contact-event recording and random velocity commands for a simulated robot swarm."""

__version__ = "0.1.0"
__all__ = ["contact", "velocity"]