"""Solvers operating on placed entries; drawing belongs to the caller."""
from radarlayout.solvers.collision import ForceLayout, resolve_collisions

__all__ = ["ForceLayout", "resolve_collisions"]
