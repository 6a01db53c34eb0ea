from .visualize import draw_metadata

__all__ = ["draw_metadata"]
