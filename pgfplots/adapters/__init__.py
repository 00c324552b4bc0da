from .normalize import coordinates_from_xy, plot_from_xy

__all__ = ["coordinates_from_xy", "plot_from_xy"]
