"""In-memory pixel display: windows, event hooks, images, colour names and XPM loading."""

__version__ = "0.1.0"
__all__ = ["colornames", "text", "color", "image", "xpm", "display"]