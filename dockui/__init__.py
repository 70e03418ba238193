"""Input handling for dockable panels, sliders, scrollbars and piece-list text editing."""

__version__ = "0.1.0"
__all__ = ["core", "scrollbars", "stringlist", "sliders", "panels", "text"]