"""Core logic of a board imaging utility: easing curves, loading indicator state, persisted settings, update checks and screen navigation."""

__version__ = "0.0.16"

__all__ = ["circular", "easing", "linear", "pages", "settings", "sizes", "updater"]