"""In-memory task list with a reactive console view."""

__version__ = "0.1.0"
