"""Tusk Launcher - a small always-on-top application launcher."""

__app_name__ = "Tusk Launcher"
__version__ = "1.0.0"
