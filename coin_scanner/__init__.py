"""Core package for the coin scanner application."""

__all__ = [
    "config",
    "errors",
    "models",
    "api_client",
    "state_manager",
    "debounce",
    "controller",
    "cli",
]
