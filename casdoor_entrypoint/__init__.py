"""Generate Casdoor's app.conf from the environment and hand off to the server."""

__version__ = "0.1.0"
