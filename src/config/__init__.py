"""Runtime configuration loaded once per process."""

from config.settings import Settings  # noqa: F401
