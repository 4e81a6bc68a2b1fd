"""Invoice admin dashboard: form mutations and credentials login."""

__version__ = "1.0.0"
