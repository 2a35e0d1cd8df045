from .main import app, main  # noqa: F401

__all__ = ["app", "main"]
