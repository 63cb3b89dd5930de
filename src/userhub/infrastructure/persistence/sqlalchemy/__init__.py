"""SQLAlchemy (async) persistence adapter."""
