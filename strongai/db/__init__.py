"""Database package: engine, session factory, base."""

from strongai.db.session import build_engine, build_session_maker

__all__ = ["build_engine", "build_session_maker"]
