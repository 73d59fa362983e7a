# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from lifedash import config


def make_engine(url: str):
    if url.startswith("sqlite"):
        # ✅ SQLite: share one connection across FastAPI's worker threads
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    return create_engine(
        url,
        pool_size=10,          # Keep 10 connections open
        max_overflow=20,       # Allow 20 extra if under load
        pool_recycle=1800,     # Recycle every 30 mins
        pool_pre_ping=True     # Validate before using connection
    )


def make_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ✅ Engine + session factory for the configured database
engine = make_engine(config.DATABASE_URL)
SessionLocal = make_session_factory(engine)

# ✅ Base model
Base = declarative_base()
