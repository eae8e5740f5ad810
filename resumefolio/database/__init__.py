from .database import get_db, create_tables, build_engine, engine, SessionLocal
from .models import User, Portfolio

__all__ = ["get_db", "create_tables", "build_engine", "engine", "SessionLocal", "User", "Portfolio"]
