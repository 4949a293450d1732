"""Engine, sessões e Base declarativa compartilhados pela aplicação"""
from __future__ import annotations
import os
from typing import Iterator

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./chamados.db")

# SQLite precisa liberar a conexão para as threads do scheduler
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, pool_pre_ping=True, connect_args=_connect_args)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


class Base(DeclarativeBase):
    pass


def get_db() -> Iterator[Session]:
    """Dependência FastAPI: uma sessão por requisição"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
