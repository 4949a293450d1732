import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SLA_SCHEDULER_ENABLED", "false")

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.db import Base, get_db
from core.utils import now_brazil_naive
from main import app
from modules.sla.router import get_session_factory
from ti.models import Chamado


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    client = TestClient(app)
    try:
        yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def criar_chamado(db):
    def _criar(**overrides) -> Chamado:
        dados = {
            "titulo": "Impressora sem toner",
            "descricao_usuario": "A impressora do 2º andar não imprime",
            "status": "Aberto",
            "nivel": 1,
            "estruturante": "TI",
            "user_id": "user-1",
            "data_criacao": now_brazil_naive() - timedelta(days=10),
        }
        dados.update(overrides)
        chamado = Chamado(**dados)
        db.add(chamado)
        db.commit()
        db.refresh(chamado)
        return chamado

    return _criar


@pytest.fixture
def prazo_vencido():
    return now_brazil_naive() - timedelta(hours=1)
