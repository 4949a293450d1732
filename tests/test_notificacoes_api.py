import pytest

from modules.sla.repository import SlaRepository


@pytest.fixture
def notificacoes(db, criar_chamado):
    chamado = criar_chamado()
    outro = criar_chamado(user_id="user-2")
    repo = SlaRepository(db)
    return [
        repo.criar_notificacao("user-1", chamado.id, "primeira"),
        repo.criar_notificacao("user-1", chamado.id, "segunda"),
        repo.criar_notificacao("user-2", outro.id, "de outro usuário"),
    ]


def test_lists_only_unread_for_user(client, notificacoes):
    response = client.get("/api/notificacoes", params={"user_id": "user-1"})

    assert response.status_code == 200
    assert sorted(n["mensagem"] for n in response.json()) == ["primeira", "segunda"]
    assert all(n["visualizada"] is False for n in response.json())


def test_user_id_is_required(client):
    assert client.get("/api/notificacoes").status_code == 422


def test_count_unread(client, notificacoes):
    assert client.get("/api/notificacoes/contagem", params={"user_id": "user-1"}).json() == {"nao_lidas": 2}
    assert client.get("/api/notificacoes/contagem", params={"user_id": "ninguem"}).json() == {"nao_lidas": 0}


def test_mark_one_as_read(client, notificacoes):
    alvo = notificacoes[0].id

    response = client.patch(f"/api/notificacoes/{alvo}/visualizar")

    assert response.status_code == 200
    assert response.json()["visualizada"] is True
    restantes = client.get("/api/notificacoes", params={"user_id": "user-1"}).json()
    assert [n["mensagem"] for n in restantes] == ["segunda"]


def test_mark_unknown_returns_404(client):
    assert client.patch("/api/notificacoes/nao-existe/visualizar").status_code == 404


def test_mark_all_as_read_only_affects_user(client, notificacoes):
    response = client.post("/api/notificacoes/visualizar-todas", params={"user_id": "user-1"})

    assert response.json() == {"atualizadas": 2}
    assert client.get("/api/notificacoes/contagem", params={"user_id": "user-1"}).json()["nao_lidas"] == 0
    assert client.get("/api/notificacoes/contagem", params={"user_id": "user-2"}).json()["nao_lidas"] == 1


def test_read_notification_allows_new_sla_alert(client, criar_chamado, prazo_vencido):
    chamado = criar_chamado(data_prazo=prazo_vencido)
    client.post("/api/sla/verificar-prazos")
    [notificacao] = client.get("/api/notificacoes", params={"user_id": chamado.user_id}).json()

    client.patch(f"/api/notificacoes/{notificacao['id']}/visualizar")
    novo = client.post("/api/sla/verificar-prazos").json()

    assert novo["notificacoesEnviadas"] == 1
    assert notificacao["mensagem"].startswith("PRAZO EXPIRADO")
