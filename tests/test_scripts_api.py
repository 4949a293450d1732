from datetime import datetime

import pytest

NOVO_SCRIPT = {
    "titulo_script": "Reset de senha do AD",
    "descricao_script": "Usuário bloqueado após tentativas",
    "conteudo_script": "1. Confirmar identidade\n2. Desbloquear conta",
    "estruturante": "TI",
    "nivel": 1,
    "user_id": "user-1",
}


def _criar(client, **dados):
    response = client.post("/api/scripts", json={**NOVO_SCRIPT, **dados})
    assert response.status_code == 201
    return response.json()


def test_create_and_get(client):
    criado = _criar(client)

    assert criado["titulo_script"] == "Reset de senha do AD"
    assert criado["ultima_atualizacao"] is not None
    assert client.get(f"/api/scripts/{criado['id']}").json() == criado


@pytest.mark.parametrize("campo,valor", [("nivel", 4), ("titulo_script", "  "), ("conteudo_script", "")])
def test_create_validates_payload(client, campo, valor):
    assert client.post("/api/scripts", json={**NOVO_SCRIPT, campo: valor}).status_code == 422


def test_list_is_most_recently_updated_first(client):
    antigo = _criar(client, titulo_script="VPN")
    _criar(client, titulo_script="Impressora")

    assert [s["titulo_script"] for s in client.get("/api/scripts").json()] == ["Impressora", "VPN"]

    atualizado = client.put(f"/api/scripts/{antigo['id']}", json={"conteudo_script": "Reinstalar cliente"})

    assert atualizado.status_code == 200
    assert atualizado.json()["conteudo_script"] == "Reinstalar cliente"
    assert atualizado.json()["titulo_script"] == "VPN"
    assert datetime.fromisoformat(atualizado.json()["ultima_atualizacao"]) > datetime.fromisoformat(
        antigo["ultima_atualizacao"]
    )
    assert [s["titulo_script"] for s in client.get("/api/scripts").json()] == ["VPN", "Impressora"]


def test_list_filters(client):
    _criar(client, titulo_script="VPN corporativa", estruturante="TI", nivel=2)
    _criar(client, titulo_script="Folha de ponto", estruturante="RH", nivel=1)
    _criar(client, titulo_script="Acesso VPN terceiros", estruturante="TI", nivel=3)

    def titulos(**params):
        return sorted(s["titulo_script"] for s in client.get("/api/scripts", params=params).json())

    assert titulos(busca="vpn") == ["Acesso VPN terceiros", "VPN corporativa"]
    assert titulos(estruturante="RH") == ["Folha de ponto"]
    assert titulos(estruturante="TI", nivel=3) == ["Acesso VPN terceiros"]


def test_update_rejects_invalid_level(client):
    criado = _criar(client)
    assert client.put(f"/api/scripts/{criado['id']}", json={"nivel": 0}).status_code == 422


def test_delete(client):
    criado = _criar(client)

    assert client.delete(f"/api/scripts/{criado['id']}").status_code == 200
    assert client.get(f"/api/scripts/{criado['id']}").status_code == 404
    assert client.get("/api/scripts").json() == []


def test_unknown_script_returns_404(client):
    assert client.put("/api/scripts/nada", json={"nivel": 2}).status_code == 404
    assert client.delete("/api/scripts/nada").status_code == 404
