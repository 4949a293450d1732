URL = "/api/links-uteis"


def _criar(client, nome, url="https://intranet.local"):
    response = client.post(URL, json={"nome": nome, "url": url, "user_id": "user-1"})
    assert response.status_code == 201
    return response.json()


def test_list_newest_first(client):
    _criar(client, "Intranet")
    _criar(client, "Portal RH", "https://rh.local")

    assert [l["nome"] for l in client.get(URL).json()] == ["Portal RH", "Intranet"]


def test_url_must_be_http(client):
    response = client.post(URL, json={"nome": "Share", "url": "file://servidor", "user_id": "user-1"})
    assert response.status_code == 422


def test_update(client):
    link = _criar(client, "Intranet")

    response = client.put(f"{URL}/{link['id']}", json={"url": "  https://nova.intranet.local  "})

    assert response.status_code == 200
    assert response.json()["nome"] == "Intranet"
    assert response.json()["url"] == "https://nova.intranet.local"
    assert client.put(f"{URL}/{link['id']}", json={"url": "intranet"}).status_code == 422


def test_delete(client):
    link = _criar(client, "Intranet")

    assert client.delete(f"{URL}/{link['id']}").status_code == 200
    assert client.get(URL).json() == []


def test_unknown_link_returns_404(client):
    assert client.put(f"{URL}/nada", json={"nome": "X"}).status_code == 404
    assert client.delete(f"{URL}/nada").status_code == 404
