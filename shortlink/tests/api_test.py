from shortlink.utils.encoding import encode_id
from shortlink.utils.hashing import hash_identifier


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_short_url_success(client):
    """Test successful URL shortening."""
    url = "https://example.com/test"
    response = client.post("/v1/shorten", json={"url": url})
    assert response.status_code == 201
    data = response.json()
    assert data["url"] == url
    assert data["identifier"] == hash_identifier(url)
    assert data["short_code"] == encode_id(data["identifier"])
    assert data["short_url"] == f"short.url/r/{data['short_code']}"


def test_create_short_url_idempotent(client):
    """Same URL returns same short URL."""
    url = "https://example.com/idempotent"
    first = client.post("/v1/shorten", json={"url": url}).json()
    second = client.post("/v1/shorten", json={"url": url}).json()
    assert first["short_url"] == second["short_url"]


def test_create_short_url_with_options(client):
    response = client.post("/v1/shorten", json={
        "url": "https://example.com/very/long/path",
        "domain": "test.domain",
        "include_protocol": True,
        "redirect_path_segment": "goto",
    })
    assert response.status_code == 201
    short_url = response.json()["short_url"]
    assert short_url.startswith("https://test.domain/goto/")


def test_create_short_url_with_sdbm(client):
    url = "https://example.com/sdbm"
    data = client.post("/v1/shorten", json={"url": url, "hash_algorithm": "sdbm"}).json()
    assert data["identifier"] == hash_identifier(url, "sdbm")


def test_create_short_url_rejects_custom_algorithm(client):
    response = client.post("/v1/shorten", json={"url": "https://example.com", "hash_algorithm": "custom"})
    assert response.status_code == 422


def test_create_short_url_requires_url(client):
    response = client.post("/v1/shorten", json={"domain": "short.url"})
    assert response.status_code == 422


def test_resolve(client, sample_urls):
    for url in sample_urls:
        short_url = client.post("/v1/shorten", json={"url": url, "include_protocol": True}).json()["short_url"]
        response = client.get("/v1/resolve", params={"short_url": short_url})
        assert response.status_code == 200
        assert response.json()["url"] == url


def test_resolve_unknown(client):
    response = client.get("/v1/resolve", params={"short_url": "short.url/r/ABC123"})
    assert response.status_code == 404


def test_resolve_invalid_character(client):
    response = client.get("/v1/resolve", params={"short_url": "short.url/r/ABC$123"})
    assert response.status_code == 404


def test_redirect_success(client):
    url = "https://example.com/redirect-test"
    short_code = client.post("/v1/shorten", json={"url": url}).json()["short_code"]

    response = client.get(f"/r/{short_code}", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == url

    response = client.get(f"/{short_code}", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == url


def test_redirect_not_found(client):
    response = client.get("/r/ABC123", follow_redirects=False)
    assert response.status_code == 404


def test_redirect_malformed_code(client):
    response = client.get("/r/not-a-code", follow_redirects=False)
    assert response.status_code == 404


def test_create_short_url_rejects_empty_path_separator(client):
    response = client.post("/v1/shorten", json={"url": "https://example.com", "path_separator": ""})
    assert response.status_code == 422
