def test_create_link_success(client):
    response = client.post("/api/v1/links", json={"url": "https://example.com/test"})

    assert response.status_code == 201
    data = response.json()
    assert data["url"] == "https://example.com/test"
    assert int(data["code"], 36) > 0
    assert data["short_url"] == f"http://testserver/{data['code']}"
    assert data["view_count"] == 0
    assert "created_at" in data


def test_create_link_idempotent(client):
    url = "https://example.com/idempotent"

    response1 = client.post("/api/v1/links", json={"url": url})
    response2 = client.post("/api/v1/links", json={"url": url})

    assert response1.status_code == 201
    assert response2.status_code == 200
    assert response1.json()["code"] == response2.json()["code"]


def test_create_links_get_distinct_codes(client, sample_urls):
    codes = {client.post("/api/v1/links", json={"url": url}).json()["code"] for url in sample_urls}
    assert len(codes) == len(sample_urls)


def test_create_link_invalid_url(client):
    response = client.post("/api/v1/links", json={"url": "not-a-url"})

    assert response.status_code == 422
    assert response.json()["detail"] == ["The URL must start with http://, https://, or ftp://."]


def test_create_link_empty_url(client):
    response = client.post("/api/v1/links", json={"url": ""})

    assert response.status_code == 422
    assert response.json()["detail"] == ["You must specify a URL."]


def test_create_link_too_long(client):
    url = "https://example.com/" + "a" * 4077
    assert len(url) == 4097

    response = client.post("/api/v1/links", json={"url": url})

    assert response.status_code == 422
    assert response.json()["detail"] == ["That URL is too long."]


def test_link_info_does_not_count_views(client, create_link):
    code = create_link("https://example.com/info")["code"]

    for _ in range(2):
        assert client.get(f"/api/v1/links/{code}").json()["view_count"] == 0


def test_link_info_not_found(client):
    response = client.get("/api/v1/links/nonexistent")
    assert response.status_code == 404
