from report_relay.gateway.server import create_app


def test_ping(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.get_json() == {"status": "gateway_ok"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("AI_API_KEY", "key-from-env")
    monkeypatch.setenv("AI_API_URL", "http://env.test/v1/chat/completions")
    monkeypatch.setenv("AI_MODEL", "m-text")
    monkeypatch.delenv("AI_VISION_MODEL", raising=False)
    monkeypatch.setenv("AI_API_TIMEOUT", "12.5")

    app = create_app()
    assert app.config["AI_API_KEY"] == "key-from-env"
    assert app.config["AI_API_URL"] == "http://env.test/v1/chat/completions"
    assert app.config["AI_MODEL"] == "m-text"
    assert app.config["AI_VISION_MODEL"] == "m-text"
    assert app.config["AI_API_TIMEOUT"] == 12.5


def test_config_defaults(monkeypatch):
    for name in ("AI_API_KEY", "AI_API_URL", "AI_MODEL", "AI_VISION_MODEL", "AI_API_TIMEOUT", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    app = create_app()
    assert app.config["AI_API_KEY"] is None
    assert app.config["AI_API_URL"] == "http://ai.sda.changan.com.cn/api/v1/chat/completions"
    assert app.config["AI_MODEL"] == "321"
    assert app.config["AI_API_TIMEOUT"] is None
    assert app.config["CORS_ORIGINS"] == ["*"]


def test_cors_preflight(client):
    response = client.options(
        "/api/ai-proxy",
        headers={"Origin": "http://localhost:8080", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] in ("*", "http://localhost:8080")


def test_standalone_proxy_service():
    from report_relay.ai_proxy.server import app

    response = app.test_client().post("/api/ai-image-proxy", json={"images": []})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Image data is missing"}
