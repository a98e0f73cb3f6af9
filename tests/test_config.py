from stadia_mcp.config import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT_S, StadiaConfig


def test_from_env_defaults(monkeypatch):
    for name in ("API_KEY", "STADIA_API_BASE_URL", "STADIA_TILES_BASE_URL", "STADIA_TIMEOUT_S"):
        monkeypatch.delenv(name, raising=False)

    config = StadiaConfig.from_env()

    assert config.api_key == ""
    assert config.api_base_url == DEFAULT_API_BASE_URL
    assert config.timeout_s == DEFAULT_TIMEOUT_S


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("API_KEY", "secret")
    monkeypatch.setenv("STADIA_API_BASE_URL", "https://api.stadiamaps.eu/")
    monkeypatch.setenv("STADIA_TIMEOUT_S", "2.5")

    config = StadiaConfig.from_env()

    assert config.api_key == "secret"
    assert config.api_base_url == "https://api.stadiamaps.eu"
    assert config.timeout_s == 2.5
