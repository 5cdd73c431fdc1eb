from config import Settings


def test_default_network(monkeypatch):
    monkeypatch.delenv("NETWORK", raising=False)
    assert Settings(_env_file=None).NETWORK == "baseMainnet"


def test_network_from_env(monkeypatch):
    monkeypatch.setenv("NETWORK", "kromaMainnet")
    assert Settings(_env_file=None).NETWORK == "kromaMainnet"
