import pytest

from workbench import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("WORKBENCH_API_KEY", raising=False)
    monkeypatch.delenv("WORKBENCH_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("WORKBENCH_BASE_URL", raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "https://test.workbench.example"


@pytest.fixture
def secret() -> str:
    return "wbk_test_secret"


@pytest.fixture
def config(base_url: str, secret: str) -> Config:
    return Config(api_key=secret, base_url=base_url)
