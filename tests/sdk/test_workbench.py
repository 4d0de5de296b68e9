from unittest.mock import patch

import pytest
from pydantic import ValidationError

from tests.utils.fakes import FakeTransport, response
from workbench import Config, RequestSpec, Workbench
from workbench._services import ClientsService


class TestConfig:
    def test_defaults(self):
        config = Config(api_key="wbk_test_x")
        assert config.base_url == "https://api.tryworkbench.app"
        assert config.timeout == 30000
        assert config.max_retries == 3
        assert config.credential == "wbk_test_x"

    def test_credential_required(self):
        with pytest.raises(ValidationError, match="Either api_key or access_token"):
            Config()

    def test_both_credentials_rejected(self):
        with pytest.raises(ValidationError, match="not both"):
            Config(api_key="k", access_token="t")

    def test_credentials_are_masked(self):
        config = Config(access_token="wbk_at_secret")
        assert "wbk_at_secret" not in repr(config)
        assert "wbk_at_secret" not in str(config.model_dump())

    def test_is_immutable(self):
        config = Config(api_key="k")
        with pytest.raises(ValidationError):
            config.max_retries = 5  # type: ignore[misc]

    @pytest.mark.parametrize("base_url", ["not a url", "ftp://example.com"])
    def test_invalid_base_url(self, base_url: str):
        with pytest.raises(ValidationError):
            Config(api_key="k", base_url=base_url)

    @pytest.mark.parametrize(
        "field,value", [("timeout", 0), ("max_retries", -1)]
    )
    def test_invalid_limits(self, field: str, value: int):
        with pytest.raises(ValidationError):
            Config(api_key="k", **{field: value})


class TestWorkbench:
    def test_config_from_constructor(self):
        workbench = Workbench(
            api_key="wbk_live_x",
            base_url="https://example.com",
            timeout=5000,
            max_retries=1,
        )
        assert workbench.config.credential == "wbk_live_x"
        assert workbench.config.base_url == "https://example.com"
        assert workbench.config.timeout == 5000
        assert workbench.config.max_retries == 1

    def test_config_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WORKBENCH_API_KEY", "wbk_env_key")
        monkeypatch.setenv("WORKBENCH_BASE_URL", "https://env.example.com")
        workbench = Workbench()
        assert workbench.config.credential == "wbk_env_key"
        assert workbench.config.base_url == "https://env.example.com"

    def test_access_token_env_wins_over_api_key_env(
        self, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("WORKBENCH_API_KEY", "wbk_env_key")
        monkeypatch.setenv("WORKBENCH_ACCESS_TOKEN", "wbk_env_token")
        workbench = Workbench()
        assert workbench.config.access_token is not None
        assert workbench.config.api_key is None

    def test_explicit_credential_ignores_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WORKBENCH_API_KEY", "wbk_env_key")
        workbench = Workbench(access_token="wbk_at_explicit")
        assert workbench.config.credential == "wbk_at_explicit"

    def test_no_credentials(self):
        with pytest.raises(ValidationError):
            Workbench()

    def test_resources_share_transport(self):
        transport = FakeTransport(response(200, {"data": []}))
        workbench = Workbench(api_key="k", transport=transport)

        assert isinstance(workbench.clients, ClientsService)
        assert workbench.clients.list() == {"data": []}
        assert transport.requests[0].url == "https://api.tryworkbench.app/v1/clients"

    def test_generic_request(self):
        transport = FakeTransport(response(500), response(200, {"ok": True}))
        workbench = Workbench(api_key="k", transport=transport)

        with patch("time.sleep") as mock_sleep:
            body = workbench.request("GET", "/v1/me", params={"expand": None})

        assert body == {"ok": True}
        mock_sleep.assert_called_once_with(1.0)
        assert transport.requests[0] is transport.requests[1]

    def test_execute_spec(self):
        transport = FakeTransport(response(200, {"id": 1}))
        with Workbench(api_key="k", transport=transport) as workbench:
            body = workbench.execute(
                RequestSpec(method="PATCH", path="/v1/jobs/1", json={"a": 1})
            )

        assert body == {"id": 1}
        assert transport.requests[0].method == "PATCH"
        assert transport.requests[0].content == b'{"a": 1}'

    @pytest.mark.anyio
    async def test_async_context_manager_closes_clients(self):
        async with Workbench(api_key="k") as workbench:
            transport = workbench._async_transport
        assert transport._client.is_closed  # type: ignore[attr-defined]
        assert workbench._transport._client.is_closed  # type: ignore[attr-defined]
