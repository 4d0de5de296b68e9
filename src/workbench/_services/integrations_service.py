from typing import Any, Dict, List, Optional

from .._utils import QueryValue, RequestSpec
from ._base_service import BaseService
from ._resource_service import resource_path


class IntegrationsService(BaseService):
    """Service for the integration marketplace and installed integrations.

    Browsing (``list``, ``retrieve``, ``list_reviews``) covers published
    integrations; the remaining methods act on integrations installed on the
    authenticated business.
    """

    _path = "/v1/integrations"
    _installed_path = "/v1/integrations/installed"

    def list(self, **query: QueryValue) -> Dict[str, Any]:
        """List published integrations.

        Args:
            **query: ``page``, ``per_page``, ``search``, ``category``,
                ``scope``, ``sort_by``.
        """
        return self.execute(RequestSpec(method="GET", path=self._path, params=query))

    async def list_async(self, **query: QueryValue) -> Dict[str, Any]:
        return await self.execute_async(
            RequestSpec(method="GET", path=self._path, params=query)
        )

    def retrieve(self, id_or_slug: str) -> Dict[str, Any]:
        return self.execute(self._retrieve_spec(id_or_slug))

    async def retrieve_async(self, id_or_slug: str) -> Dict[str, Any]:
        return await self.execute_async(self._retrieve_spec(id_or_slug))

    def list_reviews(self, integration_id: str, **query: QueryValue) -> Dict[str, Any]:
        """List reviews of an integration (``page``, ``per_page``, ``min_rating``)."""
        return self.execute(self._reviews_spec(integration_id, query))

    async def list_reviews_async(
        self, integration_id: str, **query: QueryValue
    ) -> Dict[str, Any]:
        return await self.execute_async(self._reviews_spec(integration_id, query))

    def list_installed(self) -> Dict[str, Any]:
        return self.execute(RequestSpec(method="GET", path=self._installed_path))

    async def list_installed_async(self) -> Dict[str, Any]:
        return await self.execute_async(
            RequestSpec(method="GET", path=self._installed_path)
        )

    def retrieve_installed(self, installation_id: str) -> Dict[str, Any]:
        return self.execute(self._installed_spec("GET", installation_id))

    async def retrieve_installed_async(self, installation_id: str) -> Dict[str, Any]:
        return await self.execute_async(self._installed_spec("GET", installation_id))

    def install(
        self,
        integration_id: str,
        scopes: List[str],
        authorization_code: str,
        code_verifier: str,
    ) -> Dict[str, Any]:
        """Install an integration after the OAuth consent flow.

        Args:
            integration_id: The integration to install.
            scopes: Scopes to grant, a subset of those the integration requests.
            authorization_code: Code returned by the consent flow.
            code_verifier: PKCE code verifier.
        """
        return self.execute(
            self._install_spec(integration_id, scopes, authorization_code, code_verifier)
        )

    async def install_async(
        self,
        integration_id: str,
        scopes: List[str],
        authorization_code: str,
        code_verifier: str,
    ) -> Dict[str, Any]:
        return await self.execute_async(
            self._install_spec(integration_id, scopes, authorization_code, code_verifier)
        )

    def uninstall(self, installation_id: str) -> None:
        self.execute(self._installed_spec("DELETE", installation_id))

    async def uninstall_async(self, installation_id: str) -> None:
        await self.execute_async(self._installed_spec("DELETE", installation_id))

    def disable(self, installation_id: str) -> Dict[str, Any]:
        return self.execute(self._installed_spec("POST", installation_id, "disable"))

    async def disable_async(self, installation_id: str) -> Dict[str, Any]:
        return await self.execute_async(
            self._installed_spec("POST", installation_id, "disable")
        )

    def enable(self, installation_id: str) -> Dict[str, Any]:
        return self.execute(self._installed_spec("POST", installation_id, "enable"))

    async def enable_async(self, installation_id: str) -> Dict[str, Any]:
        return await self.execute_async(
            self._installed_spec("POST", installation_id, "enable")
        )

    def submit_review(
        self,
        integration_id: str,
        rating: int,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Submit a review (rating 1-5) for an installed integration."""
        return self.execute(self._review_spec(integration_id, rating, title, content))

    async def submit_review_async(
        self,
        integration_id: str,
        rating: int,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.execute_async(
            self._review_spec(integration_id, rating, title, content)
        )

    def _retrieve_spec(self, id_or_slug: str) -> RequestSpec:
        return RequestSpec(method="GET", path=resource_path(self._path, id_or_slug))

    def _reviews_spec(
        self, integration_id: str, query: Dict[str, QueryValue]
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            path=resource_path(self._path, integration_id) + "/reviews",
            params=query,
        )

    def _installed_spec(
        self, method: str, installation_id: str, action: Optional[str] = None
    ) -> RequestSpec:
        path = resource_path(self._installed_path, installation_id)
        if action:
            path = f"{path}/{action}"
        return RequestSpec(method=method, path=path)  # type: ignore[arg-type]

    def _install_spec(
        self,
        integration_id: str,
        scopes: List[str],
        authorization_code: str,
        code_verifier: str,
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            path=f"{self._path}/install",
            json={
                "integration_id": integration_id,
                "scopes": scopes,
                "authorization_code": authorization_code,
                "code_verifier": code_verifier,
            },
        )

    def _review_spec(
        self,
        integration_id: str,
        rating: int,
        title: Optional[str],
        content: Optional[str],
    ) -> RequestSpec:
        body: Dict[str, Any] = {"rating": rating}
        if title is not None:
            body["title"] = title
        if content is not None:
            body["content"] = content
        return RequestSpec(
            method="POST",
            path=resource_path(self._path, integration_id) + "/reviews",
            json=body,
        )
