from typing import Any, Dict, Optional
from urllib.parse import quote

from .._utils import QueryValue, RequestSpec
from ._base_service import BaseService


def resource_path(*segments: str) -> str:
    """Join path segments, percent-encoding each identifier."""
    head, *rest = segments
    return "/".join([head, *(quote(str(segment), safe="") for segment in rest)])


class ResourceService(BaseService):
    """CRUD operations over a single API collection.

    Subclasses set ``_path`` to the collection path, e.g. ``/v1/clients``.
    Payloads are passed through as plain JSON objects.
    """

    _path: str = ""

    def list(self, **query: QueryValue) -> Dict[str, Any]:
        """List items in the collection.

        Args:
            **query: Query parameters such as ``page``, ``per_page``,
                ``search``, ``status``, ``sort`` and ``order``. Parameters set
                to ``None`` are not sent.

        Returns:
            Dict[str, Any]: The list envelope (``data``, ``meta``, ``pagination``).
        """
        return self.execute(self._list_spec(query))

    async def list_async(self, **query: QueryValue) -> Dict[str, Any]:
        return await self.execute_async(self._list_spec(query))

    def retrieve(self, id: str) -> Dict[str, Any]:
        """Retrieve a single item by id."""
        return self.execute(self._retrieve_spec(id))

    async def retrieve_async(self, id: str) -> Dict[str, Any]:
        return await self.execute_async(self._retrieve_spec(id))

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create an item from ``data``."""
        return self.execute(self._create_spec(data))

    async def create_async(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.execute_async(self._create_spec(data))

    def update(self, id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Update the item ``id`` with the fields in ``data``."""
        return self.execute(self._update_spec(id, data))

    async def update_async(self, id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.execute_async(self._update_spec(id, data))

    def delete(self, id: str) -> None:
        """Delete the item ``id``."""
        self.execute(self._delete_spec(id))

    async def delete_async(self, id: str) -> None:
        await self.execute_async(self._delete_spec(id))

    def _list_spec(
        self, query: Dict[str, QueryValue], path: Optional[str] = None
    ) -> RequestSpec:
        return RequestSpec(method="GET", path=path or self._path, params=query)

    def _retrieve_spec(self, id: str) -> RequestSpec:
        return RequestSpec(method="GET", path=resource_path(self._path, id))

    def _create_spec(self, data: Dict[str, Any]) -> RequestSpec:
        return RequestSpec(method="POST", path=self._path, json=data)

    def _update_spec(self, id: str, data: Dict[str, Any]) -> RequestSpec:
        return RequestSpec(method="PUT", path=resource_path(self._path, id), json=data)

    def _delete_spec(self, id: str) -> RequestSpec:
        return RequestSpec(method="DELETE", path=resource_path(self._path, id))
