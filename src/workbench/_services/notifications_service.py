from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from .._utils import RequestSpec
from ._base_service import BaseService

NotificationType = Literal["CLIENT", "BUSINESS"]
TemplateData = Mapping[str, Union[str, int, float]]


class NotificationsService(BaseService):
    """Service for sending templated email notifications.

    Notifications go either to a single client (``CLIENT``) or to members of
    the business team (``BUSINESS``), optionally filtered by role.
    """

    _path = "/v1/notifications"

    def send_to_client(
        self,
        client_id: str,
        event: str,
        *,
        template_data: Optional[TemplateData] = None,
        subject_override: Optional[str] = None,
        html_override: Optional[str] = None,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Send a notification to a client.

        Args:
            client_id: The client to notify.
            event: Template event, e.g. ``sdk_quote_created``.
            template_data: Values interpolated into the template.
            subject_override: Replaces the template subject.
            html_override: Replaces the template body.
            entity_type: Entity type recorded in the audit log.
            entity_id: Entity id recorded in the audit log.
        """
        spec = self._send_spec(
            type="CLIENT",
            event=event,
            client_id=client_id,
            template_data=template_data,
            subject_override=subject_override,
            html_override=html_override,
            entity_type=entity_type,
            entity_id=entity_id,
        )
        return self.execute(spec)

    async def send_to_client_async(
        self,
        client_id: str,
        event: str,
        *,
        template_data: Optional[TemplateData] = None,
        subject_override: Optional[str] = None,
        html_override: Optional[str] = None,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        spec = self._send_spec(
            type="CLIENT",
            event=event,
            client_id=client_id,
            template_data=template_data,
            subject_override=subject_override,
            html_override=html_override,
            entity_type=entity_type,
            entity_id=entity_id,
        )
        return await self.execute_async(spec)

    def send_to_team(
        self,
        event: str,
        *,
        roles: Optional[List[str]] = None,
        template_data: Optional[TemplateData] = None,
        subject_override: Optional[str] = None,
        html_override: Optional[str] = None,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Send a notification to business team members.

        ``roles`` limits the recipients (``owner``, ``admin``, ``manager``,
        ``member``); all members are notified when omitted.
        """
        spec = self._send_spec(
            type="BUSINESS",
            event=event,
            roles=roles,
            template_data=template_data,
            subject_override=subject_override,
            html_override=html_override,
            entity_type=entity_type,
            entity_id=entity_id,
        )
        return self.execute(spec)

    async def send_to_team_async(
        self,
        event: str,
        *,
        roles: Optional[List[str]] = None,
        template_data: Optional[TemplateData] = None,
        subject_override: Optional[str] = None,
        html_override: Optional[str] = None,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        spec = self._send_spec(
            type="BUSINESS",
            event=event,
            roles=roles,
            template_data=template_data,
            subject_override=subject_override,
            html_override=html_override,
            entity_type=entity_type,
            entity_id=entity_id,
        )
        return await self.execute_async(spec)

    def send_custom(
        self,
        type: NotificationType,
        subject: str,
        html: str,
        *,
        client_id: Optional[str] = None,
        roles: Optional[List[str]] = None,
        template_data: Optional[TemplateData] = None,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Send a notification with a caller-supplied subject and body.

        ``client_id`` is required for ``CLIENT`` notifications; ``roles``
        applies to ``BUSINESS`` ones.
        """
        spec = self._send_spec(
            type=type,
            event="sdk_custom",
            client_id=client_id,
            roles=roles,
            template_data=template_data,
            subject_override=subject,
            html_override=html,
            entity_type=entity_type,
            entity_id=entity_id,
        )
        return self.execute(spec)

    async def send_custom_async(
        self,
        type: NotificationType,
        subject: str,
        html: str,
        *,
        client_id: Optional[str] = None,
        roles: Optional[List[str]] = None,
        template_data: Optional[TemplateData] = None,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        spec = self._send_spec(
            type=type,
            event="sdk_custom",
            client_id=client_id,
            roles=roles,
            template_data=template_data,
            subject_override=subject,
            html_override=html,
            entity_type=entity_type,
            entity_id=entity_id,
        )
        return await self.execute_async(spec)

    def _send_spec(self, **fields: Any) -> RequestSpec:
        body = {key: value for key, value in fields.items() if value is not None}
        return RequestSpec(method="POST", path=self._path, json=body)
