"""Notifications transformer.

Events are nested under ``events`` in responses and flattened to
``events[<name>]`` keys in requests.
"""

from dataclasses import fields
from typing import Any

from panda_client.domain.models import Notifications, NotificationEvents
from panda_client.shared.types import WireParams
from panda_client.transformers.base import WritableTransformer, to_param_value

EVENT_NAMES = tuple(f.name for f in fields(NotificationEvents))


class NotificationsTransformer(WritableTransformer[Notifications]):
    model = Notifications
    FIELDS = {
        'url': 'url',
        'delay': 'delay',
        'events': 'events',
    }

    def convert(self, attribute: str, value: Any) -> Any:
        if attribute != 'events':
            return value
        if not isinstance(value, dict):
            return NotificationEvents()
        return NotificationEvents(**{
            name: bool(value[name]) for name in EVENT_NAMES if name in value
        })

    def to_request_params(self, obj: Notifications) -> WireParams:
        params: WireParams = {}
        if obj.url is not None:
            params['url'] = obj.url
        if obj.delay is not None:
            params['delay'] = to_param_value(obj.delay)
        for name, enabled in obj.events.to_dict().items():
            params[f'events[{name}]'] = to_param_value(enabled)
        return params
