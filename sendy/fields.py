"""
Form field assembly for each Sendy operation.

Every builder returns a fresh dict[str, str] ready to be form-encoded.
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# Keys the subscribe builder owns; custom fields cannot replace them
SUBSCRIBE_REQUIRED_KEYS = ("api_key", "email", "list", "boolean")


class CampaignPayload(BaseModel):
    """
    Fields accepted by /api/campaigns/create.php.

    Allows extra fields so new Sendy parameters pass through untouched.
    """
    model_config = ConfigDict(extra="allow")

    from_name: Optional[str] = None
    from_email: Optional[str] = None
    reply_to: Optional[str] = None
    title: Optional[str] = None
    subject: Optional[str] = None
    plain_text: Optional[str] = None
    html_text: Optional[str] = None
    list_ids: Optional[str] = None           # comma-separated
    segment_ids: Optional[str] = None        # comma-separated
    exclude_list_ids: Optional[str] = None
    exclude_segments_ids: Optional[str] = None
    brand_id: Optional[str] = None           # required for drafts
    query_string: Optional[str] = None
    track_opens: Optional[int] = None        # 0, 1 or 2 (anonymous)
    track_clicks: Optional[int] = None
    send_campaign: Optional[int] = None      # 1 to send right away
    schedule_date_time: Optional[str] = None
    schedule_timezone: Optional[str] = None

    def to_fields(self) -> dict[str, str]:
        """Set fields only, stringified."""
        return {k: form_value(v) for k, v in self.model_dump(exclude_none=True).items()}


def form_value(value: Any) -> str:
    """Stringify a value for a form body. Booleans become "true"/"false"."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def subscribe_fields(
    api_key: str,
    email: str,
    list_id: str,
    custom_fields: Optional[Mapping[str, Any]] = None
) -> dict[str, str]:
    """
    Fields for /subscribe.

    Custom fields are merged in the caller's insertion order, one (key, value)
    pair at a time, so every value stays attached to its own key ("name"
    included). None values are left out, as in create_campaign_fields.
    """
    fields = {
        "api_key": api_key,
        "email": email,
        "list": list_id,
        "boolean": "true",
    }
    for key, value in (custom_fields or {}).items():
        if value is None:
            continue
        if key in SUBSCRIBE_REQUIRED_KEYS:
            logger.warning(f"Ignoring custom field '{key}': reserved by subscribe")
            continue
        fields[key] = form_value(value)
    return fields


def unsubscribe_fields(api_key: str, email: str, list_id: str) -> dict[str, str]:
    return {
        "api_key": api_key,
        "email": email,
        "list": list_id,
        "boolean": "true",
    }


def delete_fields(api_key: str, email: str, list_id: str) -> dict[str, str]:
    return {
        "api_key": api_key,
        "email": email,
        "list_id": list_id,
    }


def subscription_status_fields(api_key: str, email: str, list_id: str) -> dict[str, str]:
    return {
        "api_key": api_key,
        "email": email,
        "list_id": list_id,
    }


def active_subscriber_count_fields(api_key: str, list_id: str) -> dict[str, str]:
    return {
        "api_key": api_key,
        "list_id": list_id,
    }


def create_campaign_fields(
    api_key: str,
    data: Union[Mapping[str, Any], CampaignPayload],
    default_list_id: Optional[str] = None
) -> dict[str, str]:
    """
    Fields for /api/campaigns/create.php.

    The caller's data is used as-is. api_key, and list_ids when a default list
    is configured, are only added if the caller did not pass them.
    """
    if isinstance(data, CampaignPayload):
        fields = data.to_fields()
    else:
        fields = {k: form_value(v) for k, v in data.items() if v is not None}

    fields.setdefault("api_key", api_key)
    if default_list_id and "list_ids" not in fields:
        fields["list_ids"] = default_list_id
    return fields
