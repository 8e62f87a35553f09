import json
import logging
from typing import Any

from flask import g, has_request_context, request

logger = logging.getLogger("app.profiles.audit")


def record_event(
    *,
    action: str,
    entity_type: str | None = None,
    entity_id: str | None = None,
    metadata: dict[str, Any] | None = None,
    request_id: str | None = None,
) -> dict[str, Any]:
    """
    Append-only audit event, written to the audit logger.
    """
    in_request = has_request_context()
    ev = {
        "request_id": request_id or (getattr(g, "request_id", None) if in_request else None),
        "action": action,
        "entity_type": entity_type,
        "entity_id": entity_id,
        "metadata": metadata or None,
        "client_ip": request.remote_addr if in_request else None,
    }
    logger.info("audit %s", json.dumps(ev, sort_keys=True))
    return ev
