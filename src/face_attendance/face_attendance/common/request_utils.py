from __future__ import annotations

from flask import Request

from ..core.exceptions import ValidationError


def json_object(req: Request) -> dict:
    """The request's JSON body as a dict; a missing or unparsable body is {}."""
    data = req.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
