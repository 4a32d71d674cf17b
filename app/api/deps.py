"""
Shared route dependencies.
"""

from fastapi import Request

from app.core.errors import ValidationError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


async def read_body(request: Request) -> dict:
    """
    Request body as a plain dict, from JSON or a urlencoded form.

    An empty body is an empty dict so the handler's own presence
    checks decide what is missing.
    """
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(FORM_CONTENT_TYPE):
            form = await request.form()
            return dict(form)

        if not await request.body():
            return {}
        body = await request.json()
    except ValueError as exc:
        raise ValidationError("Invalid request body") from exc

    if not isinstance(body, dict):
        raise ValidationError("Invalid request body")
    return body
