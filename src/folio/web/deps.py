"""Request dependencies shared by routers."""

from fastapi import Header

from folio.core.errors import AuthenticationRequiredError


def get_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Return the acting owner from the X-User-Id header.

    Authentication happens upstream; this layer only requires that the
    owner is identified.
    """
    if not x_user_id:
        raise AuthenticationRequiredError()
    return x_user_id
