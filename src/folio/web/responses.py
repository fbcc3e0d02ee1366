"""Response helpers shared by routers."""

from fastapi import Response


def yaml_attachment(text: str, filename: str) -> Response:
    """Serve YAML text as a file download."""
    return Response(
        content=text,
        media_type="text/yaml; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
