"""Static assets for the single-page front end."""
import logging
from pathlib import Path

from fastapi import Response
from fastapi.responses import FileResponse

from eduplay.core.errors import Forbidden, NotFoundError
from eduplay.responses import error_response

logger = logging.getLogger("eduplay.static")

# Client-side pages: the shell decides what to render.
SHELL_PATHS = {"/", "/about", "/login", "/register", "/profile"}
SHELL_PREFIXES = ("/game/",)


class StaticAssetResponder:
    def __init__(self, public_dir: Path):
        self.public_dir = Path(public_dir).resolve()

    def is_shell_path(self, path: str) -> bool:
        return path in SHELL_PATHS or path.startswith(SHELL_PREFIXES)

    def respond(self, path: str) -> Response:
        if self.is_shell_path(path):
            path = "/index.html"

        target = (self.public_dir / path.lstrip("/")).resolve()
        if not target.is_relative_to(self.public_dir):
            return error_response(Forbidden("access denied"))

        if target.is_dir():
            target = target / "index.html"
        if not target.is_file():
            logger.debug("No static file for %s", path)
            return error_response(NotFoundError("file was not found"))

        return FileResponse(target, headers={"Cache-Control": "no-cache"})
