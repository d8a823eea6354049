"""Run the server: ``python -m eduplay [port]``."""
import sys

import uvicorn

from eduplay.core.config import get_settings


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    port = int(argv[0]) if argv else settings.port
    uvicorn.run("eduplay.main:app", host=settings.host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
