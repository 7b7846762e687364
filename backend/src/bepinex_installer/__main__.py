"""Entry point for standalone backend process."""

import uvicorn

from bepinex_installer.config import settings
from bepinex_installer.main import app


def main() -> None:
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
