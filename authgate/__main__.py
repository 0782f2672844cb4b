"""authgate entrypoint.

Run with:
  python -m authgate
"""

import uvicorn

from .config import settings


def main() -> None:
    options = {}
    if settings.SSL_CERTFILE and settings.SSL_KEYFILE:
        options["ssl_certfile"] = settings.SSL_CERTFILE
        options["ssl_keyfile"] = settings.SSL_KEYFILE
    uvicorn.run("authgate.main:app", host=settings.WEB_HOST, port=settings.WEB_PORT, **options)


if __name__ == "__main__":
    main()
