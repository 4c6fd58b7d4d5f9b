"""Run the API with uvicorn: `python -m quickbite`."""

import uvicorn

from quickbite.config import settings


def main() -> None:
    uvicorn.run(
        "quickbite.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
