"""
Run the Travel Diary API with uvicorn.

    python -m travel_diary
    travel-diary              (console script)

Host and port come from Settings (BACKEND_HOST / BACKEND_PORT, default
0.0.0.0:5002). If the database cannot be opened at startup uvicorn exits
with a non-zero status.
"""

import uvicorn

from travel_diary.config import settings


def main() -> None:
    uvicorn.run(
        "travel_diary.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
