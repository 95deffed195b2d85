"""Launch the roof estimate FastAPI server."""

import uvicorn

from roof_estimate.config import settings
from roof_estimate.logging_config import setup_logging


def main():
    setup_logging(settings.log_level)
    uvicorn.run(
        "roof_estimate.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
