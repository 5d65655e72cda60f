"""Launch the Atelier API with uvicorn.

HOST, PORT and LOG_LEVEL come from the environment.
"""
import os
import sys
from pathlib import Path

import uvicorn

# The app packages (api, models, services, utils) live directly under src/
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from api.server import app  # noqa: E402


def main() -> None:
    uvicorn.run(
        app,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "10000")),
        log_level=os.environ.get("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
