"""
Run the To-do API with uvicorn.

    python -m todo_api
"""
# Standard library imports
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv

# Local application imports
from .core.config import get_settings


def main() -> None:
    load_dotenv()
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
