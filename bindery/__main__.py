import uvicorn

from bindery.config import HOST, LOG_LEVEL, PORT
from bindery.logging_config import setup_logging


def main():
    setup_logging(LOG_LEVEL)
    uvicorn.run("bindery.app:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
