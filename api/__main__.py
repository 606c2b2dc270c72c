"""Run the API with uvicorn."""

import uvicorn

from config import config


def main() -> None:
    uvicorn.run("api.main:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
