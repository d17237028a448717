import argparse
import logging

import uvicorn

from petstore.logging_setup import setup_logging

DEFAULT_PORT = 8080

logger = logging.getLogger("petstore")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="petstore-docs",
        description="Pet store sample API with generated OpenAPI documentation and Swagger UI.",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"The port that this server should be started on. Defaults to {DEFAULT_PORT}.",
    )
    return parser.parse_args(argv)


def run(port):
    from petstore.api import app

    logger.info(f"Launching on port `{port}`")
    # uvicorn exits the process itself when the port cannot be bound.
    uvicorn.run(app, host="0.0.0.0", port=port, server_header=False, log_config=None)


def main(argv=None):
    args = parse_args(argv)
    setup_logging()
    run(args.port)


if __name__ == "__main__":
    main()
