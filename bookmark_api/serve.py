"""Run the API with uvicorn.

Usage:
    python -m bookmark_api.serve [--host HOST] [--port PORT]
"""
import argparse
import logging

import uvicorn

from bookmark_api.core.config import Settings
from bookmark_api.main import create_app


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--host', default='127.0.0.1')
    parser.add_argument('--port', type=int, default=3333)
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    uvicorn.run(create_app(settings), host=args.host, port=args.port)


if __name__ == '__main__':
    main()
