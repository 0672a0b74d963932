"""Entry point: ``python -m goalsheet`` starts the API server."""

import argparse
import logging
from goalsheet.config import HOST, PORT, LOG_LEVEL


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Goal lookup API over a Google Sheets export")
    parser.add_argument("--host", type=str, default=HOST)
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--log-level", type=str.upper, default=LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Level for both the app's loggers and uvicorn")
    return parser


def main() -> None:
    import uvicorn

    args = _build_parser().parse_args()
    # Configured before the app starts, so the lifespan's basicConfig is a no-op
    logging.basicConfig(level=args.log_level)
    uvicorn.run("goalsheet.main:app", host=args.host, port=args.port,
                log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
