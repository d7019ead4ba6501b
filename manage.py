#!/usr/bin/env python3
import argparse
import os
import sys

from idea_hub import create_app
from idea_hub.config import config
from idea_hub.http_client import ApiRejected, ApiTransportError, get_backend_client


def _app(args):
    return create_app(config.get(args.env, config["default"]))


def cmd_runserver(args) -> int:
    app = _app(args)
    host = args.host
    port = int(args.port or app.config.get("PORT", 5000))
    debug = bool(args.debug or app.config.get("DEBUG", False))
    app.run(host=host, port=port, debug=debug)
    return 0


def cmd_check_backend(args) -> int:
    app = _app(args)
    with app.app_context():
        result = get_backend_client().get_projects()
    if isinstance(result, ApiTransportError):
        print(f"Backend unreachable at {app.config['BACKEND_API_URL']}: {result.error}", file=sys.stderr)
        return 1
    if isinstance(result, ApiRejected):
        print(f"Backend answered with an error: {result.message or 'no message'}", file=sys.stderr)
        return 1
    count = len(result.payload.get("data") or [])
    print(f"Backend OK at {app.config['BACKEND_API_URL']} ({count} project(s)).")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Classmate Idea Hub utilities")
    parser.add_argument("--env", default=os.getenv("APP_ENV", "development"), help="App environment (development|testing)")

    subparsers = parser.add_subparsers(dest="command")

    p_run = subparsers.add_parser("runserver", help="Run Flask dev server")
    p_run.add_argument("--host", default="0.0.0.0")
    p_run.add_argument("--port", type=int, default=None)
    p_run.add_argument("--debug", action="store_true")
    p_run.set_defaults(func=cmd_runserver)

    p_check = subparsers.add_parser("check-backend", help="Fetch the project list once and report")
    p_check.set_defaults(func=cmd_check_backend)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
