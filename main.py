#!/usr/bin/env python3
"""
PizzaStore -- Making the Pizzas you love.

Starts the API under uvicorn.

Usage:
  python main.py
  python main.py --environment Development
  python main.py --host 0.0.0.0 --port 8080
  python main.py --environment Development --reload

Environment variables:
  ENVIRONMENT             "Development" enables the admin/admin login and /swagger.
  JWT__SECRET_KEY         HMAC signing key, at least 32 characters. Required
                          outside Development.
  JWT__ISSUER             Token issuer claim.        (default: PizzaStore)
  JWT__AUDIENCE           Token audience claim.      (default: PizzaStoreClients)
  JWT__LIFETIME_MINUTES   Minutes until expiry.      (default: 60)
"""

import argparse
import os

import uvicorn

from core.config import DEVELOPMENT


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="pizzastore",
        description="PizzaStore API server.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=5024, help="Bind port (default: 5024)")
    parser.add_argument(
        "--environment",
        metavar="NAME",
        help="Override ENVIRONMENT for this run, e.g. Development",
    )
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    args = parser.parse_args()

    # Settings are read when asgi.py is imported, so the override has to be
    # in the environment before uvicorn loads it (including reload workers).
    if args.environment:
        os.environ["ENVIRONMENT"] = args.environment

    print(f"\n  PizzaStore API -- http://{args.host}:{args.port}")
    if args.environment == DEVELOPMENT:
        print(f"  Docs: http://{args.host}:{args.port}/swagger\n")

    uvicorn.run("asgi:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
