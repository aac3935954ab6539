"""
Web game server for playing El Impostor from a phone browser.
Gesture events arrive over Socket.IO and drive a single shared session.
"""

import argparse
import os

from dotenv import load_dotenv

from impostor.config.config_loader import load_config
from impostor.web import GameServer


def main():
    """Entry point for the game server."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Start the El Impostor game server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python server.py                       # Start server on default port 5000
  python server.py --port 8080           # Start server on port 8080
  python server.py --config party.yaml   # Use a YAML config

Environment (also read from .env):
  IMPOSTOR_CONFIG, IMPOSTOR_HOST, IMPOSTOR_PORT
        """
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=os.getenv("IMPOSTOR_CONFIG"),
        help="Path to YAML configuration file (default: $IMPOSTOR_CONFIG or default config)"
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="Port for web server (default: $IMPOSTOR_PORT or config port)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind to (default: $IMPOSTOR_HOST or config host)"
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed for reproducible rounds"
    )

    args = parser.parse_args()

    config = load_config(args.config)
    config.host = args.host or os.getenv("IMPOSTOR_HOST") or config.host
    config.port = args.port or int(os.getenv("IMPOSTOR_PORT", config.port))
    if args.seed is not None:
        config.random_seed = args.seed

    server = GameServer(config)
    server.start()


if __name__ == "__main__":
    main()
