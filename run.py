#!/usr/bin/env python3
"""
Grammar Checker - Development Launcher

Starts the FastAPI backend with uvicorn.

Usage:
    python run.py                    # localhost:3001 with auto-reload
    python run.py --host 0.0.0.0     # Network accessible
    python run.py --port 8080        # Custom port
    python run.py --no-reload        # Production-style single process

Environment Variables:
    - OPENAI_API_KEY: primary provider (optional)
    - GEMINI_API_KEY: secondary provider (optional)
    Without either key the built-in heuristic checker is used.
"""

import argparse
import sys
from pathlib import Path

import uvicorn

ROOT = Path(__file__).resolve().parent
BACKEND_DIR = ROOT / "backend"

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3001


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description='Grammar Checker - Development Launcher',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py                    # Start backend (localhost only)
  python run.py --host 0.0.0.0     # Start on all interfaces (network accessible)
  python run.py --port 8080        # Start on a different port
        """
    )
    parser.add_argument(
        '--host',
        type=str,
        default=DEFAULT_HOST,
        help=f'Host to bind to (default: {DEFAULT_HOST}). Use 0.0.0.0 for network access'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=DEFAULT_PORT,
        help=f'Port to listen on (default: {DEFAULT_PORT})'
    )
    parser.add_argument(
        '--no-reload',
        action='store_true',
        help='Disable auto-reload on code changes'
    )
    return parser


def main() -> int:
    args = create_argument_parser().parse_args()

    print(f"Grammar Checker API running on http://{args.host}:{args.port}")
    print(f"Health check: http://{args.host}:{args.port}/api/health")

    uvicorn.run(
        'gramcheck.main:app',
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
        app_dir=str(BACKEND_DIR),
    )
    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
