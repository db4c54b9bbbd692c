# Path: readidx/api/__main__.py
"""
Run the HTTP surface with uvicorn.

Usage:
    python -m readidx.api [--host 0.0.0.0] [--port 8000]
"""

import argparse

import uvicorn

from ..cli.common import initialize_system


def main() -> None:
    parser = argparse.ArgumentParser(prog='readidx-api', description='Serve the readidx API')
    parser.add_argument('--host', default='127.0.0.1')
    parser.add_argument('--port', type=int, default=8000)
    args = parser.parse_args()

    initialize_system()
    uvicorn.run('readidx.api.app:app', host=args.host, port=args.port)


if __name__ == '__main__':
    main()
