# scripts/view_documents.py
"""
Load the documents view against a running API and print the rendered HTML.

Usage example:
    python -m scripts.view_documents --base-url http://localhost:8000
"""

import argparse
import asyncio
import sys

import httpx

from app.client.api import DocumentsClient
from app.client.view import DocumentsView, Failed

# the view contract has no timeout; this one only keeps the script from hanging
REQUEST_TIMEOUT_SECONDS = 10.0


async def render_once(base_url: str) -> DocumentsView:
    async with httpx.AsyncClient(base_url=base_url, timeout=REQUEST_TIMEOUT_SECONDS) as http:
        view = DocumentsView(DocumentsClient(http))
        await view.mount()
    return view


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--base-url", default="http://localhost:8000")
    args = parser.parse_args(argv)

    view = asyncio.run(render_once(args.base_url))
    print(view.render())
    return 1 if isinstance(view.state, Failed) else 0


if __name__ == "__main__":
    sys.exit(main())
