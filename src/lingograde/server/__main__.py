"""lingograde JSON-lines server entry point.

Usage: python -m lingograde.server

Reads JSON requests from stdin (one per line), writes JSON responses to stdout.
All logging goes to stderr to keep the protocol clean.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import asdict

from .handler import ServerHandler
from .protocol import Request, Response

logger = logging.getLogger("lingograde.server")


async def serve(handler: ServerHandler, reader: asyncio.StreamReader, write_line) -> None:
    while True:
        line = await reader.readline()
        if not line:
            break  # stdin closed

        line_str = line.decode("utf-8", errors="replace").strip()
        if not line_str:
            continue

        try:
            request = Request.from_line(line_str)
        except ValueError as e:
            write_line(Response(id=0, error=f"Invalid request: {e}").to_json_line())
            continue

        try:
            result = await handler.dispatch(asdict(request))
            resp = Response(id=request.id, result=result)
        except Exception as e:
            logger.error("request %s (%s) failed: %s", request.id, request.method, e)
            resp = Response(id=request.id, error=str(e))

        write_line(resp.to_json_line())


async def main() -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    loop = asyncio.get_event_loop()

    def write_line(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    handler = ServerHandler()
    logger.info("ready")

    reader = asyncio.StreamReader()
    protocol = asyncio.StreamReaderProtocol(reader)
    await loop.connect_read_pipe(lambda: protocol, sys.stdin)

    await serve(handler, reader, write_line)


if __name__ == "__main__":
    asyncio.run(main())
