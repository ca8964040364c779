"""FastAPI web server streaming GPS navigation events.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive a stream
of JSON messages, one per navigation event, e.g. ``type="position"`` and
``type="date_time"`` for every RMC sentence and ``type="satellite"`` for
every satellite block of a GSV sentence. Connect to
``/ws?types=satellite,hdop`` to receive only those message types.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from pigps.gnss import GPSReader
from server.broadcaster import add_client, parse_categories, remove_client
from server.sensors import run_gps_loop

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 32
_TIMEOUT_SECONDS = 5.0


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(_application: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )
    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=1)
    with GPSReader() as gps:
        loop.run_in_executor(executor, run_gps_loop, loop, gps)
        logger.info("GPS event stream ready")
        yield
        gps.cancel()
    executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket, types: str | None = None) -> None:
    """Stream navigation event JSON messages to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall the reader thread. The connection closes with code 1001, and
    the client should reconnect, if no event arrives within
    ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
        types: Optional comma-separated message types to receive, e.g.
            ``/ws?types=position,fix_lost``. Unknown types close the
            connection with code 1008.
    """
    try:
        categories = parse_categories(types)
    except ValueError:
        await websocket.accept()
        await websocket.close(code=1008)
        return

    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    client = add_client(queue, categories)
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        remove_client(client)
