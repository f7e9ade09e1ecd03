"""HTTP API of the sequencer."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from http import HTTPStatus
from typing import Awaitable, Callable

from aiohttp import web

from anunaya.errors import ApiError, SequencerError
from anunaya.logger import setup_logger
from anunaya.sequencer import SequencerConfig, SequencerContext
from anunaya.store import TransactionStore
from anunaya.transaction import SignedTransaction

logger = logging.getLogger(__name__)

VERSION = "v0.0.1-rc1"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3033
MEMPOOL_MAX_TXS = 100

CONTEXT_KEY = web.AppKey("sequencer_context", SequencerContext)

_Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Expose-Headers": "*",
}


def _error_response(status: int, message: str) -> web.Response:
    return web.Response(status=status, text=message)


@web.middleware
async def _cors_middleware(request: web.Request, handler: _Handler) -> web.StreamResponse:
    if (
        request.method == "OPTIONS"
        and "Access-Control-Request-Method" in request.headers
    ):
        response: web.StreamResponse = web.Response(status=HTTPStatus.OK)
        response.headers["Access-Control-Allow-Methods"] = request.headers[
            "Access-Control-Request-Method"
        ]
        requested = request.headers.get("Access-Control-Request-Headers")
        if requested:
            response.headers["Access-Control-Allow-Headers"] = requested
    else:
        try:
            response = await handler(request)
        except web.HTTPException as exc:
            response = exc
    response.headers.update(_CORS_HEADERS)
    return response


@web.middleware
async def _trace_middleware(request: web.Request, handler: _Handler) -> web.StreamResponse:
    logger.debug("started processing request %s %s", request.method, request.path)
    try:
        response = await handler(request)
    except web.HTTPException as exc:
        logger.debug("finished processing request status=%s", exc.status)
        raise
    logger.debug("finished processing request status=%s", response.status)
    return response


async def handle_info(request: web.Request) -> web.Response:
    """Report the sequencer version."""
    return web.json_response({"version": VERSION})


async def handle_submit_transaction(request: web.Request) -> web.Response:
    """Accept a signed transaction into the mempool."""
    if request.content_type != "application/json":
        return _error_response(
            HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
            "Expected request with `Content-Type: application/json`",
        )
    try:
        body = json.loads(await request.text())
    except ValueError as exc:
        return _error_response(
            HTTPStatus.BAD_REQUEST, f"Failed to parse the request body as JSON: {exc}"
        )
    try:
        payload = SignedTransaction.from_dict(body)
    except (ValueError, TypeError) as exc:
        return _error_response(
            HTTPStatus.UNPROCESSABLE_ENTITY,
            f"Failed to deserialize the JSON body into the target type: {exc}",
        )

    ctx = request.config_dict[CONTEXT_KEY]
    try:
        ctx.accept_tx(payload.encode())
    except SequencerError as exc:
        error = ApiError.from_sequencer_error(exc)
        return _error_response(error.status, error.message)

    return web.json_response({"tx_commit": "trasnacrion_hash"})


def build_app(ctx: SequencerContext) -> web.Application:
    """Build the application serving the API under ``/api/v1``."""
    api = web.Application(middlewares=[_trace_middleware])
    api.router.add_get("/info", handle_info)
    api.router.add_post("/submit_transaction", handle_submit_transaction)

    app = web.Application(middlewares=[_cors_middleware])
    app[CONTEXT_KEY] = ctx
    app.add_subapp("/api/v1", api)
    return app


async def serve(
    ctx: SequencerContext, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> None:
    """Serve the API until cancelled."""
    runner = web.AppRunner(build_app(ctx))
    await runner.setup()
    try:
        site = web.TCPSite(runner, host, port)
        await site.start()
        logger.info("Starting the server on %s:%s", host, port)
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()


def main(argv: list[str] | None = None) -> int:
    """Run the sequencer."""
    parser = argparse.ArgumentParser(description="Run the rollup sequencer.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    setup_logger(2, "Sequencer")
    ctx = SequencerContext(SequencerConfig(), TransactionStore(MEMPOOL_MAX_TXS))
    try:
        asyncio.run(serve(ctx, args.host, args.port))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())