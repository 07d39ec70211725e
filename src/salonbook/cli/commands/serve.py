"""Run the HTTP API server."""

import logging
import os

import click
import uvicorn

from salonbook.api.app import create_app
from salonbook.utils.log_setup import configure_logging

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", help="Interface to bind (default: SALONBOOK_HOST or 0.0.0.0)")
@click.option("--port", type=int, help="Port to listen on (default: PORT or 3000)")
@click.option("--reload", is_flag=True, help="Restart the server when source files change")
@click.pass_context
def serve(ctx, host: str | None, port: int | None, reload: bool):
    """Serve the JSON API.

    On SIGINT/SIGTERM the server stops accepting connections, waits up to
    SALONBOOK_SHUTDOWN_TIMEOUT seconds for in-flight requests, then closes
    the database pool.
    """
    db = ctx.obj["db"]
    settings = ctx.obj["settings"].with_overrides(host=host, port=port)
    configure_logging(settings.log_level)
    logger.info("Starting salonbook on %s:%d (environment: %s)", settings.host, settings.port, settings.environment)

    if reload:
        # The reloader imports the app in a fresh process, so hand it the database via the environment
        os.environ["SALONBOOK_DATABASE_URL"] = db.database_url
        db.disconnect()
        uvicorn.run(
            "salonbook.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=True,
            log_config=None,
        )
        return

    config = uvicorn.Config(
        create_app(db=db, settings=settings),
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_timeout,
        log_config=None,
    )
    server = uvicorn.Server(config)
    try:
        server.run()
    except Exception:
        logger.exception("Server stopped by an unhandled exception")
        db.disconnect()
        ctx.exit(1)


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
