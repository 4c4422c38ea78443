"""
React Flow MCP server entry point.

Serves React Flow component, hook, type, utility, example and guide
documentation to MCP clients over stdio.
"""

import argparse

from loguru import logger

from flowdocs.protocol import create_server
from flowdocs.services.dispatcher import create_dispatcher
from flowdocs.settings import global_settings
from flowdocs.utils import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=global_settings.server_name,
        description="React Flow MCP Server",
        epilog=(
            "Environment variables:\n"
            "  LOG_LEVEL      Log level (debug, info, warn, error) - default: info\n\n"
            "For more information, visit: https://reactflow.dev"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{global_settings.server_name} v{global_settings.version}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, wire the pipeline and serve until stdin closes."""
    parse_args(argv)
    setup_logging(global_settings.log_level)

    logger.info("Starting React Flow MCP Server...")
    try:
        dispatcher = create_dispatcher(global_settings)
        server = create_server(dispatcher, global_settings)
        logger.info("Transport initialized: stdio")
        server.run()
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down...")
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        raise SystemExit(1) from e
    finally:
        logger.info("React Flow MCP Server stopped")


if __name__ == "__main__":
    main()
