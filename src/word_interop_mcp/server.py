"""
FastMCP server for word-interop-mcp.

This module builds the MCP server instance, binds every tool area to a single
WordService (and through it a single Word.Application handle), and starts the
transport selected by MCP_TRANSPORT:

- stdio (default): one local client over stdin/stdout
- sse: HTTP server; clients open a session on /sse and post messages to
  /messages/?session_id=<id>. The SDK keeps one transport per session and
  drops it when the connection closes. The listener binds 127.0.0.1 by
  default; set MCP_HOST=0.0.0.0 to serve callers on other machines.

Entry point: Run with `python -m word_interop_mcp.server` or via the
`word-interop-mcp` command.
"""

import sys
from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP

from .com_manager import WordApplicationManager
from .config import ConfigError, ServerConfig, load_config
from .logging_config import get_logger
from .tools import register_all_tools
from .word_service import WordService

logger = get_logger(__name__)

SERVER_NAME = "word-interop-mcp"
SERVER_INSTRUCTIONS = (
    "MCP Server for interacting with Microsoft Word. Tools act on the active "
    "document and the current selection of a visible Word instance."
)


@asynccontextmanager
async def app_lifespan(server):
    """
    Lifespan context manager for server startup and shutdown logging.

    Word is deliberately left running on shutdown: the instance is visible
    and may hold the user's own documents.
    """
    logger.info("server_starting", name=SERVER_NAME)
    try:
        yield {}
    finally:
        logger.info("server_shutdown_complete")


def create_server(config: ServerConfig = None, service: WordService = None) -> FastMCP:
    """
    Build a FastMCP server with every tool registered.

    Args:
        config: Transport settings (default: ServerConfig())
        service: WordService to bind tools to (default: a new service over a
                 new WordApplicationManager)

    Returns:
        Configured FastMCP instance
    """
    config = config or ServerConfig()
    service = service or WordService(WordApplicationManager())

    mcp = FastMCP(
        SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
        lifespan=app_lifespan,
        host=config.host,
        port=config.port,
        sse_path=config.sse_path,
        message_path=config.message_path,
    )
    register_all_tools(mcp, service)
    return mcp


def main():
    """
    Main entry point for word-interop-mcp.

    Exits with status 1 when MCP_TRANSPORT names an unsupported transport.
    """
    try:
        config = load_config()
    except ConfigError as e:
        logger.error("server_config_invalid", error=str(e))
        sys.exit(1)

    mcp = create_server(config)

    if config.transport == "sse":
        logger.info(
            "server_listening",
            transport="sse",
            host=config.host,
            port=config.port,
            sse_path=config.sse_path,
            message_path=config.message_path,
        )
    else:
        logger.info("server_listening", transport="stdio")

    mcp.run(transport=config.transport)


if __name__ == "__main__":
    main()
