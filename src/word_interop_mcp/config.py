"""
Server configuration for word-interop-mcp.

Configuration comes from environment variables, optionally seeded from a
.env file in the working directory:

- MCP_TRANSPORT: "stdio" (default) or "sse"
- MCP_HOST: bind host for the sse transport (default 127.0.0.1, loopback
  only; use 0.0.0.0 to accept remote callers)
- PORT / MCP_PORT: bind port for the sse transport (default 3001)
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


SUPPORTED_TRANSPORTS = ("stdio", "sse")
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001
SSE_PATH = "/sse"
MESSAGE_PATH = "/messages/"


class ConfigError(ValueError):
    """Raised when the environment holds an unusable configuration."""


@dataclass(frozen=True)
class ServerConfig:
    transport: str = "stdio"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    sse_path: str = SSE_PATH
    message_path: str = MESSAGE_PATH


def load_config(environ=None, use_dotenv: bool = True) -> ServerConfig:
    """
    Build a ServerConfig from the environment.

    Args:
        environ: Mapping to read from (default: os.environ)
        use_dotenv: Load a .env file into os.environ first

    Returns:
        ServerConfig

    Raises:
        ConfigError: If MCP_TRANSPORT names an unsupported transport or
                     the port is not an integer
    """
    if use_dotenv:
        load_dotenv()
    env = os.environ if environ is None else environ

    transport = env.get("MCP_TRANSPORT", "stdio").strip().lower()
    if transport not in SUPPORTED_TRANSPORTS:
        raise ConfigError(
            f"Unsupported MCP_TRANSPORT: {transport}. Use 'stdio' or 'sse'."
        )

    raw_port = env.get("PORT", env.get("MCP_PORT", str(DEFAULT_PORT)))
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigError(f"Invalid port: {raw_port!r}")

    return ServerConfig(
        transport=transport,
        host=env.get("MCP_HOST", DEFAULT_HOST),
        port=port,
    )
