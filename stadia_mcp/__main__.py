import argparse
import logging
import sys

from stadia_mcp.config import LOG_LEVEL, StadiaConfig
from stadia_mcp.client import StadiaClient
from stadia_mcp.server import create_server


logger = logging.getLogger("stadia_mcp")


def main() -> None:
    parser = argparse.ArgumentParser(description="Stadia Maps MCP server")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default="stdio",
        help="MCP transport to serve on (default: %(default)s)",
    )
    args = parser.parse_args()

    # stdout carries MCP messages on the stdio transport.
    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    config = StadiaConfig.from_env()
    if not config.api_key:
        logger.warning("API_KEY is not set; every tool call will fail until it is provided")

    server = create_server(StadiaClient(config))
    logger.info("Stadia Maps MCP server running on %s", args.transport)
    server.run(transport=args.transport)


if __name__ == "__main__":
    main()
