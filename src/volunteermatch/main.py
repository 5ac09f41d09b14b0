"""Main entry point for the volunteermatch MCP server."""

import logging

from .interface.mcp.server import create_server


def main():
    """Run the MCP server over stdio."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    create_server().run(transport="stdio")


if __name__ == "__main__":
    main()
