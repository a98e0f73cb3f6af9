"""Model Context Protocol server for the Stadia Maps geospatial APIs.

The server runs as a standalone stdio process and exposes geocoding, routing,
isochrone, timezone and static map tools to agents.
"""

__version__ = "0.1.0"
