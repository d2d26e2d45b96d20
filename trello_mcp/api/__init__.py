"""
trello-mcp API module.

Authenticated HTTP access to the Trello REST API.
"""

from trello_mcp.api.transport import (
    MalformedResponseError,
    TrelloAPIError,
    TrelloClient,
    TrelloError,
    TrelloTransportError,
)

__all__ = [
    "MalformedResponseError",
    "TrelloAPIError",
    "TrelloClient",
    "TrelloError",
    "TrelloTransportError",
]
