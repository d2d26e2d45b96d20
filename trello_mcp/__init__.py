"""
trello-mcp - Trello boards, lists, and cards as MCP tools.

A stateless translator between a tool-calling agent and the Trello REST API:
- Tools are declared once in a fixed catalog (name, description, schema)
- Each call is validated, turned into one HTTP request, and answered
- Every outcome, failures included, comes back as a text envelope

Run `trello-mcp serve` with TRELLO_API_KEY and TRELLO_TOKEN set.
"""

__version__ = "1.0.0"
__license__ = "Apache-2.0"

MCP_NAME = "trello"

__all__ = [
    "MCP_NAME",
    "__version__",
]
