"""trello-mcp command-line interface."""
