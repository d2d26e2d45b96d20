"""The fixed catalog of Trello tools advertised to the agent."""

from __future__ import annotations

from typing import Tuple

from trello_mcp.tools.schema import ToolDef, ToolParam

BOARD_FILTERS = ("all", "closed", "members", "open", "organization", "public", "starred")
LIST_FILTERS = ("all", "closed", "none", "open")
CARD_FILTERS = ("all", "closed", "none", "open", "visible")
CHECKLIST_FILTERS = ("all", "none")

POSITION_HINT = "Position: 'top', 'bottom', or a positive number"


TOOLS: Tuple[ToolDef, ...] = (
    ToolDef(
        name="list_boards",
        description="List all boards for the authenticated user",
        params=(
            ToolParam(name="filter", enum=BOARD_FILTERS, description="Filter boards by type"),
            ToolParam(
                name="fields",
                description="Comma-separated list of fields to return (default: name,url)",
            ),
        ),
    ),
    ToolDef(
        name="get_board",
        description="Get a specific board by ID with detailed information",
        params=(
            ToolParam(name="board_id", required=True, description="The board ID or shortLink"),
            ToolParam(name="lists", enum=LIST_FILTERS, description="Include lists on the board"),
            ToolParam(name="cards", enum=CARD_FILTERS, description="Include cards on the board"),
            ToolParam(name="members", type="boolean", description="Include board members"),
        ),
    ),
    ToolDef(
        name="list_lists",
        description="List all lists on a board",
        params=(
            ToolParam(name="board_id", required=True, description="The board ID"),
            ToolParam(name="filter", enum=LIST_FILTERS, description="Filter lists"),
            ToolParam(name="cards", enum=LIST_FILTERS, description="Include cards in each list"),
        ),
    ),
    ToolDef(
        name="list_cards",
        description="List all cards on a board or in a specific list",
        params=(
            ToolParam(name="board_id", description="The board ID (required if no list_id)"),
            ToolParam(name="list_id", description="The list ID (optional, filters to specific list)"),
            ToolParam(name="filter", enum=CARD_FILTERS, description="Filter cards"),
            ToolParam(name="fields", description="Comma-separated list of fields to return"),
        ),
    ),
    ToolDef(
        name="get_card",
        description="Get a specific card by ID with detailed information",
        params=(
            ToolParam(name="card_id", required=True, description="The card ID or shortLink"),
            ToolParam(name="members", type="boolean", description="Include card members"),
            ToolParam(name="checklists", enum=CHECKLIST_FILTERS, description="Include checklists"),
            ToolParam(name="attachments", type="boolean", description="Include attachments"),
        ),
    ),
    ToolDef(
        name="create_card",
        description="Create a new card on a list",
        params=(
            ToolParam(name="list_id", required=True, description="The list ID to create the card in"),
            ToolParam(name="name", required=True, description="Card name/title"),
            ToolParam(name="desc", description="Card description (supports Markdown)"),
            ToolParam(name="pos", description=POSITION_HINT),
            ToolParam(name="due", description="Due date (ISO 8601 format or null)"),
            ToolParam(name="dueComplete", type="boolean", description="Whether the due date is complete"),
            ToolParam(name="idMembers", type="array", items="string", description="Member IDs to assign"),
            ToolParam(name="idLabels", type="array", items="string", description="Label IDs to apply"),
            ToolParam(name="urlSource", description="URL to attach to the card"),
        ),
    ),
    ToolDef(
        name="update_card",
        description="Update an existing card's properties",
        params=(
            ToolParam(name="card_id", required=True, description="The card ID"),
            ToolParam(name="name", description="New card name"),
            ToolParam(name="desc", description="New description"),
            ToolParam(name="closed", type="boolean", description="Archive/unarchive the card"),
            ToolParam(name="due", description="New due date (ISO 8601 format or null to remove)"),
            ToolParam(name="dueComplete", type="boolean", description="Mark due date complete/incomplete"),
            ToolParam(name="pos", description="New position: 'top', 'bottom', or a positive number"),
        ),
    ),
    ToolDef(
        name="move_card",
        description="Move a card to a different list or board",
        params=(
            ToolParam(name="card_id", required=True, description="The card ID to move"),
            ToolParam(name="list_id", required=True, description="Destination list ID"),
            ToolParam(
                name="board_id",
                description="Destination board ID (optional, for cross-board moves)",
            ),
            ToolParam(
                name="pos",
                description="Position in destination list: 'top', 'bottom', or number",
            ),
        ),
    ),
    ToolDef(
        name="add_comment",
        description="Add a comment to a card",
        params=(
            ToolParam(name="card_id", required=True, description="The card ID"),
            ToolParam(name="text", required=True, description="Comment text"),
        ),
    ),
    ToolDef(
        name="create_list",
        description="Create a new list on a board",
        params=(
            ToolParam(name="board_id", required=True, description="The board ID"),
            ToolParam(name="name", required=True, description="List name"),
            ToolParam(name="pos", description=POSITION_HINT),
        ),
    ),
    ToolDef(
        name="archive_card",
        description="Archive (close) a card",
        params=(ToolParam(name="card_id", required=True, description="The card ID to archive"),),
    ),
    ToolDef(
        name="delete_card",
        description="Permanently delete a card (cannot be undone)",
        params=(ToolParam(name="card_id", required=True, description="The card ID to delete"),),
    ),
)
