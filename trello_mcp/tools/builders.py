"""
Request builders - translate validated arguments into Trello REST requests.

Every builder is a pure function ``(args) -> OutboundRequest``. Optional
fields go into the query only when present with a non-null value; the
exceptions are the defaults injected by ``list_boards`` and the ``desc``
and ``due`` clearing of ``update_card``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import quote, urlencode

from trello_mcp.tools.schema import ToolValidationError

DEFAULT_BOARD_FILTER = "open"
DEFAULT_BOARD_FIELDS = "name,url,shortLink,desc,closed"
CLEAR_TOKEN = "null"


@dataclass(frozen=True)
class OutboundRequest:
    """An HTTP request description, relative to the API base URL."""

    method: str  # GET, POST, PUT, DELETE
    path: str
    query: Dict[str, str] = field(default_factory=dict)

    @property
    def target(self) -> str:
        """Path plus form-encoded query string."""
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(self.query)}"


Builder = Callable[[Mapping[str, Any]], OutboundRequest]


# ── Encoding helpers ──────────────────────────────────────────────────────


def encode_value(value: Any) -> str:
    """Booleans become ``true``/``false``; arrays are comma-joined in order."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


def _put_optional(query: Dict[str, str], args: Mapping[str, Any], name: str, key: Optional[str] = None) -> None:
    value = args.get(name)
    if value is not None:
        query[key or name] = encode_value(value)


# ── Builders ──────────────────────────────────────────────────────────────


def build_list_boards(args: Mapping[str, Any]) -> OutboundRequest:
    query = {
        "filter": args.get("filter") or DEFAULT_BOARD_FILTER,
        "fields": args.get("fields") or DEFAULT_BOARD_FIELDS,
    }
    return OutboundRequest("GET", "/members/me/boards", query)


def build_get_board(args: Mapping[str, Any]) -> OutboundRequest:
    query: Dict[str, str] = {}
    for name in ("lists", "cards", "members"):
        _put_optional(query, args, name)
    return OutboundRequest("GET", f"/boards/{_segment(args['board_id'])}", query)


def build_list_lists(args: Mapping[str, Any]) -> OutboundRequest:
    query: Dict[str, str] = {}
    for name in ("filter", "cards"):
        _put_optional(query, args, name)
    return OutboundRequest("GET", f"/boards/{_segment(args['board_id'])}/lists", query)


def build_list_cards(args: Mapping[str, Any]) -> OutboundRequest:
    query: Dict[str, str] = {}
    for name in ("filter", "fields"):
        _put_optional(query, args, name)

    # list_id wins when both are given.
    if args.get("list_id"):
        return OutboundRequest("GET", f"/lists/{_segment(args['list_id'])}/cards", query)
    if args.get("board_id"):
        return OutboundRequest("GET", f"/boards/{_segment(args['board_id'])}/cards", query)
    raise ToolValidationError("Either board_id or list_id is required")


def build_get_card(args: Mapping[str, Any]) -> OutboundRequest:
    query: Dict[str, str] = {}
    for name in ("members", "checklists", "attachments"):
        _put_optional(query, args, name)
    return OutboundRequest("GET", f"/cards/{_segment(args['card_id'])}", query)


def build_create_card(args: Mapping[str, Any]) -> OutboundRequest:
    query = {"idList": encode_value(args["list_id"]), "name": encode_value(args["name"])}
    for name in ("desc", "pos", "due", "dueComplete", "idMembers", "idLabels", "urlSource"):
        _put_optional(query, args, name)
    return OutboundRequest("POST", "/cards", query)


def build_update_card(args: Mapping[str, Any]) -> OutboundRequest:
    query: Dict[str, str] = {}
    _put_optional(query, args, "name")
    if "desc" in args:
        # A null description clears it, like an empty one.
        query["desc"] = encode_value(args["desc"]) if args["desc"] is not None else ""
    _put_optional(query, args, "closed")
    if "due" in args:
        # Present but empty means "remove the due date".
        query["due"] = encode_value(args["due"]) if args["due"] else CLEAR_TOKEN
    for name in ("dueComplete", "pos"):
        _put_optional(query, args, name)
    return OutboundRequest("PUT", f"/cards/{_segment(args['card_id'])}", query)


def build_move_card(args: Mapping[str, Any]) -> OutboundRequest:
    query = {"idList": encode_value(args["list_id"])}
    _put_optional(query, args, "board_id", key="idBoard")
    _put_optional(query, args, "pos")
    return OutboundRequest("PUT", f"/cards/{_segment(args['card_id'])}", query)


def build_add_comment(args: Mapping[str, Any]) -> OutboundRequest:
    return OutboundRequest(
        "POST",
        f"/cards/{_segment(args['card_id'])}/actions/comments",
        {"text": encode_value(args["text"])},
    )


def build_create_list(args: Mapping[str, Any]) -> OutboundRequest:
    query = {"name": encode_value(args["name"]), "idBoard": encode_value(args["board_id"])}
    _put_optional(query, args, "pos")
    return OutboundRequest("POST", "/lists", query)


def build_archive_card(args: Mapping[str, Any]) -> OutboundRequest:
    return OutboundRequest("PUT", f"/cards/{_segment(args['card_id'])}", {"closed": "true"})


def build_delete_card(args: Mapping[str, Any]) -> OutboundRequest:
    return OutboundRequest("DELETE", f"/cards/{_segment(args['card_id'])}")


BUILDERS: Dict[str, Builder] = {
    "list_boards": build_list_boards,
    "get_board": build_get_board,
    "list_lists": build_list_lists,
    "list_cards": build_list_cards,
    "get_card": build_get_card,
    "create_card": build_create_card,
    "update_card": build_update_card,
    "move_card": build_move_card,
    "add_comment": build_add_comment,
    "create_list": build_create_list,
    "archive_card": build_archive_card,
    "delete_card": build_delete_card,
}
