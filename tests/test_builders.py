"""Tests for the request builders."""

from urllib.parse import parse_qsl, urlsplit

import pytest

from trello_mcp.tools.builders import (
    BUILDERS,
    OutboundRequest,
    build_add_comment,
    build_archive_card,
    build_create_card,
    build_create_list,
    build_delete_card,
    build_get_board,
    build_get_card,
    build_list_boards,
    build_list_cards,
    build_list_lists,
    build_move_card,
    build_update_card,
    encode_value,
)
from trello_mcp.tools.catalog import TOOLS
from trello_mcp.tools.schema import ToolValidationError


def parsed_query(request: OutboundRequest) -> dict:
    return dict(parse_qsl(urlsplit(request.target).query, keep_blank_values=True))


class TestEncoding:
    def test_booleans(self):
        assert encode_value(True) == "true"
        assert encode_value(False) == "false"

    def test_arrays_keep_order_and_duplicates(self):
        assert encode_value(["b", "a", "b"]) == "b,a,b"

    def test_strings_untouched(self):
        assert encode_value("top") == "top"


class TestOutboundRequest:
    def test_target_without_query(self):
        assert OutboundRequest("DELETE", "/cards/c1").target == "/cards/c1"

    def test_target_form_encodes(self):
        request = OutboundRequest("POST", "/cards", {"name": "Fix bug & ship", "idMembers": "a,b"})

        assert request.target == "/cards?name=Fix+bug+%26+ship&idMembers=a%2Cb"

    def test_query_order_preserved(self):
        request = OutboundRequest("GET", "/x", {"b": "1", "a": "2"})

        assert request.target == "/x?b=1&a=2"


class TestListBoards:
    def test_defaults_injected(self):
        request = build_list_boards({})

        assert request.method == "GET"
        assert request.path == "/members/me/boards"
        assert request.query == {"filter": "open", "fields": "name,url,shortLink,desc,closed"}

    def test_caller_values_win(self):
        request = build_list_boards({"filter": "starred", "fields": "name"})

        assert request.query == {"filter": "starred", "fields": "name"}


class TestGetBoard:
    def test_minimal(self):
        request = build_get_board({"board_id": "b1"})

        assert (request.method, request.path, request.query) == ("GET", "/boards/b1", {})
        assert request.target == "/boards/b1"

    def test_optional_fields(self):
        request = build_get_board({"board_id": "b1", "lists": "open", "cards": "visible", "members": True})

        assert request.query == {"lists": "open", "cards": "visible", "members": "true"}


class TestListLists:
    def test_path_and_query(self):
        request = build_list_lists({"board_id": "b1", "filter": "closed"})

        assert request.path == "/boards/b1/lists"
        assert request.query == {"filter": "closed"}


class TestListCards:
    def test_by_list(self):
        request = build_list_cards({"list_id": "l1", "filter": "open"})

        assert request.path == "/lists/l1/cards"
        assert request.query == {"filter": "open"}

    def test_by_board(self):
        request = build_list_cards({"board_id": "b1"})

        assert request.path == "/boards/b1/cards"
        assert request.query == {}

    def test_list_wins_over_board(self):
        request = build_list_cards({"board_id": "b1", "list_id": "l1"})

        assert request.path == "/lists/l1/cards"

    def test_neither_identifier(self):
        with pytest.raises(ToolValidationError, match="Either board_id or list_id is required"):
            build_list_cards({"filter": "open"})

    def test_no_default_fields(self):
        assert "fields" not in build_list_cards({"board_id": "b1"}).query


class TestGetCard:
    def test_optional_fields(self):
        request = build_get_card({"card_id": "c1", "members": True, "checklists": "all", "attachments": False})

        assert request.path == "/cards/c1"
        assert request.query == {"members": "true", "checklists": "all", "attachments": "false"}


class TestCreateCard:
    def test_required_only(self):
        request = build_create_card({"list_id": "l1", "name": "Task"})

        assert request.method == "POST"
        assert request.path == "/cards"
        assert request.query == {"idList": "l1", "name": "Task"}

    def test_members_joined(self):
        request = build_create_card({"list_id": "l1", "name": "Task", "idMembers": ["a", "b"]})

        assert request.query["idMembers"] == "a,b"

    def test_all_optional_fields(self):
        request = build_create_card({
            "list_id": "l1",
            "name": "Task",
            "desc": "**bold**",
            "pos": "top",
            "due": "2026-01-01T00:00:00Z",
            "dueComplete": False,
            "idMembers": ["m1"],
            "idLabels": ["x", "y", "x"],
            "urlSource": "https://example.com",
        })

        assert request.query == {
            "idList": "l1",
            "name": "Task",
            "desc": "**bold**",
            "pos": "top",
            "due": "2026-01-01T00:00:00Z",
            "dueComplete": "false",
            "idMembers": "m1",
            "idLabels": "x,y,x",
            "urlSource": "https://example.com",
        }

    def test_null_optional_omitted(self):
        request = build_create_card({"list_id": "l1", "name": "Task", "due": None})

        assert "due" not in request.query


class TestUpdateCard:
    def test_absent_due_untouched(self):
        request = build_update_card({"card_id": "c1", "name": "Renamed"})

        assert request.method == "PUT"
        assert request.path == "/cards/c1"
        assert request.query == {"name": "Renamed"}

    @pytest.mark.parametrize("clear_value", [None, ""])
    def test_due_cleared(self, clear_value):
        request = build_update_card({"card_id": "c1", "due": clear_value})

        assert request.query == {"due": "null"}

    def test_due_set(self):
        request = build_update_card({"card_id": "c1", "due": "2026-03-01"})

        assert request.query == {"due": "2026-03-01"}

    def test_null_desc_cleared(self):
        request = build_update_card({"card_id": "c1", "desc": None})

        assert request.query == {"desc": ""}

    def test_absent_desc_untouched(self):
        assert "desc" not in build_update_card({"card_id": "c1", "closed": True}).query

    def test_booleans_and_empty_desc(self):
        request = build_update_card({"card_id": "c1", "desc": "", "closed": False, "dueComplete": True})

        assert request.query == {"desc": "", "closed": "false", "dueComplete": "true"}


class TestMoveCard:
    def test_cross_board(self):
        request = build_move_card({"card_id": "c1", "list_id": "l2", "board_id": "b2", "pos": "bottom"})

        assert request.method == "PUT"
        assert request.path == "/cards/c1"
        assert request.query == {"idList": "l2", "idBoard": "b2", "pos": "bottom"}

    def test_same_board(self):
        assert build_move_card({"card_id": "c1", "list_id": "l2"}).query == {"idList": "l2"}


class TestSimpleBuilders:
    def test_add_comment(self):
        request = build_add_comment({"card_id": "c1", "text": "Looks good"})

        assert request.method == "POST"
        assert request.path == "/cards/c1/actions/comments"
        assert request.query == {"text": "Looks good"}

    def test_create_list(self):
        request = build_create_list({"board_id": "b1", "name": "Doing", "pos": "top"})

        assert request.method == "POST"
        assert request.path == "/lists"
        assert request.query == {"name": "Doing", "idBoard": "b1", "pos": "top"}

    def test_archive_card(self):
        request = build_archive_card({"card_id": "c1"})

        assert request.target == "/cards/c1?closed=true"
        assert request.method == "PUT"

    def test_delete_card(self):
        request = build_delete_card({"card_id": "c1"})

        assert (request.method, request.target) == ("DELETE", "/cards/c1")

    def test_identifiers_are_path_encoded(self):
        assert build_delete_card({"card_id": "../boards/x"}).path == "/cards/..%2Fboards%2Fx"


class TestQueryRecovery:
    """Parsing a built target recovers every field that was set."""

    @pytest.mark.parametrize(
        "builder,args,expected",
        [
            (
                build_get_board,
                {"board_id": "b1", "cards": "open", "members": False},
                {"cards": "open", "members": "false"},
            ),
            (
                build_create_card,
                {"list_id": "l 1", "name": "Ship it, today & now", "desc": "a=b", "idLabels": ["p", "q"]},
                {"idList": "l 1", "name": "Ship it, today & now", "desc": "a=b", "idLabels": "p,q"},
            ),
            (
                build_update_card,
                {"card_id": "c1", "name": "N", "closed": True, "pos": "12.5"},
                {"name": "N", "closed": "true", "pos": "12.5"},
            ),
            (
                build_move_card,
                {"card_id": "c1", "list_id": "l9", "board_id": "b9"},
                {"idList": "l9", "idBoard": "b9"},
            ),
        ],
    )
    def test_recovers_present_fields(self, builder, args, expected):
        assert parsed_query(builder(args)) == expected


class TestBuilderTable:
    def test_every_tool_has_a_builder(self):
        assert [t.name for t in TOOLS] == list(BUILDERS)

    def test_builders_are_deterministic(self):
        args = {"list_id": "l1", "name": "Task", "idMembers": ["a", "b"]}

        assert build_create_card(args) == build_create_card(dict(args))
