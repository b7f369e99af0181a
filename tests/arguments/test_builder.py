"""Tests for ArgumentBuilder's three-tier merge."""

from datetime import datetime, timezone

from mcp_bridge.arguments.builder import ArgumentBuilder
from mcp_bridge.arguments.models import GenericParameter, ToolFieldSpec


class TestSpecializedTools:
    def test_input_record_wins_over_ui_field(self) -> None:
        builder = ArgumentBuilder()
        args = builder.build(
            "send_message",
            ui_fields={"to": "+1555"},
            generic_params=[GenericParameter(name="ignored", value="1")],
            input_record={"to": "+1999"},
        )
        assert args == {"to": "+1999"}

    def test_only_declared_fields_are_read(self) -> None:
        args = ArgumentBuilder().build(
            "send_message",
            ui_fields={"to": "+1555", "message": "hi", "scheduledTime": "2026-01-01"},
        )
        assert args == {"to": "+1555", "message": "hi"}

    def test_empty_strings_omitted(self) -> None:
        args = ArgumentBuilder().build("send_message", ui_fields={"to": "", "message": None})
        assert args == {}

    def test_schedule_message_datetime(self) -> None:
        when = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)
        args = ArgumentBuilder().build(
            "schedule_message",
            ui_fields={"to": "+1555", "message": "later", "scheduledTime": when},
        )
        assert args["scheduledTime"] == "2026-10-19T09:30:00+00:00"

    def test_create_group_defaults_included(self) -> None:
        args = ArgumentBuilder().build("create_group", ui_fields={"name": "VIP"})
        assert args == {"name": "VIP", "hidden": False, "sortOrder": 0, "isTemporary": False}

    def test_create_group_settings_parsed(self) -> None:
        args = ArgumentBuilder().build(
            "create_group",
            ui_fields={"name": "VIP", "settings": '{"rules": [{"tag": "vip"}]}'},
        )
        assert args["settings"] == {"rules": [{"tag": "vip"}]}

    def test_invalid_json_field_silently_omitted(self) -> None:
        builder = ArgumentBuilder()
        report = builder.build_report(
            "create_group", ui_fields={"name": "VIP", "settings": "{broken"}
        )
        assert "settings" not in report.arguments
        assert report.arguments["name"] == "VIP"
        assert [s.name for s in report.skipped] == ["settings"]
        assert report.skipped[0].source == "field"

    def test_structured_json_field_passthrough(self) -> None:
        subscribers = [{"number": "+1555"}, {"email": "a@example.com"}]
        args = ArgumentBuilder().build(
            "add_subscribers", ui_fields={"subscribers": subscribers, "createOnly": True}
        )
        assert args == {"subscribers": subscribers, "createOnly": True}

    def test_add_subscribers_string_json(self) -> None:
        args = ArgumentBuilder().build(
            "add_subscribers", ui_fields={"subscribers": '[{"number": "+1555"}]'}
        )
        assert args == {"subscribers": [{"number": "+1555"}], "createOnly": False}

    def test_custom_tool_table(self) -> None:
        builder = ArgumentBuilder({"ping": [ToolFieldSpec(name="host")]})
        assert builder.is_specialized("ping")
        assert not builder.is_specialized("send_message")
        assert builder.build("ping", ui_fields={"host": "example.com"}) == {"host": "example.com"}


class TestGenericParameters:
    def test_json_coercion(self) -> None:
        args = ArgumentBuilder().build(
            "list_groups",
            generic_params=[
                GenericParameter(name="limit", value="42"),
                GenericParameter(name="query", value="not json"),
                GenericParameter(name="filter", value='{"active": true}'),
            ],
        )
        assert args == {"limit": 42, "query": "not json", "filter": {"active": True}}

    def test_unparsed_values_reported(self) -> None:
        report = ArgumentBuilder().build_report(
            "list_groups", generic_params=[GenericParameter(name="query", value="hello")]
        )
        assert report.arguments == {"query": "hello"}
        assert report.skipped[0].source == "parameter"

    def test_non_json_constants_sent_as_strings(self) -> None:
        report = ArgumentBuilder().build_report(
            "custom", generic_params=[("x", "NaN"), ("y", "Infinity"), ("z", "-Infinity")]
        )
        assert report.arguments == {"x": "NaN", "y": "Infinity", "z": "-Infinity"}
        assert [skip.name for skip in report.skipped] == ["x", "y", "z"]

    def test_deeply_nested_value_does_not_escape(self) -> None:
        text = "[" * 200_000
        args = ArgumentBuilder().build("custom", generic_params=[("x", text)])
        assert args == {"x": text}

    def test_tuple_and_mapping_rows(self) -> None:
        args = ArgumentBuilder().build(
            "list_groups", generic_params=[("page", "2"), {"name": "flag", "value": "false"}]
        )
        assert args == {"page": 2, "flag": False}

    def test_non_string_values_passthrough(self) -> None:
        args = ArgumentBuilder().build(
            "list_groups", generic_params=[GenericParameter(name="ids", value=[1, 2])]
        )
        assert args == {"ids": [1, 2]}

    def test_empty_name_ignored(self) -> None:
        args = ArgumentBuilder().build(
            "list_groups", generic_params=[GenericParameter(name="", value="1")]
        )
        assert args == {}

    def test_ui_fields_ignored_for_generic_tools(self) -> None:
        args = ArgumentBuilder().build("list_groups", ui_fields={"to": "+1555"})
        assert args == {}

    def test_generic_builder_ignores_specialized_fields(self) -> None:
        builder = ArgumentBuilder({})
        args = builder.build(
            "send_message",
            ui_fields={"to": "+1555"},
            generic_params=[GenericParameter(name="to", value="+1777")],
        )
        assert args == {"to": "+1777"}


class TestInputRecordOverlay:
    def test_metadata_keys_filtered(self) -> None:
        args = ArgumentBuilder().build(
            "list_groups",
            input_record={"page": 1, "_meta": "x", "json": {"nested": True}, "__id": 3},
        )
        assert args == {"page": 1}

    def test_record_overrides_generic_params(self) -> None:
        args = ArgumentBuilder().build(
            "list_groups",
            generic_params=[GenericParameter(name="page", value="1")],
            input_record={"page": 5},
        )
        assert args == {"page": 5}

    def test_custom_metadata_filter(self) -> None:
        builder = ArgumentBuilder(metadata_filter=lambda key: key.startswith("$"))
        args = builder.build("list_groups", input_record={"$id": 1, "_keep": 2})
        assert args == {"_keep": 2}

    def test_non_mapping_record_ignored(self) -> None:
        assert ArgumentBuilder().build("list_groups", input_record=["a"]) == {}
        assert ArgumentBuilder().build("list_groups", input_record=None) == {}
