from conftest import Element, Input, ListAggregations, OpaqueBinding, Panel
from formcheck.controls import ControlCapabilityView, Signal, ValueState


class Exploding:
    def get_value(self):
        raise RuntimeError("boom")

    def get_required(self):
        return True

    def set_value_state(self, state):
        raise RuntimeError("renderer gone")


def test_missing_capabilities_read_as_none():
    view = ControlCapabilityView(object())
    assert view.value is None
    assert view.selected is None
    assert view.selected_keys is None
    assert view.selected_index is None
    assert view.tokens is None
    assert view.min is None
    assert view.max is None
    assert view.required is None
    assert view.custom_data("required") is None
    assert view.kind is None
    assert view.id is None
    assert view.children == []
    assert view.binding_parts("value") is None


def test_failing_accessor_does_not_block_other_capabilities():
    view = ControlCapabilityView(Exploding())
    assert view.value is None
    assert view.required is True


def test_state_write_never_raises():
    ControlCapabilityView(Exploding()).write_state(ValueState.ERROR)
    ControlCapabilityView(object()).write_state(ValueState.NONE)


def test_state_write_passes_plain_string():
    control = Input()
    ControlCapabilityView(control).write_state(ValueState.ERROR)
    assert control.states == ["Error"]


def test_attach_unsupported_signal_is_noop():
    control = Element()
    assert ControlCapabilityView(control).attach(Signal.CHANGE, print) is False
    assert control.handlers == {}
    assert ControlCapabilityView(object()).attach(Signal.CHANGE, print) is False


def test_children_skip_missing_aggregations():
    a, b = Input("a"), Input("b")
    view = ControlCapabilityView(Panel(tooltip=None, content=[a, None], footer=b, empty=()))
    assert view.children == [a, b]


def test_non_mapping_aggregations_have_no_children():
    assert ControlCapabilityView(ListAggregations()).children == []


def test_unreadable_binding_info_has_no_parts():
    assert ControlCapabilityView(OpaqueBinding()).binding_parts("value") is None


def test_mapping_binding_context_supplies_base_path():
    control = Input(contexts={None: {"path": "/Orders/7"}})
    assert ControlCapabilityView(control).binding_base_path(None) == "/Orders/7"


def test_text_tokens_are_not_split_into_characters():
    class TextTokens(Input):
        def get_tokens(self):
            return "abc"

    assert ControlCapabilityView(TextTokens()).tokens is None
