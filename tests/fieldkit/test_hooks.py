from __future__ import annotations

import pytest
from django.test import override_settings

from fieldkit.constants import FieldHook
from fieldkit.exceptions import InvalidFieldSpec
from fieldkit.field import Field
from fieldkit.hooks import (
    FIELD_FILTERS,
    FilterPipeline,
    load_configured_filters,
    parse_filter_string,
    register_field_filter,
    silent_label,
)


def _nothing_stored(name, context):
    return None


def _upper(markup, spec, field_type):
    return markup.upper()


def _wrap(markup, spec, field_type):
    return f"[{markup}]"


def test_callbacks_run_in_registration_order():
    pipeline = FilterPipeline()
    pipeline.add("raw_html", _upper)
    pipeline.add(FieldHook.RAW_HTML, _wrap)

    assert pipeline.apply("raw_html", "abc", None, "text") == "[ABC]"
    assert pipeline.apply(FieldHook.LABEL_HTML, "abc", None, "text") == "abc"
    assert pipeline.callbacks(FieldHook.RAW_HTML) == (_upper, _wrap)


def test_callback_returning_none_clears_markup():
    pipeline = FilterPipeline({"html": [lambda markup, spec, field_type: None]})

    assert pipeline.apply("html", "<div></div>", None, "text") == ""


def test_remove_single_callback_or_whole_event():
    pipeline = FilterPipeline({"html": [_upper, _wrap], "label_html": [_wrap]})

    pipeline.remove("html", _upper)
    assert pipeline.callbacks("html") == (_wrap,)

    pipeline.remove("html")
    assert "html" not in pipeline
    assert pipeline.events() == ["label_html"]
    assert len(pipeline) == 1


def test_non_callable_is_rejected():
    with pytest.raises(TypeError):
        FilterPipeline().add("html", "not callable")


def test_derived_pipeline_is_independent():
    parent = FilterPipeline({"html": [_upper]})
    child = parent.derive()
    child.add("html", _wrap)
    child.add("label_html", _wrap)

    assert parent.callbacks("html") == (_upper,)
    assert "label_html" not in parent
    assert child.apply("html", "a", None, "text") == "[A]"


def test_hooks_receive_spec_and_field_type():
    seen = []

    def capture(markup, spec, field_type):
        seen.append((spec.name, field_type))
        return markup

    pipeline = FilterPipeline({"raw_html": [capture], "html": [capture]})
    Field("email", {"name": "contact"}, lookup=_nothing_stored, pipeline=pipeline)

    assert seen == [("contact", "email"), ("contact", "email")]


@pytest.mark.parametrize(
    "field_type, args",
    [
        ("checkbox", {"name": "agree", "label": "Agree"}),
        ("radio", {"name": "plan", "label": "Plan"}),
        ("media", {"name": "logo"}),
        ("icon", {"name": "badge"}),
        ("color", {"name": "accent"}),
        ("video", {"name": "clip"}),
        ("text", {"name": "x", "label": "X", "add_filter": "label_html:fieldkit.hooks.silent_label"}),
    ],
)
def test_render_scoped_hooks_do_not_leak(field_type, args):
    before = {event: FIELD_FILTERS.callbacks(event) for event in FIELD_FILTERS.events()}
    base = FilterPipeline()

    Field(field_type, args, lookup=_nothing_stored)
    Field(field_type, args, lookup=_nothing_stored, pipeline=base)

    after = {event: FIELD_FILTERS.callbacks(event) for event in FIELD_FILTERS.events()}
    assert after == before
    assert len(base) == 0


def test_hooks_do_not_leak_when_rendering_fails():
    def explode(markup, spec, field_type):
        raise RuntimeError("filter failed")

    pipeline = FilterPipeline({"raw_html": [explode]})

    with pytest.raises(RuntimeError):
        Field("checkbox", {"name": "agree", "label": "Agree"}, lookup=_nothing_stored, pipeline=pipeline)

    assert pipeline.events() == ["raw_html"]
    assert pipeline.callbacks("label_html") == ()

    later = Field("text", {"name": "x", "label": "X"}, lookup=_nothing_stored)
    assert later.label_html == '<label for="x">X</label>'


def test_declared_filter_applies_to_its_render_only():
    declared = Field(
        "text",
        {"name": "x", "label": "X", "add_filter": "label_html:fieldkit.hooks.silent_label"},
        lookup=_nothing_stored,
    )
    plain = Field("text", {"name": "x", "label": "X"}, lookup=_nothing_stored)

    assert declared.label_html == '<p class="field-label" for="x">X</p>'
    assert plain.label_html == '<label for="x">X</label>'


def test_declared_filter_with_unknown_callback_raises():
    with pytest.raises(InvalidFieldSpec):
        Field("text", {"name": "x", "add_filter": "html:fieldkit.hooks.missing"}, lookup=_nothing_stored)


@pytest.mark.parametrize("declaration", ["", None, "no-separator", "html:", ":fieldkit.hooks.silent_label"])
def test_parse_filter_string_ignores_incomplete_declarations(declaration):
    assert parse_filter_string(declaration) is None


def test_parse_filter_string_imports_callback():
    assert parse_filter_string(" label_html : fieldkit.hooks.silent_label ") == ("label_html", silent_label)


def test_global_filters_apply_to_every_render(global_filters):
    register_field_filter("html", _wrap)
    register_field_filter("html", _wrap)

    field = Field("text", {"name": "x"}, lookup=_nothing_stored)

    assert global_filters.callbacks("html") == (_wrap,)
    assert field.get_markup().startswith("[<div")
    assert field.get_markup().endswith("</div>]")


def test_configured_filters_are_loaded(global_filters):
    with override_settings(
        FIELDKIT_FILTERS=[
            "label_html:fieldkit.hooks.silent_label",
            "broken",
            "html:fieldkit.hooks.does_not_exist",
        ]
    ):
        load_configured_filters()

    assert global_filters.callbacks("label_html") == (silent_label,)
    assert "html" not in global_filters


def test_silent_label():
    assert silent_label('<label for="a">A</label>') == '<p class="field-label" for="a">A</p>'


def test_declared_filter_that_is_not_callable_raises():
    with pytest.raises(InvalidFieldSpec):
        Field(
            "text",
            {"name": "x", "add_filter": "html:fieldkit.constants.RESERVED_KEYS"},
            lookup=_nothing_stored,
        )


def test_configured_filter_that_is_not_callable_is_skipped(global_filters):
    with override_settings(
        FIELDKIT_FILTERS=[
            "html:fieldkit.constants.RESERVED_KEYS",
            "label_html:fieldkit.hooks.silent_label",
        ]
    ):
        load_configured_filters()

    assert "html" not in global_filters
    assert global_filters.callbacks("label_html") == (silent_label,)
