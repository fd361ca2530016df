from __future__ import annotations

from django import forms
from django.template import Context, Template
from django.test import SimpleTestCase

from fieldkit.forms import FieldkitWidget


class RenderFieldTagTests(SimpleTestCase):
    def render(self, source, **context):
        return Template("{% load fieldkit %}" + source).render(Context(context))

    def test_select_renders_with_options_from_context(self):
        html = self.render(
            '{% render_field "select" name="size" options=sizes value="2" label="Size" %}',
            sizes={"Small": "1", "Large": "2"},
        )

        self.assertIn('<label for="size">Size</label>', html)
        self.assertIn('<option value="2" selected="selected">Large</option>', html)
        self.assertNotIn("&lt;select", html)

    def test_label_tag_renders_silent_label_for_checkbox(self):
        html = self.render('{% render_field_label "checkbox" name="agree" label="Agree" value="1" %}')

        self.assertEqual(html, '<p class="field-label" for="agree">Agree</p>')


class ProfileForm(forms.Form):
    title = forms.CharField(widget=FieldkitWidget("text", field_args={"placeholder": "Title"}))
    agree = forms.BooleanField(required=False, widget=FieldkitWidget("checkbox"))
    size = forms.ChoiceField(
        choices=[("1", "Small"), ("2", "Large")],
        widget=FieldkitWidget("select", field_args={"options": {"Small": "1", "Large": "2"}}),
    )


class FieldkitWidgetTests(SimpleTestCase):
    def test_unbound_form_renders_initial_values(self):
        form = ProfileForm(initial={"title": "Hello", "agree": True, "size": "2"})

        title = str(form["title"])
        agree = str(form["agree"])
        size = str(form["size"])

        self.assertIn('name="title" id="id_title" value="Hello" placeholder="Title"', title)
        self.assertIn('required="required"', title)
        self.assertIn('checked="checked"', agree)
        self.assertIn('<option value="2" selected="selected">Large</option>', size)

    def test_bound_form_round_trips_through_widget(self):
        form = ProfileForm(data={"title": "Report", "agree": "1", "size": "1"})

        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["title"], "Report")
        self.assertTrue(form.cleaned_data["agree"])
        self.assertIn('<option value="1" selected="selected">Small</option>', str(form["size"]))

    def test_unchecked_checkbox_is_false(self):
        form = ProfileForm(data={"title": "Report", "size": "1"})

        self.assertTrue(form.is_valid(), form.errors)
        self.assertFalse(form.cleaned_data["agree"])
        self.assertNotIn("checked", str(form["agree"]))
