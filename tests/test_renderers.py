"""Tests for the core control renderers."""

import datetime
from enum import Enum

from semantic_formgen.forms.form_builder import FormBuilder


class Color(Enum):
    DARK_RED = "dark_red"
    BLUE = "blue"


# ==================== TEXT-LIKE INPUTS ====================

def test_string_input_renders_current_value(person):
    html = FormBuilder(person).input("first_name")
    assert '<input type="text" id="person_first_name" name="person[first_name]" required value="Ann">' in html


def test_password_never_echoes_value(person):
    person.password = "secret"
    html = FormBuilder(person).input("password")
    assert '<input type="password" id="person_password" name="person[password]">' in html
    assert "secret" not in html


def test_textarea_escapes_content(article):
    article.body = "<script>"
    html = FormBuilder(article).input("body")
    assert '<textarea rows="20" id="article_body" name="article[body]">&lt;script&gt;</textarea>' in html


def test_hidden_input_drops_required_attribute(person):
    html = FormBuilder(person).input("first_name", as_="hidden")
    assert '<input type="hidden" id="person_first_name" name="person[first_name]" value="Ann">' in html


def test_input_html_overrides_defaults(person):
    html = FormBuilder(person).input("email", input_html={"id": "mail", "class": "wide", "value": "x@y.z"})
    assert 'id="mail"' in html
    assert 'class="wide"' in html
    assert 'value="x@y.z"' in html
    assert 'for="mail"' in html


# ==================== TEMPORAL INPUTS ====================

def test_temporal_values_are_formatted(settings):
    settings.birthday = datetime.date(2024, 5, 1)
    settings.wakes_at = datetime.time(7, 30)
    settings.updated = datetime.datetime(2024, 5, 1, 9, 15, 42)
    builder = FormBuilder(settings)

    assert 'type="date"' in builder.input("birthday")
    assert 'value="2024-05-01"' in builder.input("birthday")
    assert 'value="07:30"' in builder.input("wakes_at")
    assert 'type="datetime-local"' in builder.input("updated")
    assert 'value="2024-05-01T09:15"' in builder.input("updated")


# ==================== CHOICE INPUTS ====================

def test_select_marks_selected_choice_and_blank(person):
    html = FormBuilder(person).input("first_name", as_="select", collection=["Ann", "Bob"])
    assert '<select id="person_first_name" name="person[first_name]" required>' in html
    assert '<option value=""></option>\n<option value="Ann" selected>Ann</option>\n<option value="Bob">Bob</option>' in html


def test_select_without_blank(person):
    html = FormBuilder(person).input("first_name", as_="select", collection=["Ann"], include_blank=False)
    assert '<option value=""></option>' not in html


def test_enum_collection_labels(person):
    html = FormBuilder(person).input("first_name", as_="select", collection=Color)
    assert '<option value="dark_red">Dark Red</option>' in html


def test_belongs_to_select_submits_foreign_key(post):
    html = FormBuilder(post).input("author", collection=[("Bob", 1), ("Eve", 2)])
    assert '<li class="select required" id="post_author_input">' in html
    assert 'name="post[author_id]"' in html
    assert '<option value="1" selected>Bob</option>' in html
    assert '<option value="2">Eve</option>' in html


def test_many_to_many_select_is_multiple(post):
    html = FormBuilder(post).input("tags", collection=[("news", 3), ("tech", 4)])
    assert 'name="post[tag_ids][]"' in html
    assert " multiple>" in html
    assert '<option value=""></option>' not in html
    assert '<option value="3" selected>news</option>' in html


def test_radio_for_boolean_column_uses_yes_no(person):
    html = FormBuilder(person).input("admin", as_="radio")
    assert html.startswith('<li class="radio optional" id="person_admin_input"><fieldset>')
    assert '<legend><label class="label">Admin</label></legend>' in html
    assert '<label for="person_admin_true"><input type="radio" id="person_admin_true" name="person[admin]" value="True"> Yes</label>' in html
    assert '<input type="radio" id="person_admin_false" name="person[admin]" value="False" checked> No' in html


def test_check_boxes_submit_an_array(person):
    html = FormBuilder(person).input("first_name", as_="check_boxes", collection=["Ann", "Bob"])
    assert '<input type="checkbox" id="person_first_name_ann" name="person[first_name][]" value="Ann" checked>' in html
    assert '<input type="checkbox" id="person_first_name_bob" name="person[first_name][]" value="Bob">' in html


def test_boolean_renders_hidden_fallback_inside_label(person):
    html = FormBuilder(person).input("admin")
    assert html == (
        '<li class="boolean optional" id="person_admin_input">'
        '<label for="person_admin"><input type="hidden" name="person[admin]" value="0">'
        '<input type="checkbox" value="1" id="person_admin" name="person[admin]"> Admin</label>'
        '</li>'
    )


def test_boolean_checked_when_true(person):
    person.admin = True
    assert 'name="person[admin]" checked>' in FormBuilder(person).input("admin")


def test_time_zone_lists_priority_zones_first(settings):
    html = FormBuilder(settings).input("time_zone", priority_zones=["Europe/Paris"])
    assert '<select id="settings_time_zone" name="settings[time_zone]">' in html
    assert '<option value=""></option>\n<option value="Europe/Paris">Europe/Paris</option>' in html


def test_country_uses_configured_choices(settings):
    from semantic_formgen.protocols import FormGenConfig

    config = FormGenConfig(country_choices=["France", "Peru"])
    html = FormBuilder(settings, config=config).input("home_country")
    assert '<li class="country optional" id="settings_home_country_input">' in html
    assert '<option value="Peru">Peru</option>' in html
