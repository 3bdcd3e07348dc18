import pytest

from portfolio_app.builder.components import build_component
from portfolio_app.builder.editor import (
    MAX_IMAGE_BYTES,
    DateInput,
    ImageUploadError,
    apply_command,
    convert_value,
    field_spec,
    read_image_as_data_url,
    render_editor,
    tags_from_text,
    visible_fields,
)


def test_tags_are_trimmed_and_empties_dropped():
    assert tags_from_text(" React,  Node.js ,, ") == ["React", "Node.js"]
    assert tags_from_text("") == []


def test_convert_select_rejects_unknown_option():
    spec = field_spec("image", "width")
    assert convert_value(spec, "small") == "small"
    with pytest.raises(ValueError):
        convert_value(spec, "huge")


def test_convert_checkbox_from_form_strings():
    spec = field_spec("experience", "current")
    assert convert_value(spec, "on") is True
    assert convert_value(spec, "false") is False


def test_end_date_hidden_while_current():
    names = [spec.name for spec in visible_fields("experience", {"current": True})]
    assert "endDate" not in names
    assert "startDate" in names

    names = [spec.name for spec in visible_fields("experience", {"current": False})]
    assert "endDate" in names


def test_unknown_field_raises():
    with pytest.raises(KeyError):
        field_spec("header", "caption")


class TestDateInput:
    def test_month_and_year_only(self):
        date_input = DateInput()
        date_input.type_into("month", "3")
        assert date_input.type_into("year", "2024") == "03/2024"

    def test_day_included(self):
        date_input = DateInput()
        date_input.type_into("month", "12")
        date_input.type_into("day", "5")
        assert date_input.type_into("year", "2023") == "12/05/2023"

    def test_non_digits_are_stripped(self):
        date_input = DateInput()
        date_input.type_into("month", "a1b")
        assert date_input.parts["month"] == "1"

    def test_full_part_advances_focus(self):
        date_input = DateInput()
        date_input.type_into("month", "06")
        assert date_input.focus == "day"
        date_input.type_into("day", "1")
        assert date_input.focus == "day"
        date_input.type_into("day", "15")
        assert date_input.focus == "year"

    def test_missing_year_gives_empty_value(self):
        date_input = DateInput()
        assert date_input.type_into("month", "06") == ""

    def test_loads_existing_value(self):
        date_input = DateInput("03/07/2020")
        assert date_input.parts == {"month": "03", "day": "07", "year": "2020"}
        assert date_input.value == "03/07/2020"


def test_image_upload_rejects_non_images():
    with pytest.raises(ImageUploadError, match="Please select an image file"):
        read_image_as_data_url(b"abc", "text/plain")


def test_image_upload_rejects_large_files():
    with pytest.raises(ImageUploadError, match="less than 5MB"):
        read_image_as_data_url(b"0" * (MAX_IMAGE_BYTES + 1), "image/png")


def test_image_upload_encodes_data_url():
    assert read_image_as_data_url(b"abc", "image/png") == "data:image/png;base64,YWJj"


def test_toolbar_commands():
    assert apply_command("hi", "bold") == "<b>hi</b>"
    assert apply_command("a\nb", "insertOrderedList") == "<ol><li>a</li><li>b</li></ol>"
    assert apply_command("x", "link", 'https://e.com/"') == '<a href="https://e.com/&#34;">x</a>'
    assert apply_command("x", "link", "") == "x"
    with pytest.raises(ValueError):
        apply_command("x", "strikeThrough")


def test_editor_panel_for_experience():
    component = build_component("7", "experience", {
        "company": "Acme", "startDate": "06/2021", "current": True,
    })
    html = render_editor(component)

    assert 'data-component-id="7"' in html
    assert 'id="endDateField" style="display: none"' in html
    assert 'value="06"' in html
    assert 'value="2021"' in html
    assert "checked" in html
    assert html.count('class="rich-text-toolbar"') == 3


def test_editor_panel_shows_tags_as_text():
    component = build_component("1", "project", {"tags": ["React", "Flask"]})
    html = render_editor(component)
    assert 'value="React, Flask"' in html
    assert "btn-add-additional-image" in html
