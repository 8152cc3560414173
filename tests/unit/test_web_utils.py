import pytest
from unittest.mock import Mock
from utils.web_utils import (get_any_element_inner_text, get_any_element_text,
                             highlight_element, is_editable_tag, reset_element_style)


def make_element(tag, text=None, inner_text=None, value=None):
    element = Mock()
    element.get_tag_name.return_value = tag
    element.get_text.return_value = text
    element.get_inner_text.return_value = inner_text
    element.get_value.return_value = value
    return element


@pytest.mark.parametrize("tag,expected", [
    ("input", True),
    ("INPUT", True),
    ("textarea", True),
    ("div", False),
    ("select", False),
    (None, False),
])
def test_is_editable_tag(tag, expected):
    assert is_editable_tag(tag) is expected


def test_any_element_text_of_input_is_value():
    element = make_element("input", text="", value="Submit")
    assert get_any_element_text(element) == "Submit"


def test_any_element_text_of_textarea_is_value():
    element = make_element("textarea", value="Long text")
    assert get_any_element_text(element) == "Long text"


def test_any_element_text_of_div_is_raw_text():
    element = make_element("div", text=" Hello ", value=None)
    assert get_any_element_text(element) == " Hello "
    element.get_value.assert_not_called()


def test_any_element_inner_text_is_trimmed():
    element = make_element("div", text="", inner_text=" Hello \n")
    assert get_any_element_inner_text(element) == "Hello"


def test_any_element_inner_text_of_input_is_trimmed_value():
    element = make_element("input", value="  Submit ")
    assert get_any_element_inner_text(element) == "Submit"


def test_any_element_inner_text_of_empty_element():
    element = make_element("span", inner_text=None)
    assert get_any_element_inner_text(element) == ""


def test_highlight_element_returns_original_style():
    locator = Mock()
    locator.evaluate.return_value = "color: blue"

    assert highlight_element(locator) == "color: blue"
    assert locator.evaluate.call_count == 2
    assert "border: 2px solid red" in locator.evaluate.call_args_list[1].args[0]


def test_reset_element_style_restores_style():
    locator = Mock()
    reset_element_style(locator, "color: blue")
    locator.evaluate.assert_called_once_with(
        "(el, style) => el.setAttribute('style', style)", "color: blue")


def test_reset_element_style_removes_style():
    locator = Mock()
    reset_element_style(locator, None)
    locator.evaluate.assert_called_once_with("el => el.removeAttribute('style')")
