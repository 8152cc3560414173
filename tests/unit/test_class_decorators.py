import pytest
from decorators.class_decorators import page_name
from wrappers.smart_page import SmartPage


@page_name("Checkout")
class CheckoutPage(SmartPage):
    pass


class PlainPage(SmartPage):
    pass


def test_page_name_sets_class_attribute():
    assert CheckoutPage.page_name == "Checkout"


def test_page_name_does_not_leak_to_other_classes():
    assert PlainPage.page_name is None
    assert SmartPage.page_name is None


def test_page_name_returns_same_class():
    decorated = page_name("Plain")(PlainPage)
    assert decorated is PlainPage
    PlainPage.page_name = None


@pytest.mark.parametrize("name", ["", "   ", None, 42])
def test_page_name_rejects_empty_names(name):
    with pytest.raises(ValueError):
        page_name(name)
