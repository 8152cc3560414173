from playwright.sync_api import Locator, Page
from decorators.class_decorators import page_name
from wrappers.smart_element import SmartElement, SmartElementsList
from wrappers.smart_page import SmartPage


@page_name("Header")
class HeaderBlock(SmartPage):

    def __init__(self, page: Page, config: dict, root: Locator = None):
        super().__init__(page, config, root)

        # Fields
        self.logo = SmartElement(self, "header .app_logo", name="Logo")
        self.cart_link = SmartElement(self, "header .shopping_cart_link", name="Cart")
        self.menu_items = SmartElementsList(self, "header nav a", name="Menu items", optional=True)
