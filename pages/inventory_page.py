from playwright.sync_api import Locator, Page
from decorators.class_decorators import page_name
from pages.header_block import HeaderBlock
from pages.product_item_block import ProductItemBlock
from wrappers.smart_block import SmartBlock, SmartBlocksList
from wrappers.smart_element import SmartElement, SmartElementsCollection, SmartElementsList
from wrappers.smart_page import SmartPage


@page_name("Inventory")
class InventoryPage(SmartPage):

    def __init__(self, page: Page, config: dict, root: Locator = None):
        super().__init__(page, config, root)

        # Fields
        self.header = SmartBlock(self, HeaderBlock, name="Header")
        self.title = SmartElement(self, "span[data-test='title']", name="Title")
        self.products = SmartBlocksList(self, ProductItemBlock, ".inventory_item", name="Products")
        self.product_names = SmartElementsList(self, ".inventory_item_name", name="Product names")
        self.product_prices = SmartElementsCollection(self, ".inventory_item_price", name="Prices")
        self.sort_buttons = SmartElementsList(self, ".sort button", name="Sort buttons")
        self.search_input = SmartElement(self, "#search", name="Search")
        self.loading_spinner = SmartElement(self, ".spinner", name="Loading", hidden=True)

    def sort_by(self, label):
        self.get_button_from_list_by_name(self.get_elements_list("Sort buttons"), label).click()
