from playwright.sync_api import Locator, Page
from wrappers.smart_element import SmartElement
from wrappers.smart_page import SmartPage


class ProductItemBlock(SmartPage):

    def __init__(self, page: Page, config: dict, root: Locator = None):
        super().__init__(page, config, root)

        # Fields located inside the product item container
        self.name = SmartElement(self, ".inventory_item_name", name="Name")
        self.price = SmartElement(self, ".inventory_item_price", name="Price")
        self.add_to_cart_button = SmartElement(self, "button", name="Add to cart")
        self.sold_out_label = SmartElement(self, ".sold_out", name="Sold out", optional=True)

    def add_to_cart(self):
        self.add_to_cart_button.click()
