from playwright.sync_api import Locator, Page
from decorators.class_decorators import page_name
from pages.header_block import HeaderBlock
from wrappers.smart_block import SmartBlock
from wrappers.smart_element import SmartElement
from wrappers.smart_page import SmartPage


@page_name("Login")
class LoginPage(SmartPage):

    def __init__(self, page: Page, config: dict, root: Locator = None):
        super().__init__(page, config, root)

        # Fields
        self.header = SmartBlock(self, HeaderBlock, name="Header")
        self.username_input = SmartElement(self, "#user-name", name="Username")
        self.password_input = SmartElement(self, "#password", name="Password")
        self.login_button = SmartElement(self, "#login-button", name="Login")
        self.error_message = SmartElement(self, "[data-test='error']", name="Error", hidden=True)
        self.remember_me = SmartElement(self, "#remember-me", name="Remember me", optional=True)

    def fill_form(self, username, password):
        self.username_input.fill(username)
        self.password_input.fill(password)

    def submit_form(self):
        self.login_button.click()
