"""Page objects for the DemoQA site."""

from demoqa.pages.base_page import BasePage
from demoqa.pages.buttons_page import ButtonsPage
from demoqa.pages.check_box_page import CheckBoxPage
from demoqa.pages.elements_page import ElementsPage
from demoqa.pages.home_page import HomePage
from demoqa.pages.links_page import LinksPage
from demoqa.pages.page_object_manager import PageObjectManager
from demoqa.pages.radio_button_page import RadioButtonPage
from demoqa.pages.text_box_page import TextBoxPage
from demoqa.pages.web_tables_page import WebTablesPage

__all__ = [
    "BasePage",
    "ButtonsPage",
    "CheckBoxPage",
    "ElementsPage",
    "HomePage",
    "LinksPage",
    "PageObjectManager",
    "RadioButtonPage",
    "TextBoxPage",
    "WebTablesPage",
]
