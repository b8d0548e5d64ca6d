"""Tests for the DemoQA page objects against a mocked Playwright page."""

from unittest.mock import AsyncMock, MagicMock, call

import pytest

from demoqa.pages.buttons_page import (
    DOUBLE_CLICK_BUTTON,
    DYNAMIC_CLICK_BUTTON,
    RIGHT_CLICK_BUTTON,
    ButtonsPage,
)
from demoqa.pages.check_box_page import CheckBoxPage, expected_result, node_key
from demoqa.pages.elements_page import ElementsPage
from demoqa.pages.home_page import CARDS, HomePage, card_selector
from demoqa.pages.links_page import LinksPage, api_link, expected_response
from demoqa.pages.radio_button_page import NO_RADIO, RadioButtonPage
from demoqa.pages.text_box_page import TextBoxPage
from demoqa.pages.web_tables_page import (
    ROWS_PER_PAGE_OPTIONS,
    WebTablesPage,
)

BASE_URL = "https://demoqa.test/"


def _selectors(mock_page: MagicMock) -> list:
    return [c.args[0] for c in mock_page.locator.call_args_list]


class TestHomePage:
    def test_card_selectors_follow_display_order(self) -> None:
        assert card_selector("elements") == "xpath=(//*[@class='card mt-4 top-card'])[1]"
        assert card_selector("bookstore").endswith("[6]")
        assert len(CARDS) == 6

    def test_unknown_card(self) -> None:
        with pytest.raises(ValueError, match="Unknown home page card: shop"):
            card_selector("shop")

    @pytest.mark.asyncio
    async def test_click_elements_card(self, mock_page: MagicMock, element: AsyncMock) -> None:
        await HomePage(mock_page, BASE_URL).click_elements_card()

        assert card_selector("elements") in _selectors(mock_page)
        element.click.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_all_cards_displayed(self, mock_page: MagicMock) -> None:
        assert await HomePage(mock_page, BASE_URL).are_all_cards_displayed()


class TestElementsPage:
    @pytest.mark.asyncio
    async def test_page_without_menu_entry(self, mock_page: MagicMock) -> None:
        with pytest.raises(ValueError, match="no side menu entry"):
            await ElementsPage(mock_page, BASE_URL).open_from_menu()

    @pytest.mark.asyncio
    async def test_open_from_menu(self, mock_page: MagicMock, element: AsyncMock) -> None:
        await RadioButtonPage(mock_page, BASE_URL).open_from_menu()

        assert "#item-2" in _selectors(mock_page)
        element.click.assert_awaited_once()
        mock_page.wait_for_load_state.assert_awaited_once()


class TestButtonsPage:
    def test_url(self, mock_page: MagicMock) -> None:
        assert ButtonsPage(mock_page, BASE_URL).url == "https://demoqa.test/buttons"

    @pytest.mark.asyncio
    async def test_click_kinds(self, mock_page: MagicMock, element: AsyncMock) -> None:
        page = ButtonsPage(mock_page, BASE_URL)

        await page.double_click_button()
        await page.right_click_button()
        await page.dynamic_click_button()

        selectors = _selectors(mock_page)
        assert DOUBLE_CLICK_BUTTON in selectors
        assert RIGHT_CLICK_BUTTON in selectors
        assert DYNAMIC_CLICK_BUTTON in selectors
        element.dblclick.assert_awaited_once()
        assert element.click.await_count == 2

    @pytest.mark.asyncio
    async def test_messages(self, mock_page: MagicMock, element: AsyncMock) -> None:
        element.inner_text.return_value = "You have done a double click"

        assert (
            await ButtonsPage(mock_page, BASE_URL).get_double_click_message()
            == "You have done a double click"
        )


class TestCheckBoxPage:
    def test_node_keys(self) -> None:
        assert node_key("Home") == "home"
        assert node_key("Work Space") == "workspace"
        assert node_key("Excel File.doc") == "excelFile"

    def test_unknown_node(self) -> None:
        with pytest.raises(ValueError, match="Unknown check box node"):
            node_key("Music")

    def test_expected_result(self) -> None:
        assert (
            expected_result("Commands", "Angular", "Classified")
            == "You have selected : commands angular classified"
        )

    @pytest.mark.asyncio
    async def test_toggle_only_parents(self, mock_page: MagicMock) -> None:
        page = CheckBoxPage(mock_page, BASE_URL)

        await page.toggle("Home")
        assert (
            "xpath=//label[@for='tree-node-home']/preceding-sibling::button"
            in _selectors(mock_page)
        )
        with pytest.raises(ValueError, match="no children"):
            await page.toggle("Notes")

    @pytest.mark.asyncio
    async def test_check_clicks_label(self, mock_page: MagicMock, element: AsyncMock) -> None:
        await CheckBoxPage(mock_page, BASE_URL).check("Angular")

        assert "label[for='tree-node-angular']" in _selectors(mock_page)
        element.click.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_result_joins_spans(self, mock_page: MagicMock) -> None:
        mock_page.locator.return_value.all_inner_texts.return_value = [
            "You have selected :",
            "commands",
            " ",
            "angular",
        ]

        result = await CheckBoxPage(mock_page, BASE_URL).get_result()

        assert result == "You have selected : commands angular"
        assert "#result span" in _selectors(mock_page)


class TestRadioButtonPage:
    @pytest.mark.asyncio
    async def test_select_and_read(self, mock_page: MagicMock, element: AsyncMock) -> None:
        element.inner_text.return_value = "Impressive"
        page = RadioButtonPage(mock_page, BASE_URL)

        await page.select_impressive()

        assert "label[for='impressiveRadio']" in _selectors(mock_page)
        assert await page.get_selected_value() == "Impressive"

    @pytest.mark.asyncio
    async def test_no_radio_state(self, mock_page: MagicMock) -> None:
        mock_page.locator.return_value.is_enabled.return_value = False

        assert not await RadioButtonPage(mock_page, BASE_URL).is_no_radio_enabled()
        mock_page.locator.assert_called_with(NO_RADIO)


class TestTextBoxPage:
    @pytest.mark.asyncio
    async def test_fill_form(self, mock_page: MagicMock, element: AsyncMock) -> None:
        await TextBoxPage(mock_page, BASE_URL).fill_form(
            "Jane Doe", "jane@example.com", "1 Main St", "2 Side St"
        )

        assert element.fill.await_args_list == [
            call("Jane Doe", timeout=10000),
            call("jane@example.com", timeout=10000),
            call("1 Main St", timeout=10000),
            call("2 Side St", timeout=10000),
        ]
        assert "#submit" in _selectors(mock_page)

    @pytest.mark.asyncio
    async def test_email_marked_invalid(self, mock_page: MagicMock, element: AsyncMock) -> None:
        page = TextBoxPage(mock_page, BASE_URL)

        element.get_attribute.return_value = "mr-sm-2 field-error form-control"
        assert await page.is_email_marked_invalid()

        element.get_attribute.return_value = "mr-sm-2 form-control"
        assert not await page.is_email_marked_invalid()


class TestLinksPage:
    def test_expected_response(self) -> None:
        assert (
            expected_response("created")
            == "Link has responded with staus 201 and status text Created"
        )
        assert api_link("invalid-url").status == 404

    def test_unknown_api_link(self) -> None:
        with pytest.raises(ValueError, match="Unknown API link"):
            api_link("teapot")

    @pytest.mark.asyncio
    async def test_open_simple_link_returns_new_tab(self, mock_page: MagicMock) -> None:
        tab = MagicMock()
        tab.url = BASE_URL
        tab.wait_for_load_state = AsyncMock()

        async def resolve() -> MagicMock:
            return tab

        page_info = MagicMock()
        page_info.value = resolve()
        expectation = MagicMock()
        expectation.__aenter__ = AsyncMock(return_value=page_info)
        expectation.__aexit__ = AsyncMock(return_value=False)
        mock_page.context.expect_page.return_value = expectation

        result = await LinksPage(mock_page, BASE_URL).open_simple_link()

        assert result is tab
        assert "#simpleLink" in _selectors(mock_page)
        tab.wait_for_load_state.assert_awaited_once()


class TestWebTablesPage:
    @pytest.mark.asyncio
    async def test_table_data_skips_empty_rows(self, mock_page: MagicMock) -> None:
        rows = mock_page.locator.return_value
        rows.count.return_value = 3
        rows.nth.return_value.locator.return_value.all_inner_texts = AsyncMock(
            side_effect=[
                ["Cierra", "Vega", "39", "cierra@example.com", "10000", "Insurance", ""],
                ["Zoran", "Dimitrievski", "41", "zzdimitrievski@gmail.com", "25000", "IT", ""],
                [" ", "", "", "", "", "", ""],
            ]
        )
        page = WebTablesPage(mock_page, BASE_URL)

        row = await page.find_row_by_first_name("Zoran")

        assert row == "Zoran Dimitrievski 41 zzdimitrievski@gmail.com 25000 IT"

    @pytest.mark.asyncio
    async def test_missing_row(self, mock_page: MagicMock) -> None:
        assert await WebTablesPage(mock_page, BASE_URL).find_row_by_first_name("Nobody") is None

    @pytest.mark.asyncio
    async def test_rows_per_page_counts(self, mock_page: MagicMock, element: AsyncMock) -> None:
        mock_page.locator.return_value.count.return_value = 5

        counts = await WebTablesPage(mock_page, BASE_URL).rows_per_page_counts()

        assert list(counts) == list(ROWS_PER_PAGE_OPTIONS)
        assert element.select_option.await_count == len(ROWS_PER_PAGE_OPTIONS)
        element.select_option.assert_awaited_with(value="100", timeout=10000)

    @pytest.mark.asyncio
    async def test_add_record(self, mock_page: MagicMock, element: AsyncMock) -> None:
        await WebTablesPage(mock_page, BASE_URL).add_record(
            "Zoran", "Dimitrievski", "zzdimitrievski@gmail.com", "41", "25000", "IT"
        )

        assert element.fill.await_count == 6
        assert "#addNewRecordButton" in _selectors(mock_page)
        element.wait_for.assert_awaited_with(state="hidden", timeout=10000)
