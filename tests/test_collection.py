"""
Tests for the Collection facade.

Tests lazy navigation, filtering, index scans and size.
"""

import asyncio

import pytest

from fluent_web.conditions import be, have
from fluent_web.core.exceptions import WaitTimeoutError
from fluent_web.entities import Collection, Driver, Element

from tests.conftest import FakeElement, FakePage, SvgElement


class TestNavigation:
    """Tests for get/first/filter/find_by."""

    def test_navigation_is_lazy(self, driver, page: FakePage):
        """Navigation builds new handles without resolving."""
        items = driver.all(".item")

        assert isinstance(items.get(1), Element)
        assert isinstance(items.first(), Element)
        assert isinstance(items.filter(have.text("B")), Collection)
        assert isinstance(items.filter_by(have.text("B")), Collection)
        assert isinstance(items.find_by(have.text("B")), Element)
        assert page.queries == 0

    def test_descriptions(self, driver):
        items = driver.all(".item")

        assert str(items.get(1)) == "browser.all('.item')[1]"
        assert str(items.filter(have.text("B"))) == "browser.all('.item').filter(has text 'B')"
        assert str(items.find_by(have.text("B"))) == (
            "browser.all('.item').filter(has text 'B')[0]"
        )

    @pytest.mark.asyncio
    async def test_find_by_resolves_matching_position(self, driver, page: FakePage):
        """find_by yields the member currently satisfying the condition."""
        found = driver.all(".item").find_by(have.text("B"))

        assert await found.get_web_element() is page.root.children[1]
        await found.should(have.text("B"))

    @pytest.mark.asyncio
    async def test_filter_size_matches_count(self, driver, page: FakePage):
        """filter(C) has exactly as many members as satisfy C."""
        page.add(FakeElement(tag="li", text="B2", classes=("item",)))
        items = driver.all(".item")

        await items.filter(have.text("B")).should(have.size(2))
        await items.filter(have.text("Z")).should(have.size(0))
        await items.filter(be.visible).should(have.size(4))

    @pytest.mark.asyncio
    async def test_first_of_filter_is_lowest_index(self, driver, page: FakePage):
        page.add(FakeElement(tag="li", text="B2", classes=("item",)))

        first = driver.all(".item").filter(have.text("B")).first()

        assert await first.text() == "B"

    @pytest.mark.asyncio
    async def test_find_by_follows_page_changes(self, driver, page: FakePage):
        """The same handle re-evaluates against the page at each use."""
        target = driver.all(".item").find_by(have.text("New"))

        assert await target.is_(be.present, timeout=30) is False
        page.add(FakeElement(tag="li", text="New", classes=("item",)))
        assert await target.is_(be.present) is True

    @pytest.mark.asyncio
    async def test_filter_waits_for_match(self, driver, page: FakePage):
        loop = asyncio.get_running_loop()
        loop.call_later(0.05, setattr, page.root.children[2], "text", "Ready")

        await driver.all(".item").find_by(have.text("Ready")).should(be.visible)


class TestIndexOfElementBy:
    """Tests for index_of_element_by."""

    @pytest.fixture
    def rows_page(self) -> FakePage:
        return FakePage([
            FakeElement(tag="tr", classes=("row",), attributes={"data-id": str(i)})
            for i in (39, 40, 41, 42, 43)
        ])

    @pytest.mark.asyncio
    async def test_returns_matching_index(self, rows_page: FakePage, fast_config):
        driver = Driver(rows_page, fast_config)

        index = await driver.all(".row").index_of_element_by(have.attribute("data-id", "42"))

        assert index == 3

    @pytest.mark.asyncio
    async def test_stale_members_are_skipped(self, rows_page: FakePage, fast_config):
        """Members that fail to evaluate count as non-matches."""
        driver = Driver(rows_page, fast_config)
        rows = driver.all(".row")
        rows_page.root.children[0].attached = False

        assert await rows.index_of_element_by(have.attribute("data-id", "42")) == 3

    @pytest.mark.asyncio
    async def test_no_match_times_out(self, driver):
        """With nothing matching, the visibility assertion times out."""
        with pytest.raises(WaitTimeoutError):
            await driver.all(".item").index_of_element_by(have.text("Z"))


class TestSize:
    """Tests for size() and texts()."""

    @pytest.mark.asyncio
    async def test_size(self, driver):
        assert await driver.all(".item").size() == 3

    @pytest.mark.asyncio
    async def test_empty_region_has_size_zero(self, driver):
        """An empty result is size zero, not an error."""
        assert await driver.all(".row").size() == 0

    @pytest.mark.asyncio
    async def test_size_is_a_single_resolution(self, driver, page: FakePage):
        await driver.all(".item").size()

        assert page.queries == 1

    @pytest.mark.asyncio
    async def test_texts(self, driver):
        assert await driver.all(".item").texts() == ["A", "B", "C"]


class TestAssertions:
    """Tests for the four verbs on collections."""

    @pytest.mark.asyncio
    async def test_should_and_should_not(self, driver):
        items = driver.all(".item")

        assert await items.should(have.size(3)) is items
        await items.should_not(be.empty)

    @pytest.mark.asyncio
    async def test_is_and_is_not(self, driver):
        items = driver.all(".item")

        assert await items.is_(have.size(3)) is True
        assert await items.is_not(have.size(3), timeout=40) is False
        assert await items.matching(have.texts("A", "B", "C")) is True
        assert await items.matching_not(be.empty) is True

    @pytest.mark.asyncio
    async def test_wrong_condition_kind(self, driver):
        with pytest.raises(TypeError):
            await driver.all(".item").should(be.visible)


class TestUnreadableMembers:
    """Members the driver cannot inspect are non-matches, not errors."""

    @pytest.fixture
    def mixed_page(self) -> FakePage:
        return FakePage([
            SvgElement(classes=("item",)),
            FakeElement(tag="li", text="B", classes=("item",)),
        ])

    @pytest.mark.asyncio
    async def test_filter_skips_member_without_text(self, mixed_page: FakePage, fast_config):
        driver = Driver(mixed_page, fast_config)

        assert await driver.all(".item").filter(have.text("B")).size() == 1
        await driver.all(".item").find_by(have.text("B")).should(have.exact_text("B"))

    @pytest.mark.asyncio
    async def test_filter_by_value_over_non_inputs(self, mixed_page: FakePage, fast_config):
        driver = Driver(mixed_page, fast_config)

        assert await driver.all(".item").filter(have.value("")).size() == 1

    @pytest.mark.asyncio
    async def test_index_scan_skips_member_without_text(self, mixed_page: FakePage, fast_config):
        driver = Driver(mixed_page, fast_config)

        assert await driver.all(".item").index_of_element_by(have.text("B")) == 1

    @pytest.mark.asyncio
    async def test_size_wait_times_out_instead_of_aborting(self, mixed_page: FakePage, fast_config):
        """Texts in the size report are best-effort and never end the wait early."""
        driver = Driver(mixed_page, fast_config)

        with pytest.raises(WaitTimeoutError) as exc_info:
            await driver.all(".item").should(have.size(3), timeout=100)

        assert exc_info.value.last_reason == "expected: size 3; actual: size 2"
        assert exc_info.value.details["attempts"] > 1

    @pytest.mark.asyncio
    async def test_size_report_lists_readable_texts(self, driver):
        with pytest.raises(WaitTimeoutError) as exc_info:
            await driver.all(".item").should(have.size(2), timeout=40)

        assert "size 3, texts ['A', 'B', 'C']" in exc_info.value.last_reason
