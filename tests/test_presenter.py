"""
==============================================================================
Catalog Presenter Tests
==============================================================================

Tests for cards, result signals and facet options.

==============================================================================
"""

from storefront.browse import (
    CatalogPresenter,
    QueryState,
    filter_brand_options,
    filter_products,
    format_currency,
    visible,
)
from storefront.browse.presenter import result_label
from storefront.catalog import ProductCatalog

from conftest import make_product


def render(catalog, query, presenter=None, page_size=48):
    presenter = presenter or CatalogPresenter(catalog, image_placeholder="placeholder.svg")
    window = visible(filter_products(catalog, query), query.page, page_size)
    return presenter.render(query, window, page_size)


class TestCards:
    """Tests for product cards."""

    def test_plain_price_and_category_tag(self, catalog: ProductCatalog):
        """Test a simple product shows price and category."""
        card = CatalogPresenter(catalog).card(catalog.products[0])
        assert card.brand == "Acme"
        assert card.name == "Canvas Tote"
        assert card.price_text == "¥4,000"
        assert card.tag == "Bags"

    def test_starting_price_and_variant_tag(self, catalog: ProductCatalog):
        """Test priceMax prefixes 'from' and variants replace the category tag."""
        card = CatalogPresenter(catalog).card(catalog.products[1])
        assert card.price_text == "from ¥20,000"
        assert card.tag == "2 options"

    def test_missing_image_uses_placeholder(self):
        """Test products without an image get the placeholder."""
        catalog = ProductCatalog.from_document({
            "products": [make_product("Cap", "Acme", "Hats", 1200, image="")]
        })
        card = CatalogPresenter(catalog, image_placeholder="placeholder.svg").card(catalog.products[0])
        assert card.image == "placeholder.svg"
        assert card.image_fallback == "placeholder.svg"

    def test_custom_formatter(self, catalog: ProductCatalog):
        """Test the price formatter is replaceable."""
        presenter = CatalogPresenter(catalog, format_price=lambda amount: f"{amount} JPY")
        assert presenter.card(catalog.products[0]).price_text == "4000 JPY"

    def test_failing_card_does_not_break_page(self, catalog: ProductCatalog):
        """Test one broken card is replaced and the rest still render."""
        def fragile(amount):
            if amount == 20000:
                raise ValueError("cannot format")
            return format_currency(amount)

        presenter = CatalogPresenter(catalog, format_price=fragile, image_placeholder="placeholder.svg")
        cards = presenter.cards(catalog.products)
        assert [c.name for c in cards] == ["Canvas Tote", "Trail Runner", "Leather Loafer"]
        assert cards[1].image == "placeholder.svg"
        assert cards[1].price_text == "20000"
        assert cards[2].price_text == "¥4,000"

    def test_format_currency(self):
        """Test default formatting groups thousands without decimals."""
        assert format_currency(1234567) == "¥1,234,567"
        assert format_currency(0, "$") == "$0"


class TestView:
    """Tests for the rendered page."""

    def test_result_label(self):
        """Test singular and plural counts."""
        assert result_label(0) == "0 products"
        assert result_label(1) == "1 product"
        assert result_label(48) == "48 products"

    def test_empty_state(self, catalog: ProductCatalog):
        """Test zero matches is an explicit empty state."""
        view = render(catalog, QueryState(search="nothing"))
        assert view.is_empty is True
        assert view.total == 0
        assert view.products == []
        assert view.has_more is False

    def test_count_is_pre_pagination(self, large_catalog: ProductCatalog):
        """Test total counts every match, not just visible ones."""
        view = render(large_catalog, QueryState())
        assert view.total == 100
        assert view.result_label == "100 products"
        assert len(view.products) == 48
        assert view.has_more is True

    def test_query_snapshot(self, catalog: ProductCatalog):
        """Test the view records the query it was rendered for."""
        view = render(catalog, QueryState(category="Shoes", sort="price_desc"))
        assert view.query.category == "Shoes"
        assert view.query.sort == "price_desc"


class TestFacets:
    """Tests for facet option lists."""

    def test_category_options(self, catalog: ProductCatalog):
        """Test All is prepended and the active category highlighted."""
        options = render(catalog, QueryState(category="Shoes")).facets.categories
        assert [o.label for o in options] == ["All", "Bags", "Shoes", "Hats"]
        assert [o.active for o in options] == [False, False, True, False]
        assert options[0].value is None

    def test_all_category_active_by_default(self, catalog: ProductCatalog):
        """Test the All sentinel is active when no category is set."""
        options = render(catalog, QueryState()).facets.categories
        assert options[0].active is True

    def test_brand_options(self, catalog: ProductCatalog):
        """Test All Brands is prepended."""
        options = render(catalog, QueryState(brand="Zed")).facets.brands
        assert [o.label for o in options] == ["All Brands", "Acme", "Zed"]
        assert [o.active for o in options] == [False, False, True]

    def test_brand_facet_is_filter_independent(self, catalog: ProductCatalog):
        """Test brand options ignore current filters."""
        baseline = [o.label for o in render(catalog, QueryState()).facets.brands]
        for query in (
            QueryState(category="Bags"),
            QueryState(search="loafer"),
            QueryState(price_range_index=5),
        ):
            assert [o.label for o in render(catalog, query).facets.brands] == baseline

    def test_price_options(self, catalog: ProductCatalog):
        """Test price pills mark the active bracket."""
        options = render(catalog, QueryState(price_range_index=2)).facets.price_ranges
        assert options[0].label == "All"
        assert [o.index for o in options if o.active] == [2]

    def test_brand_search(self, catalog: ProductCatalog):
        """Test the brand dropdown search filters options."""
        assert filter_brand_options(catalog.brands, "ZE") == ["Zed"]
        assert filter_brand_options(catalog.brands, "  ") == ["Acme", "Zed"]
        options = CatalogPresenter(catalog).brand_options(None, "xyz")
        assert [o.label for o in options] == ["All Brands"]
