"""Tests for the catalog query engine."""

import pytest

from catalog.engine import matches, query_products, sort_products
from catalog.models import CatalogQuery, PriceRange, SortKey


def ids(products):
    return [p.id for p in products]


class TestNoCriteria:
    """An empty query returns the collection as is."""

    def test_default_query_returns_input_unchanged(self, products):
        result = query_products(products, CatalogQuery(), "featured", None)
        assert result == products
        assert result is not products

    def test_filters_default_to_no_restriction(self, products):
        assert query_products(products) == products

    def test_empty_collection(self):
        assert query_products([], CatalogQuery(search="shoes")) == []

    def test_none_collection(self):
        assert query_products(None) == []


class TestSearch:
    def test_matches_brand_case_insensitive(self, products):
        assert ids(query_products(products, CatalogQuery(search="URBAN"))) == [1, 4]

    def test_matches_category(self, products):
        assert ids(query_products(products, CatalogQuery(search="foot"))) == [3]

    def test_matches_name(self, products):
        assert ids(query_products(products, CatalogQuery(search="jacket"))) == [5]

    def test_blank_search_is_ignored(self, products):
        assert query_products(products, CatalogQuery(search="   ")) == products

    def test_search_text_is_matched_as_given(self, products):
        assert query_products(products, CatalogQuery(search="t ")) == []
        assert ids(query_products(products, CatalogQuery(search="n t"))) == [1]

    def test_no_match(self, products):
        assert query_products(products, CatalogQuery(search="umbrella")) == []


class TestFacets:
    def test_categories(self, products):
        assert ids(query_products(products, CatalogQuery(categories=["Accessories"]))) == [2, 4]

    def test_brands_any_of(self, products):
        result = query_products(products, CatalogQuery(brands=["Urban", "Stride"]))
        assert ids(result) == [1, 3, 4]

    def test_sizes_any_of(self, products):
        assert ids(query_products(products, CatalogQuery(sizes=["M", "L"]))) == [1, 2, 5]

    def test_size_overlap_rule(self, product_factory):
        overlapping = product_factory(1, 10, sizes=["S", "M"])
        disjoint = product_factory(2, 10, sizes=["S"])
        result = query_products([overlapping, disjoint], CatalogQuery(sizes=["M", "L"]))
        assert ids(result) == [1]

    def test_product_without_sizes_fails_size_filter(self, products):
        assert 4 not in ids(query_products(products, CatalogQuery(sizes=["S", "M", "L"])))

    def test_colors_any_of(self, products):
        assert ids(query_products(products, CatalogQuery(colors=["Black"]))) == [2, 3]

    def test_empty_facet_lists_do_not_restrict(self, products):
        query = CatalogQuery(categories=[], brands=[], sizes=[], colors=[])
        assert query_products(products, query) == products

    def test_facets_combine_with_and(self, products):
        assert ids(query_products(products, CatalogQuery(categories=["Clothing"], sizes=["L"]))) == [5]

    def test_contradictory_filters_give_empty_result(self, products):
        assert query_products(products, CatalogQuery(categories=["Clothing"], colors=["Black"])) == []


class TestPriceRange:
    def test_uses_effective_price(self, product_factory):
        product = product_factory(1, 100, 80)
        assert query_products([product], CatalogQuery(price_range=PriceRange(min=0, max=50))) == []
        assert query_products([product], CatalogQuery(price_range=PriceRange(min=60, max=90))) == [product]

    def test_bounds_are_inclusive(self, products):
        query = CatalogQuery(price_range=PriceRange(min=30, max=80))
        assert ids(query_products(products, query)) == [1, 2, 4, 5]

    def test_missing_bound_uses_default(self, products):
        query = CatalogQuery(price_range=PriceRange(min=100))
        assert ids(query_products(products, query)) == [3]

    def test_inverted_range_matches_nothing(self, products):
        query = CatalogQuery(price_range=PriceRange(min=500, max=10))
        assert query_products(products, query) == []

    def test_accepts_camel_case_alias(self, products):
        query = CatalogQuery.model_validate({"priceRange": {"min": 0, "max": 40}})
        assert ids(query_products(products, query)) == [2]


class TestDiscount:
    def test_threshold_is_inclusive(self, product_factory):
        product = product_factory(1, 100, 75)
        assert query_products([product], CatalogQuery(discount=25)) == [product]
        assert query_products([product], CatalogQuery(discount=26)) == []

    def test_undiscounted_products_fail_positive_threshold(self, products):
        assert ids(query_products(products, CatalogQuery(discount=1))) == [1, 3, 5]

    def test_zero_threshold_does_not_restrict(self, products):
        assert query_products(products, CatalogQuery(discount=0)) == products

    def test_zero_discounted_price_fails_threshold(self, product_factory):
        product = product_factory(1, 100, 0)
        assert query_products([product], CatalogQuery(discount=50)) == []

    def test_percentage_rounds_half_up(self, product_factory):
        product = product_factory(1, 8, 7)  # 12.5%
        assert query_products([product], CatalogQuery(discount=13)) == [product]


class TestSorting:
    def test_price_low(self, products):
        assert ids(query_products(products, sort_by="price-low")) == [2, 4, 5, 1, 3]

    def test_price_high(self, products):
        assert ids(query_products(products, sort_by="price-high")) == [3, 1, 5, 4, 2]

    def test_price_sort_uses_discounted_price(self, product_factory):
        a = product_factory(1, 30)
        b = product_factory(2, 50, 10)
        c = product_factory(3, 20)
        assert ids(query_products([a, b, c], sort_by="price-low")) == [2, 3, 1]
        assert ids(query_products([a, b, c], sort_by="price-high")) == [1, 3, 2]

    def test_newest_is_highest_id_first(self, products):
        assert ids(query_products(products, sort_by="newest")) == [5, 4, 3, 2, 1]

    def test_discount_descending_and_stable(self, products):
        assert ids(query_products(products, sort_by="discount")) == [3, 5, 1, 2, 4]

    def test_discount_sort_ranks_zero_discounted_price_as_no_discount(self, product_factory):
        on_sale = product_factory(1, 100, 90)
        zero_priced = product_factory(2, 100, 0)
        assert ids(query_products([zero_priced, on_sale], sort_by="discount")) == [1, 2]

    def test_popularity_is_deterministic(self, products):
        first = ids(query_products(products, sort_by="popularity"))
        assert first == [3, 2, 5, 1, 4]
        assert ids(query_products(products, sort_by="popularity")) == first

    @pytest.mark.parametrize("sort_by", ["featured", "best-selling", "", None])
    def test_featured_and_unknown_keys_keep_order(self, products, sort_by):
        assert query_products(products, sort_by=sort_by) == products

    def test_accepts_enum(self, products):
        assert ids(sort_products(products, SortKey.NEWEST)) == [5, 4, 3, 2, 1]

    def test_sort_runs_after_filtering(self, products):
        result = query_products(products, CatalogQuery(categories=["Clothing"]), "price-high")
        assert ids(result) == [1, 5]


class TestLimit:
    def test_truncates_after_sorting(self, product_factory):
        catalog = [product_factory(i, price) for i, price in enumerate([9, 3, 7, 1, 5, 10, 2, 8, 4, 6], 1)]
        result = query_products(catalog, sort_by="price-low", limit=3)
        assert [p.price for p in result] == [1, 2, 3]

    def test_limit_larger_than_result(self, products):
        assert len(query_products(products, limit=50)) == 5

    @pytest.mark.parametrize("limit", [None, 0, -1])
    def test_non_positive_limit_is_unlimited(self, products, limit):
        assert len(query_products(products, limit=limit)) == 5


class TestPurity:
    def test_input_is_not_mutated(self, products):
        snapshot = list(products)
        dumps = [p.model_dump() for p in products]
        query_products(products, CatalogQuery(search="urban"), "price-high", 1)
        assert products == snapshot
        assert [p.model_dump() for p in products] == dumps

    def test_idempotent(self, products):
        query = CatalogQuery(categories=["Clothing", "Footwear"], discount=10)
        first = query_products(products, query, "discount", 2)
        second = query_products(products, query, "discount", 2)
        assert first == second


class TestMatches:
    def test_result_is_exactly_the_matching_subset(self, products):
        query = CatalogQuery(brands=["Urban", "DenimCo"], price_range=PriceRange(min=50, max=100))
        result = query_products(products, query)
        assert all(matches(p, query) for p in result)
        assert all(not matches(p, query) for p in products if p not in result)
        assert ids(result) == [1, 4, 5]
