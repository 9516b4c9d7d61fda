from urllib.parse import urlparse

from flatsearch.common.search_url import build_search_url, describe_filters, parse_search_url


BASE = "https://api.test/3.5/es/search"

MADRID_RENT = {
    "country": "es",
    "operation": "rent",
    "propertyType": "homes",
    "maxPrice": "3000",
    "center": "40.416,-3.7025",
    "distance": "20000",
    "maxItems": "50",
}


def test_url_contains_every_filter_once():
    url = build_search_url(MADRID_RENT, base_url=BASE)

    assert url.startswith(BASE + "?")
    pairs = urlparse(url).query.split("&")
    assert len(pairs) == 7
    assert parse_search_url(url) == MADRID_RENT


def test_url_percent_encodes_values():
    url = build_search_url({"center": "40.416,-3.7025", "q": "a b&c"}, base_url=BASE)

    assert "center=40.416%2C-3.7025" in url
    assert "q=a+b%26c" in url
    assert parse_search_url(url)["q"] == "a b&c"


def test_url_is_order_independent_as_a_set():
    reordered = dict(reversed(list(MADRID_RENT.items())))

    first = set(urlparse(build_search_url(MADRID_RENT, base_url=BASE)).query.split("&"))
    second = set(urlparse(build_search_url(reordered, base_url=BASE)).query.split("&"))

    assert first == second


def test_empty_filters_give_bare_endpoint():
    assert build_search_url({}, base_url=BASE) == BASE


def test_empty_value_is_still_sent():
    url = build_search_url({"sinceDate": ""}, base_url=BASE)

    assert url == BASE + "?sinceDate="
    assert parse_search_url(url) == {"sinceDate": ""}


def test_existing_query_on_base_is_kept():
    url = build_search_url({"operation": "sale"}, base_url=BASE + "?apikey=x")

    assert url == BASE + "?apikey=x&operation=sale"


def test_default_base_comes_from_settings():
    url = build_search_url({"operation": "rent"})

    assert url.endswith("/search?operation=rent")


def test_describe_filters_skips_empty_values():
    assert describe_filters({"operation": "rent", "sinceDate": ""}) == "operation=rent"
    assert describe_filters({}) == "no filters"
