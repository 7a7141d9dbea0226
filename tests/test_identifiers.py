import pytest

from connectors.identifiers import category_of, sanitize, table_name


@pytest.mark.parametrize("raw, expected", [
    ("vip", "vip"),
    ("VIP", "vip"),
    ("VIP!!", "vip__"),
    ("v-vip 2", "v_vip_2"),
    ("gold_tier", "gold_tier"),
    ("vip; DROP TABLE x", "vip__drop_table_x"),
    ("", "default"),
    (None, "default"),
])
def test_sanitize(raw, expected):
    assert sanitize(raw) == expected


@pytest.mark.parametrize("raw", ["vip", "VIP!!", "Ünïcödé", "a b-c", "", None, "x'y\"z"])
def test_sanitize_is_idempotent(raw):
    once = sanitize(raw)
    assert sanitize(once) == once


def test_sanitize_output_is_identifier_safe():
    assert set(sanitize("Rank/#1 ✓")) <= set("abcdefghijklmnopqrstuvwxyz0123456789_")


def test_table_name_prefixes_sanitized_category():
    assert table_name("VVIP") == "premium_rank_vvip"
    assert table_name(None) == "premium_rank_default"


def test_distinct_categories_can_share_a_table():
    assert table_name("vip!") == table_name("vip?")


def test_category_of():
    assert category_of("premium_rank_vip") == "vip"
    assert category_of("PREMIUM_RANK_VVIP") == "vvip"
    assert category_of("premium_rankings") is None
    assert category_of("other_table") is None
    assert category_of("") is None
