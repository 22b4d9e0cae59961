"""Tests for merchant normalisation."""

from __future__ import annotations

import pytest

from analytics.categorize import merchant_group, normalize_merchant
from config.rules import ForecastRules


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Spotify PTY LTD", "Spotify"),
        ("Spotify", "Spotify"),
        ("SQ *Anytime Fitness", "Anytime Fitness"),
        ("Google *YouTube Premium", "Youtube Premium"),
        ("DD 123456 Gym Co", "Gym Co"),
        ("Direct Debit Acme Insurance Ltd", "Acme Insurance"),
        ("Uber *Trip HELP.UBER.COM", "Uber"),
        ("  amazon   prime - video  ", "Amazon Prime Video"),
    ],
)
def test_normalize_merchant_strips_processor_noise(raw, expected):
    assert normalize_merchant(raw) == expected


def test_legal_suffix_variants_share_a_key():
    assert normalize_merchant("Spotify PTY LTD") == normalize_merchant("Spotify")
    assert normalize_merchant("spotify ltd") == normalize_merchant("SPOTIFY")


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_missing_descriptor_becomes_unknown(raw):
    assert normalize_merchant(raw) == "Unknown"


def test_non_string_descriptor_becomes_unknown():
    assert normalize_merchant(42) == "Unknown"


def test_empty_result_falls_back_to_trimmed_raw():
    assert normalize_merchant("  Paypal *Netflix ") == "Paypal *Netflix"
    assert normalize_merchant("!!!") == "!!!"


def test_stacked_prefixes_are_all_removed():
    assert normalize_merchant("DD 123 Direct Debit Gym") == "Gym"


@pytest.mark.parametrize(
    "raw",
    [
        "Spotify PTY LTD",
        "Paypal *Netflix",
        "DD 123 Direct Debit Gym",
        "paypal.direct debit x",
        "SQ *Anytime Fitness",
        "Netflix.com",
        "",
        "Disney+ Hotstar",
    ],
)
def test_normalize_merchant_is_idempotent(raw):
    once = normalize_merchant(raw)
    assert normalize_merchant(once) == once


def test_prefix_table_is_configurable():
    assert normalize_merchant("REF Netflix", prefixes=(r"ref ",)) == "Netflix"
    assert normalize_merchant("SQ *Cafe", prefixes=()) == "Sq"


def test_merchant_group_uses_rule_tables():
    rules = ForecastRules(processor_prefixes=(r"bpay ",), legal_suffixes=(" inc",))

    assert merchant_group("BPAY Acme Inc", rules) == "Acme"
    assert merchant_group("Spotify PTY LTD") == "Spotify"


def test_normalize_merchant_stacked_processor_noise_falls_back_to_raw():
    assert normalize_merchant("paypal paypal") == "paypal paypal"
    assert normalize_merchant("PAYPAL PAYPAL *NETFLIX") == "PAYPAL PAYPAL *NETFLIX"


def test_normalize_merchant_keeps_ascii_letters_only():
    assert normalize_merchant("Café Nero") == "Caf Nero"
    assert normalize_merchant("Café Nero") == normalize_merchant("CAFÉ NERO PTY LTD")
