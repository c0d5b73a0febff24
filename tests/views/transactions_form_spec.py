"""Add-form category options keep the draft's value selected."""
from __future__ import annotations

from config import EXPENSE_CATEGORIES
from views.transactions import _category_options


def test_blank_draft_selects_empty_option():
    options = _category_options("")
    assert options[0] == ""
    assert options.index("") == 0
    assert len(options) == len(set(options))


def test_suggested_category_is_preselected():
    category = EXPENSE_CATEGORIES[1]
    options = _category_options(category)
    assert options.index(category) > 0
    assert options.count(category) == 1


def test_custom_category_is_kept():
    options = _category_options("Pet shop")
    assert options[-1] == "Pet shop"
    assert options.index("Pet shop") > 0
