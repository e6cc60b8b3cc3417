"""Tests for core path utilities."""

import pytest

from pyqt_editable.core import canonical_path, join_path, placeholder_data_path


def test_join_path_at_root():
    assert join_path("", "x") == "x"
    assert join_path(None, "x") == "x"


def test_join_path_under_parent():
    assert join_path("/content/page", "x") == "/content/page/x"


@pytest.mark.parametrize("explicit, page, item, expected", [
    ("/content/explicit", "/content/page", "root", "/content/explicit"),
    (None, "/content/page", "root/title", "/content/page/root/title"),
    ("", "/content/page", None, "/content/page"),
    (None, None, "root", ""),
    (None, None, None, ""),
])
def test_canonical_path_precedence(explicit, page, item, expected):
    assert canonical_path(explicit, page, item) == expected


def test_placeholder_data_path():
    assert placeholder_data_path("/content/page/root") == "/content/page/root/*"
    assert placeholder_data_path("") == "/*"
