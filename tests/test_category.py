import pytest

from tunequeue.category import Category


def test_from_api():
    category = Category.from_api({"id": "chill", "name": "Chill", "icons": []})
    assert category == Category(id="chill", name="Chill")


def test_str_is_name():
    assert str(Category("party", "Party")) == "Party"


def test_share_url():
    assert Category("chill", "Chill").share_url() == "https://open.spotify.com/genre/chill"


def test_from_api_requires_id():
    with pytest.raises(KeyError):
        Category.from_api({"name": "Nameless"})