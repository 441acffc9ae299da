"""Unit tests for the search box input surface."""

import pytest

from sieve.contexts.filtering import QueryInput


@pytest.mark.unit
class TestQueryInput:
    def test_set_text_notifies_synchronously(self):
        received = []
        search_box = QueryInput()
        search_box.subscribe(received.append)

        search_box.set_text("alpha")

        assert received == ["alpha"]
        assert search_box.text == "alpha"

    def test_keystrokes_build_up_the_query(self):
        received = []
        search_box = QueryInput()
        search_box.subscribe(received.append)

        for key in "js":
            search_box.type_key(key)

        assert received == ["j", "js"]

    @pytest.mark.parametrize("backspace", ["\x7f", "\b"])
    def test_backspace_deletes_last_character(self, backspace):
        received = []
        search_box = QueryInput("abc")
        search_box.subscribe(received.append)

        search_box.type_key(backspace)

        assert received == ["ab"]

    def test_backspace_on_empty_input(self):
        received = []
        search_box = QueryInput()
        search_box.subscribe(received.append)

        search_box.type_key("\x7f")

        assert received == [""]

    def test_only_one_subscriber(self):
        search_box = QueryInput()
        search_box.subscribe(lambda text: None)

        with pytest.raises(RuntimeError, match="already has a subscriber"):
            search_box.subscribe(lambda text: None)

    def test_unsubscribe_allows_rebinding(self):
        received = []
        search_box = QueryInput()
        search_box.subscribe(lambda text: None)
        search_box.unsubscribe()
        search_box.subscribe(received.append)

        search_box.clear()

        assert received == [""]

    def test_changes_without_subscriber_are_kept(self):
        search_box = QueryInput()
        search_box.set_text("beta")
        assert search_box.text == "beta"
        assert not search_box.is_subscribed
