from parsers.tokenizer import (
    extract_token_value,
    extract_value,
    has_markers,
    normalize,
    split_head,
    tokenize,
)


class TestNormalize:
    def test_trims_collapses_and_lowercases(self):
        assert normalize("  Shift   ADD\ts/10:00   st/Ward  Rounds ") == "shift add s/10:00 st/ward rounds"

    def test_none_and_blank_become_empty(self):
        assert normalize(None) == ""
        assert normalize("   \t ") == ""


class TestSplitHead:
    def test_splits_first_word(self):
        assert split_head("add s/10:00 e/11:00") == ("add", "s/10:00 e/11:00")

    def test_single_word_has_empty_rest(self):
        assert split_head("list") == ("list", "")


class TestOrderedScan:
    LINE = "s/10:00 e/11:00 d/2999-01-01 st/rounds"

    def test_reads_up_to_end_marker(self):
        assert extract_value(self.LINE, "s/", "e/") == "10:00"
        assert extract_value(self.LINE, "e/", "d/") == "11:00"
        assert extract_value(self.LINE, "d/", "st/") == "2999-01-01"

    def test_reads_to_end_without_end_marker(self):
        assert extract_value(self.LINE, "st/") == "rounds"

    def test_reads_to_end_when_end_marker_absent(self):
        assert extract_value("s/10:00 d/x", "s/", "e/") == "10:00 d/x"

    def test_missing_start_marker_gives_empty_string(self):
        assert extract_value("e/11:00", "s/", "e/") == ""


class TestTokenScan:
    def test_tokenize_splits_before_markers(self):
        assert tokenize("id/1 st/give meds s/09:00") == ["id/1", "st/give meds", "s/09:00"]

    def test_order_independent_lookup(self):
        text = "st/give meds id/3 s/09:00"
        assert extract_token_value(text, "s/") == "09:00"
        assert extract_token_value(text, "st/") == "give meds"
        assert extract_token_value(text, "id/") == "3"

    def test_marker_does_not_match_inside_longer_marker(self):
        # "id/" must not be read as "d/", nor "st/" as "s/"
        assert extract_token_value("id/1 st/x", "d/") is None
        assert extract_token_value("id/1 st/x", "s/") is None

    def test_present_marker_with_empty_value(self):
        assert extract_token_value("id/1 s/", "s/") == ""

    def test_absent_marker_is_none(self):
        assert extract_token_value("id/1", "h/") is None


def test_has_markers_is_substring_check():
    assert has_markers("s/x e/y d/z st/w", "s/", "e/", "d/", "st/")
    assert not has_markers("s/x e/y st/w", "s/", "e/", "d/", "st/")
