import pytest

from autoaccept.text import normalize_for_match, count_contains, contains_any, build_snippet


class TestNormalizeForMatch:
    """Normalization of raw OCR text"""

    def test_case_and_diacritics_are_ignored(self):
        assert normalize_for_match("Permissão") == "permissao"
        assert normalize_for_match("permissao") == "permissao"
        assert normalize_for_match("PERMISSAO") == "permissao"

    def test_ocr_confusables_become_letters(self):
        assert "codex" in normalize_for_match("C0dex")
        assert normalize_for_match("A|low 0nce") == "allow once"
        assert normalize_for_match("5im") == "sim"
        assert normalize_for_match("A11ow") == "allow"

    def test_punctuation_and_line_breaks_collapse_to_single_spaces(self):
        assert normalize_for_match("Allow\r\nonce?!\t(yes)") == "allow once yes"
        assert normalize_for_match("  next-step ...  ") == "next step"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\r", "?!.,;"])
    def test_blank_input_yields_empty_string(self, text):
        assert normalize_for_match(text) == ""

    @pytest.mark.parametrize("text", [
        "Codex wants permission. Allow once?",
        "Posso continuar com o próximo passo?",
        "AÇÃO  105 |x| — ÜBER",
        "İstanbul naïve café",
        "tab\tseparated\nlines",
        "",
    ])
    def test_idempotent(self, text):
        once = normalize_for_match(text)
        assert normalize_for_match(once) == once

    def test_non_latin_letters_are_kept(self):
        assert normalize_for_match("Кодекс 承認") == "кодекс 承認"

    @pytest.mark.parametrize("text", ["x²y", "x½y", "xⅫy", "x①y"])
    def test_non_decimal_numbers_become_spaces(self, text):
        assert normalize_for_match(text) == "x y"

    def test_decimal_digits_from_other_scripts_are_kept(self):
        assert normalize_for_match("passo ٣") == "passo ٣"


class TestCountContains:
    """Lexicon matching on normalized text"""

    def test_counts_each_pattern_once(self):
        assert count_contains("allow allow allow", ["allow"]) == 1

    def test_adding_an_occurrence_never_decreases_the_count(self):
        patterns = ["allow", "confirm", "yes"]
        before = count_contains("please allow", patterns)
        after = count_contains("please allow yes", patterns)
        assert before == 1
        assert after == 2

    def test_patterns_are_normalized_before_matching(self):
        assert count_contains("proximo passo", ["Próximo Passo"]) == 1
        assert count_contains("next step", ["next-step"]) == 1

    def test_accented_and_plain_entries_count_separately(self):
        assert count_contains("o proximo passo", ["proximo passo", "próximo passo"]) == 2

    def test_empty_patterns_contribute_nothing(self):
        assert count_contains("allow once", ["...", "", "   "]) == 0

    def test_empty_text_matches_nothing(self):
        assert count_contains("", ["allow", "codex"]) == 0
        assert count_contains(normalize_for_match("  "), ["allow"]) == 0

    def test_substring_match_is_exact(self):
        assert count_contains("allowance", ["allow"]) == 1
        assert count_contains("alow", ["allow"]) == 0


def test_contains_any():
    assert contains_any("please continue", ("next", "continu"))
    assert not contains_any("please wait", ("next", "continu"))


def test_build_snippet_truncates_long_text():
    text = "a" * 130
    snippet = build_snippet(text)
    assert snippet == "a" * 120 + "..."
    assert build_snippet("short") == "short"
    assert build_snippet("a" * 120) == "a" * 120
