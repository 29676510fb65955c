"""Tests for multi-variant answer validation."""

import pytest

from lingograde.engine.validator import DEFAULT_THRESHOLDS, Tolerance, validate_answer


class TestThresholds:
    def test_values(self):
        assert DEFAULT_THRESHOLDS[Tolerance.STRICT] == 1.0
        assert DEFAULT_THRESHOLDS[Tolerance.NORMAL] == 0.85
        assert DEFAULT_THRESHOLDS[Tolerance.LENIENT] == 0.70

    def test_ordering(self):
        t = DEFAULT_THRESHOLDS
        assert t[Tolerance.STRICT] >= t[Tolerance.NORMAL] >= t[Tolerance.LENIENT]

    def test_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_THRESHOLDS[Tolerance.STRICT] = 0.5


class TestValidateAnswer:
    def test_multi_variant_selection(self):
        result = validate_answer("cat", "dog/cat/bird", "strict")
        assert result.is_correct
        assert result.matched_answer == "cat"
        assert result.similarity == 1.0

    def test_variants_are_trimmed(self):
        result = validate_answer("takeaway", "To go / Takeaway", Tolerance.STRICT)
        assert result.is_correct
        assert result.matched_answer == "Takeaway"

    def test_one_typo_passes_normal(self):
        result = validate_answer("receve", "receive", "normal")
        assert result.is_correct
        assert result.similarity == pytest.approx(6 / 7)

    def test_transposition_fails_normal_passes_lenient(self):
        # Swapping two letters is two substitutions: 5/7
        assert not validate_answer("recieve", "receive", "normal").is_correct
        assert validate_answer("recieve", "receive", "lenient").is_correct

    def test_threshold_is_inclusive(self):
        score = 1.0 - 1 / 3  # "cat" vs "bat"
        thresholds = {Tolerance.NORMAL: score}
        result = validate_answer("cat", "bat", "normal", thresholds=thresholds)
        assert result.similarity == score
        assert result.is_correct

    def test_tie_keeps_first_variant(self):
        result = validate_answer("cat", "bat/hat", "lenient")
        assert result.matched_answer == "bat"
        assert result.similarity == pytest.approx(2 / 3)
        assert not result.is_correct

    def test_best_variant_wins_over_earlier(self):
        result = validate_answer("bird", "cat/bard", "strict")
        assert result.matched_answer == "bard"
        assert result.similarity == pytest.approx(0.75)
        assert not result.is_correct

    def test_no_match_defaults_to_first_variant(self):
        result = validate_answer("xyz", "abc/def", "lenient")
        assert result.matched_answer == "abc"
        assert result.similarity == 0.0
        assert not result.is_correct

    def test_empty_user_answer(self):
        result = validate_answer("", "cat", "lenient")
        assert not result.is_correct
        assert result.similarity == 0.0
        assert result.matched_answer == "cat"

    def test_empty_expected_answer(self):
        result = validate_answer("cat", "", "lenient")
        assert not result.is_correct
        assert result.matched_answer == ""

    def test_case_and_punctuation_ignored(self):
        assert validate_answer("Hello, world!", "hello world", "strict").is_correct

    def test_unknown_tolerance(self):
        with pytest.raises(ValueError):
            validate_answer("cat", "cat", "sloppy")

    @pytest.mark.parametrize("user,expected", [
        ("cat", "cat"),
        ("receve", "receive"),
        ("recieve", "receive"),
        ("cat", "bat"),
        ("to go", "To go / Takeaway"),
    ])
    def test_tolerance_monotonicity(self, user, expected):
        strict = validate_answer(user, expected, "strict").is_correct
        normal = validate_answer(user, expected, "normal").is_correct
        lenient = validate_answer(user, expected, "lenient").is_correct
        if strict:
            assert normal and lenient
        if normal:
            assert lenient
