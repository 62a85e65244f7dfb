import itertools
import random

import pytest
from warlord.engine import (
    ABSENT, DISPLACED, EXACT, ConstraintEngine, ContractViolation, FeedbackSymbol,
    PatternParseError, filter_words, format_pattern, from_labels, generate_feedback, is_solved,
    matches, parse_pattern, parse_submission, to_labels, validate_guess,
)


def fb(pattern):
    return parse_pattern(pattern)


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "XGYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GGXXX"),
    ("cools", "scoop", "YYGXY"),
    ("scoop", "scoop", "GGGGG"),
    ("crane", "crane", "GGGGG"),
    ("raise", "crane", "YYXXG"),
    ("stare", "crane", "XXGYG"),
    ("allay", "apple", "GYXXX"),
])
def test_generate_feedback_n5_golden(guess, answer, expected):
    assert format_pattern(generate_feedback(answer, guess)) == expected


# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle", "letter", "XGGGYY"),
    ("little", "letter", "GXGGXY"),
    ("planet", "palate", "GYYXYY"),
    ("kitten", "tinket", "YGYYGY"),
])
def test_generate_feedback_n6_samples(guess, answer, expected):
    assert format_pattern(generate_feedback(answer, guess)) == expected


def test_generate_feedback_length_mismatch_is_contract_violation():
    with pytest.raises(ContractViolation):
        generate_feedback("crane", "cranes")


def test_parse_pattern_is_case_insensitive():
    assert parse_pattern("gYx") == [EXACT, DISPLACED, ABSENT]


def test_parse_pattern_names_bad_character():
    with pytest.raises(PatternParseError) as ei:
        parse_pattern("GX-YG")
    assert ei.value.char == "-"
    assert ei.value.position == 2
    assert "'-'" in str(ei.value)


def test_pattern_and_label_round_trip():
    symbols = list(FeedbackSymbol)
    assert parse_pattern(format_pattern(symbols)) == symbols
    assert [FeedbackSymbol.from_label(s.label) for s in symbols] == symbols
    assert EXACT.label == "green" and DISPLACED.label == "yellow" and ABSENT.label == "gray"
    with pytest.raises(ValueError):
        FeedbackSymbol.from_label("purple")


def test_is_solved():
    assert is_solved(fb("GGGGG"))
    assert not is_solved(fb("GGGGY"))
    assert not is_solved([])


def test_filter_words_n5_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    cand = filter_words(words, "raise", fb("YYXXG"))
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_words_n6_basic():
    words = ["letter", "settle", "little", "tattle", "better"]
    cand = filter_words(words, "settle", fb("XGGGYY"))
    assert "letter" in cand and "better" not in cand


def test_displaced_letter_cannot_sit_in_guessed_slot():
    assert filter_words(["crate", "trace", "react"], "crate", fb("XYXXX")) == []


def test_exact_does_not_license_extra_copies():
    assert filter_words(["sassy", "gassy", "class"], "sassy", fb("GXXXG")) == []


def test_repeated_letter_absent_respects_min_count():
    words = ["label", "cello", "helot", "pilot"]
    assert filter_words(words, "allot", fb("XYXXX")) == []


def test_absent_duplicate_still_allows_one_copy():
    # 'l' once displaced, once absent: exactly one 'l', not at index 1.
    assert matches("cloud", "allot", fb("XYXXX")) is False  # has 'o'
    assert matches("lucky", "allot", fb("XYXXX")) is True
    assert matches("lulls", "allot", fb("XYXXX")) is False


def test_two_displaced_marks_need_two_copies():
    assert matches("steam", "eerie", fb("YYXXX")) is False
    assert matches("theme", "eerie", fb("YYXXX")) is True
    assert matches("fever", "eerie", fb("YYXXX")) is False


def test_filter_words_exact_and_length():
    assert filter_words(["apple", "apply", "angle", "ample"], "apple", fb("GGGGG")) == ["apple"]
    assert filter_words(["apple", "apples", "appl"], "apple", fb("GGGGG")) == ["apple"]


def test_matches_mismatched_lengths_is_false():
    assert matches("apples", "apple", fb("GGGGG")) is False


def test_engine_end_to_end():
    words = ["dusky", "dusty", "dumpy", "daisy"]
    eng = ConstraintEngine(5)

    eng.add_guess("daisy", [EXACT, ABSENT, ABSENT, DISPLACED, EXACT])
    assert eng.filter(words) == ["dusky", "dusty"]

    eng.add_guess("dusty", [EXACT, EXACT, ABSENT, EXACT, EXACT])
    assert eng.filter(words) == []


def test_engine_pop_guess_is_lifo_and_noop_when_empty():
    eng = ConstraintEngine(5)
    assert eng.pop_guess() is None
    eng.add_guess("crane", fb("XXXXX"))
    eng.add_guess("DUSTY", fb("XXXXX"))
    assert eng.guesses[-1].word == "dusty"
    assert eng.pop_guess().word == "dusty"
    assert [g.word for g in eng.guesses] == ["crane"]
    assert eng.guesses[0].pattern == "XXXXX"


@pytest.mark.parametrize("word,pattern", [("cranes", "XXXXXX"), ("crane", "XXXX"), ("cran", "XXXX")])
def test_engine_rejects_length_mismatch(word, pattern):
    eng = ConstraintEngine(5)
    with pytest.raises(ContractViolation):
        eng.add_guess(word, fb(pattern))
    assert len(eng) == 0


def test_engine_requires_positive_length():
    with pytest.raises(ContractViolation):
        ConstraintEngine(0)


def test_filter_is_idempotent_and_undo_restores():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "slate"]
    eng = ConstraintEngine(5)
    eng.add_guess("raise", fb("YYXXG"))
    first = eng.filter(words)
    assert eng.filter(words) == first

    eng.add_guess("trace", fb("XGGYG"))
    eng.pop_guess()
    assert eng.filter(words) == first


def test_adding_guesses_never_grows_the_pool():
    rng = random.Random(3)
    words = ["".join(rng.choice("abcde") for _ in range(5)) for _ in range(300)]
    eng = ConstraintEngine(5)
    size = len(eng.filter(words))
    for _ in range(6):
        target, guess = rng.choice(words), rng.choice(words)
        eng.add_guess(guess, generate_feedback(target, guess))
        new_size = len(eng.filter(words))
        assert new_size <= size
        size = new_size


def test_feedback_is_always_consistent_with_its_target():
    words = ["level", "belle", "lemon", "cools", "scoop", "allot", "label",
             "eerie", "geese", "sassy", "abbey", "kayak", "llama", "hello"]
    for target, guess in itertools.product(words, repeat=2):
        assert matches(target, guess, generate_feedback(target, guess)), (target, guess)

    rng = random.Random(11)
    for _ in range(500):
        target = "".join(rng.choice("abc") for _ in range(5))
        guess = "".join(rng.choice("abc") for _ in range(5))
        assert matches(target, guess, generate_feedback(target, guess)), (target, guess)


def test_validate_guess_n5():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("CRANE", allowed, N=5) is True
    assert validate_guess("cranes", allowed, N=5) is False
    assert validate_guess("???", allowed, N=5) is False
    assert validate_guess(None, allowed, N=5) is False


def test_parse_submission():
    assert parse_submission(" Daisy ", "gxxyg", 5) == ("daisy", fb("GXXYG"))
    with pytest.raises(ValueError, match="same length"):
        parse_submission("daisy", "GXX", 5)
    with pytest.raises(ValueError, match="5 letters"):
        parse_submission("dais", "GXXY", 5)
    with pytest.raises(PatternParseError):
        parse_submission("daisy", "GXXYZ", 5)


def test_label_sequences_round_trip():
    feedback = fb("GYXXG")
    assert to_labels(feedback) == ["green", "yellow", "gray", "gray", "green"]
    assert from_labels(to_labels(feedback)) == feedback
    with pytest.raises(ValueError):
        from_labels(["green", "grey"])
