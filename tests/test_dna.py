import pytest

from password_analyzer import DNASegment, analyze_dna


def strengths(password):
    return [s.strength for s in analyze_dna(password)]

def reasons(password):
    return [s.reason for s in analyze_dna(password)]


@pytest.mark.parametrize("password", [
    "", "a", "qwerty", "P4ssw0rd!2024", "pässwörd🔒", "Aa1!" * 32, "   ",
])
def test_one_segment_per_character(password):
    assert len(analyze_dna(password)) == len(password)

def test_empty_password_has_no_segments():
    assert analyze_dna("") == []

def test_keyboard_row():
    assert strengths("qwerty") == [1, 1, 0, 0, 0, 0]
    assert reasons("qwerty")[2:] == ["keyboard pattern sequence"] * 4

def test_keyboard_row_is_case_insensitive():
    assert reasons("QWE")[2] == "keyboard pattern sequence"

def test_reversed_keyboard_row():
    assert analyze_dna("ewq")[2] == DNASegment(char="q", strength=0, reason="reversed keyboard pattern")

def test_sequential_run_overrides_keyboard_row():
    # "123" also sits on the digit row
    segments = analyze_dna("a123")
    assert [s.strength for s in segments] == [1, 2, 2, 0]
    assert segments[1].reason == "number mixed with letters"
    assert segments[3].reason == "sequential number run"
    assert analyze_dna("987")[2].reason == "sequential number run"

def test_repeats():
    assert strengths("aaa") == [1, 1, 0]
    assert reasons("aaa") == ["lowercase letter only", "repeated character", "repeating character"]

def test_pair_repeat_caps_strength():
    segment = analyze_dna("Xq!!")[3]
    assert segment.strength == 1
    assert segment.reason == "repeated character"

def test_character_classes():
    assert analyze_dna("Ab!") == [
        DNASegment(char="A", strength=3, reason="mixed case — strong"),
        DNASegment(char="b", strength=1, reason="lowercase letter only"),
        DNASegment(char="!", strength=3, reason="special character — excellent"),
    ]

def test_uppercase_without_lowercase_stays_acceptable():
    assert reasons("AB") == ["acceptable character", "acceptable character"]
    assert strengths("AB") == [2, 2]

def test_digits_without_letters():
    assert reasons("13") == ["digit only", "digit only"]
    assert strengths("13") == [1, 1]

def test_space_and_unicode_are_acceptable():
    assert analyze_dna(" ")[0].reason == "acceptable character"
    assert analyze_dna("é")[0].strength == 2

def test_masking_hides_middle_characters():
    assert "".join(s.char for s in analyze_dna("abcdefg")) == "ab***fg"
    assert "".join(s.char for s in analyze_dna("Zk!9x")) == "Zk!9x"

def test_masking_does_not_change_classification():
    # the masked "!" still scores as a symbol
    segment = analyze_dna("xK7!9mQ")[3]
    assert segment.char == "*"
    assert segment.strength == 3

def test_dna_is_idempotent():
    assert analyze_dna("Tr0ub4dor&3") == analyze_dna("Tr0ub4dor&3")

def test_dna_serializes_fields():
    assert analyze_dna("a")[0].model_dump(by_alias=True) == {
        "char": "a", "strength": 1, "reason": "lowercase letter only",
    }
