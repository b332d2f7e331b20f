# password_analyzer.py
from types import MappingProxyType
from typing import Callable, List, Optional, Tuple
import re

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# ---------------- CONFIG / THRESHOLDS ----------------
GUESSES_PER_SECOND = 10_000_000_000   # offline brute force rig
MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
YEAR = 365 * DAY

LENGTH_POINTS_PER_CHAR = 4
LENGTH_POINTS_CAP = 40
CLASS_POINTS = {"lower": 5, "upper": 10, "digit": 10, "symbol": 15}
COMMON_PENALTY = 40
KEYBOARD_PENALTY = 15
REPEAT_PENALTY = 10
SEQUENTIAL_PENALTY = 10
SHORT_PENALTY = 20
SHORT_LENGTH = 6
VARIETY_BONUS = 10

CHARSET_LOWER = 26
CHARSET_UPPER = 26
CHARSET_DIGITS = 10
CHARSET_SYMBOLS = 33

MASK_CHAR = "*"

# ---------------- DATA (fixed lexicon and tables) ----------------
COMMON_PASSWORDS = frozenset({
    "password", "123456", "12345678", "qwerty", "abc123", "monkey", "1234567",
    "letmein", "trustno1", "dragon", "baseball", "iloveyou", "master", "sunshine",
    "ashley", "bailey", "shadow", "123123", "654321", "superman", "qazwsx",
    "michael", "football", "password1", "password123", "batman", "login",
    "welcome", "hello", "charlie", "donald", "admin", "qwerty123", "passw0rd",
    "starwars", "princess", "cheese", "121212", "flower", "hottie", "loveme",
    "zaq1zaq1", "111111", "1234", "12345", "1q2w3e4r", "123456789", "000000",
    "azerty", "access", "test", "love", "god", "buster", "killer", "jordan",
    "jennifer", "hunter", "amanda", "jessica", "harley", "ranger", "thomas",
    "robert", "soccer", "hockey", "george", "andrew", "michelle", "daniel",
    "taylor", "apple", "pepper", "ginger", "joshua", "summer", "chicken",
    "compaq", "corvette", "mercedes", "maverick", "cookie", "samantha", "secret",
    "1234567890", "qwerty1", "computer", "internet", "whatever", "696969",
    "matrix", "mustang", "yankees", "cheese1", "camaro", "blahblah",
})

KEYBOARD_PATTERNS = (
    "qwerty", "asdf", "zxcv", "1234", "0987", "qazwsx", "1q2w3e",
    "!@#$%", "abcdef", "asdfjkl",
)

KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm", "1234567890")

LEET_MAP = MappingProxyType({
    "0": "o", "1": "i", "3": "e", "4": "a", "5": "s", "7": "t", "@": "a", "!": "i",
})

DIGITS = "0123456789"
DNA_SYMBOLS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?`~")

ALL_DIGITS_RE = re.compile(r"[0-9]+")
ALL_LETTERS_RE = re.compile(r"[a-zA-Z]+")
NAME_NUMBERS_RE = re.compile(r"[A-Z][a-z]+[0-9]+")
WORD_SUFFIX_RE = re.compile(r"[a-z]+[0-9]{1,4}")
YEAR_RE = re.compile(r"19[5-9][0-9]|20[0-2][0-9]")
REPEAT_RE = re.compile(r"(.)\1{2,}")

# ---------------- RESULT MODELS ----------------
class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class PasswordFlags(_Record):
    length: int
    has_uppercase: bool
    has_lowercase: bool
    has_numbers: bool
    has_symbols: bool
    is_common: bool
    has_keyboard_pattern: bool
    has_repeating_chars: bool
    has_sequential_numbers: bool


class PasswordCharacteristics(PasswordFlags):
    estimated_crack_time: str
    strength_score: int
    death_cause: str
    patterns: Tuple[str, ...]


class DNASegment(_Record):
    char: str
    strength: int
    reason: str

# ---------------- BASIC HELPERS ----------------
def has_upper(p): return any("A" <= c <= "Z" for c in p)
def has_lower(p): return any("a" <= c <= "z" for c in p)
def has_digit(p): return any(c in DIGITS for c in p)
def has_symbol(p): return any(not (c.isascii() and c.isalnum()) for c in p)
def has_letter(p): return has_upper(p) or has_lower(p)

def clamp(v: int, a: int = 0, b: int = 100) -> int:
    return max(a, min(b, v))

def _is_run(a: str, b: str, c: str) -> bool:
    """True when three single characters are ASCII digits stepping by exactly +1 or -1."""
    if not (a in DIGITS and b in DIGITS and c in DIGITS):
        return False
    x, y, z = int(a), int(b), int(c)
    return (y == x + 1 and z == y + 1) or (y == x - 1 and z == y - 1)

# ---------------- LEXICON ----------------
def de_leet(password: str) -> str:
    return "".join(LEET_MAP.get(c, c) for c in password).lower()

def is_common(password: str) -> bool:
    return password.lower() in COMMON_PASSWORDS or de_leet(password) in COMMON_PASSWORDS

# ---------------- STRUCTURAL PATTERNS ----------------
def has_keyboard_pattern(password: str) -> bool:
    s = password.lower()
    return any(seq in s for seq in KEYBOARD_PATTERNS)

def has_repeating_chars(password: str) -> bool:
    return REPEAT_RE.search(password) is not None

def has_sequential_numbers(password: str) -> bool:
    for i in range(len(password) - 2):
        if _is_run(password[i], password[i + 1], password[i + 2]):
            return True
    return False

def detect_patterns(password: str) -> List[str]:
    """Human-readable weakness tags, always in the same detector order."""
    patterns: List[str] = []
    lower = password.lower()
    leet = de_leet(password)
    length = len(password)

    common = lower in COMMON_PASSWORDS
    if common:
        patterns.append("common password")
    # a plain common password is not also reported as its own leet variant
    if not common and leet != lower and leet in COMMON_PASSWORDS:
        patterns.append("leet-speak substitution of a common password")
    if has_keyboard_pattern(password):
        patterns.append("keyboard pattern")
    if has_repeating_chars(password):
        patterns.append("repeating characters")
    if has_sequential_numbers(password):
        patterns.append("sequential numbers")
    if ALL_DIGITS_RE.fullmatch(password):
        patterns.append("numbers only")
    if ALL_LETTERS_RE.fullmatch(password):
        patterns.append("letters only")
    if length <= 4:
        patterns.append("extremely short")
    elif length <= 6:
        patterns.append("very short")
    if NAME_NUMBERS_RE.fullmatch(password):
        patterns.append("name + numbers pattern")
    if WORD_SUFFIX_RE.fullmatch(password):
        patterns.append("word + short number suffix")
    if YEAR_RE.search(password):
        patterns.append("contains a year")

    return patterns

# ---------------- SCORING ----------------
def class_count(flags: PasswordFlags) -> int:
    return sum([flags.has_lowercase, flags.has_uppercase, flags.has_numbers, flags.has_symbols])

def calculate_strength(password: str, flags: PasswordFlags) -> int:
    score = min(len(password) * LENGTH_POINTS_PER_CHAR, LENGTH_POINTS_CAP)

    if flags.has_lowercase:
        score += CLASS_POINTS["lower"]
    if flags.has_uppercase:
        score += CLASS_POINTS["upper"]
    if flags.has_numbers:
        score += CLASS_POINTS["digit"]
    if flags.has_symbols:
        score += CLASS_POINTS["symbol"]

    if flags.is_common:
        score -= COMMON_PENALTY
    if flags.has_keyboard_pattern:
        score -= KEYBOARD_PENALTY
    if flags.has_repeating_chars:
        score -= REPEAT_PENALTY
    if flags.has_sequential_numbers:
        score -= SEQUENTIAL_PENALTY
    if len(password) < SHORT_LENGTH:
        score -= SHORT_PENALTY

    used = class_count(flags)
    if used >= 3:
        score += VARIETY_BONUS
    if used == 4:
        score += VARIETY_BONUS

    return clamp(score, 0, 100)

# ---------------- CRACK TIME ----------------
# (upper bound in seconds, unit in seconds, label); ceiling rounding within a bucket
CRACK_TIME_BUCKETS = (
    (MINUTE, 1, "seconds"),
    (HOUR, MINUTE, "minutes"),
    (DAY, HOUR, "hours"),
    (YEAR, DAY, "days"),
    (YEAR * 1000, YEAR, "years"),
    (YEAR * 1_000_000, YEAR * 1000, "thousand years"),
)

def charset_size(flags: PasswordFlags) -> int:
    size = 0
    if flags.has_lowercase:
        size += CHARSET_LOWER
    if flags.has_uppercase:
        size += CHARSET_UPPER
    if flags.has_numbers:
        size += CHARSET_DIGITS
    if flags.has_symbols:
        size += CHARSET_SYMBOLS
    return size or CHARSET_LOWER

def pretty_time_to_crack(combinations: int) -> str:
    # exact integer arithmetic: seconds = combinations / GUESSES_PER_SECOND
    if combinations < GUESSES_PER_SECOND:
        return "less than a second"
    for limit, unit, name in CRACK_TIME_BUCKETS:
        if combinations < limit * GUESSES_PER_SECOND:
            per_unit = unit * GUESSES_PER_SECOND
            return f"{-(-combinations // per_unit)} {name}"
    return "millions of years"

def estimate_crack_time(password: str, flags: PasswordFlags) -> str:
    if flags.is_common:
        return "instantly (common password)"
    return pretty_time_to_crack(charset_size(flags) ** len(password))

# ---------------- DEATH CAUSE ----------------
DeathRule = Tuple[Callable[[PasswordFlags, int], bool], str]

DEATH_RULES: Tuple[DeathRule, ...] = (
    (lambda f, b: f.is_common, "dictionary attack"),
    (lambda f, b: b > 1000, "credential stuffing"),
    (lambda f, b: (f.has_keyboard_pattern or f.has_sequential_numbers) and not f.has_symbols,
     "pattern-based attack"),
    (lambda f, b: f.length <= 6, "brute force"),
    (lambda f, b: f.length <= 8 and not f.has_symbols and not f.has_uppercase, "brute force"),
    (lambda f, b: b > 0, "credential stuffing"),
)
DEFAULT_DEATH_CAUSE = "social engineering"

def classify_death_cause(flags: PasswordFlags, breach_count: Optional[int] = None) -> str:
    breaches = breach_count or 0
    for predicate, cause in DEATH_RULES:
        if predicate(flags, breaches):
            return cause
    return DEFAULT_DEATH_CAUSE

# ---------------- CORE ANALYSIS ----------------
def password_flags(password: str) -> PasswordFlags:
    return PasswordFlags(
        length=len(password),
        has_uppercase=has_upper(password),
        has_lowercase=has_lower(password),
        has_numbers=has_digit(password),
        has_symbols=has_symbol(password),
        is_common=is_common(password),
        has_keyboard_pattern=has_keyboard_pattern(password),
        has_repeating_chars=has_repeating_chars(password),
        has_sequential_numbers=has_sequential_numbers(password),
    )

def analyze(password: str) -> PasswordCharacteristics:
    flags = password_flags(password)
    return PasswordCharacteristics(
        **flags.model_dump(),
        estimated_crack_time=estimate_crack_time(password, flags),
        strength_score=calculate_strength(password, flags),
        death_cause=classify_death_cause(flags),
        patterns=tuple(detect_patterns(password)),
    )

# ---------------- DNA ----------------
def _window_strength(password: str, i: int) -> Tuple[int, str]:
    strength, reason = 2, "acceptable character"

    if i >= 2:
        sub = password[i - 2:i + 1].lower()
        for row in KEYBOARD_ROWS:
            if sub in row:
                strength, reason = 0, "keyboard pattern sequence"
                break
            if sub[::-1] in row:
                strength, reason = 0, "reversed keyboard pattern"
                break

        if _is_run(password[i - 2], password[i - 1], password[i]):
            strength, reason = 0, "sequential number run"

    c = password[i]
    if i >= 2 and c == password[i - 1] == password[i - 2]:
        strength, reason = 0, "repeating character"
    elif i >= 1 and c == password[i - 1] and strength > 0:
        strength, reason = min(strength, 1), "repeated character"

    return strength, reason

def _class_strength(password: str, c: str, strength: int, reason: str) -> Tuple[int, str]:
    if c in DNA_SYMBOLS:
        return 3, "special character — excellent"
    if "A" <= c <= "Z" and has_lower(password):
        return 3, "mixed case — strong"
    if c in DIGITS and has_letter(password):
        return 2, "number mixed with letters"
    if "a" <= c <= "z":
        return 1, "lowercase letter only"
    if c in DIGITS:
        return 1, "digit only"
    return strength, reason

def display_char(password: str, i: int) -> str:
    n = len(password)
    if i < 2 or i >= n - 2 or n <= 5:
        return password[i]
    return MASK_CHAR

def analyze_dna(password: str) -> List[DNASegment]:
    """Rate every character 0 (very weak) to 3 (strong) for the heatmap view."""
    segments: List[DNASegment] = []
    for i, c in enumerate(password):
        strength, reason = _window_strength(password, i)
        if strength >= 2:
            strength, reason = _class_strength(password, c, strength, reason)
        segments.append(DNASegment(char=display_char(password, i), strength=strength, reason=reason))
    return segments

# ---------------- PROMPT FACTS / MASKING ----------------
def format_characteristics_for_prompt(chars: PasswordCharacteristics) -> str:
    classes = [
        name for name, present in (
            ("lowercase", chars.has_lowercase),
            ("uppercase", chars.has_uppercase),
            ("numbers", chars.has_numbers),
            ("symbols", chars.has_symbols),
        ) if present
    ]
    parts = [
        f"Length: {chars.length} characters",
        f"Contains: {', '.join(classes) or 'unknown'}",
        f"Strength score: {chars.strength_score}/100",
        f"Estimated crack time: {chars.estimated_crack_time}",
    ]
    if chars.patterns:
        parts.append(f"Patterns detected: {', '.join(chars.patterns)}")
    return "\n".join(parts)

def mask_password(password: str) -> str:
    n = len(password)
    if n <= 2:
        return MASK_CHAR * n
    if n <= 4:
        return password[0] + MASK_CHAR * (n - 1)
    return password[:2] + MASK_CHAR * min(n - 4, 6) + password[-2:]
