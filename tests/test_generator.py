from collections import Counter
from dataclasses import replace

from passcraft.generator import build_charset, generate, missing_classes, shuffle
from passcraft.policy import LOWERCASE, NUMBERS, SYMBOLS, UPPERCASE, Policy

ALL = Policy(length=12, include_uppercase=True, include_lowercase=True,
             include_numbers=True, include_symbols=True)


def test_length_and_classes():
    pw = generate(ALL)
    assert len(pw) == 12
    assert any(c in UPPERCASE for c in pw)
    assert any(c in LOWERCASE for c in pw)
    assert any(c in NUMBERS for c in pw)
    assert any(c in SYMBOLS for c in pw)


def test_every_enabled_class_present_at_minimum_length():
    # four slots, four classes: repair must kick in often and still cover all
    policy = Policy(length=4, include_uppercase=True, include_lowercase=True,
                    include_numbers=True, include_symbols=True)
    for _ in range(200):
        pw = generate(policy)
        assert len(pw) == 4
        assert missing_classes(pw, policy) == []


def test_no_symbols():
    policy = Policy(length=10, include_symbols=False)
    pw = generate(policy)
    assert len(pw) == 10
    assert not any(c in SYMBOLS for c in pw)


def test_output_only_uses_enabled_classes():
    policy = Policy(length=64, include_uppercase=False, include_lowercase=False,
                    include_numbers=True, include_symbols=True)
    allowed = set(NUMBERS + SYMBOLS)
    for _ in range(20):
        assert set(generate(policy)) <= allowed


def test_zero_and_negative_length():
    assert generate(Policy(length=0)) == ""
    assert generate(Policy(length=-5)) == ""


def test_short_length_is_not_repaired_but_has_right_size():
    policy = Policy(length=2, include_uppercase=True, include_lowercase=True,
                    include_numbers=True, include_symbols=True)
    pw = generate(policy)
    assert len(pw) == 2
    assert set(pw) <= set(build_charset(policy))


def test_long_length_has_no_upper_bound():
    pw = generate(Policy(length=1000))
    assert len(pw) == 1000


def test_empty_policy_falls_back_to_lowercase():
    policy = Policy(length=16, include_uppercase=False, include_lowercase=False,
                    include_numbers=False, include_symbols=False)
    assert build_charset(policy) == LOWERCASE
    assert set(generate(policy)) <= set(LOWERCASE)


def test_charset_order():
    assert build_charset(ALL) == UPPERCASE + LOWERCASE + NUMBERS + SYMBOLS
    assert build_charset(Policy(include_uppercase=False)) == LOWERCASE + NUMBERS


def test_repeated_generation_differs():
    outputs = {generate(ALL) for _ in range(10)}
    assert len(outputs) > 1


def test_missing_classes():
    assert [name for name, _ in missing_classes("abc", ALL)] == ["uppercase", "numbers", "symbols"]
    assert missing_classes("Ab1!", ALL) == []


def test_shuffle_preserves_characters():
    chars = list("AAbc12!!xyz")
    before = Counter(chars)
    shuffled = shuffle(chars)
    assert shuffled is chars
    assert Counter(shuffled) == before
    assert shuffle([]) == []
    assert shuffle(["x"]) == ["x"]


def _fixed_bytes(data):
    def token_bytes(n):
        assert n == len(data)
        return data
    return token_bytes


def test_bytes_map_to_charset_by_modulo_and_short_is_not_repaired(monkeypatch):
    monkeypatch.setattr("passcraft.generator.token_bytes", _fixed_bytes(b"\x00\x01\x1a"))
    policy = Policy(length=3, include_uppercase=True, include_lowercase=True,
                    include_numbers=True, include_symbols=True)
    # 0 -> 'A', 1 -> 'B', 26 -> 'a'; numbers and symbols stay missing
    assert generate(policy) == "ABa"


def test_modulo_wraps_past_charset_end(monkeypatch):
    # lowercase only: 26 chars, so 27 -> 'b' and 255 -> 255 % 26 = 21 -> 'v'
    monkeypatch.setattr("passcraft.generator.token_bytes", _fixed_bytes(b"\x1b\xff\x00\x01"))
    policy = Policy(length=4, include_uppercase=False, include_lowercase=True,
                    include_numbers=False, include_symbols=False)
    assert generate(policy) == "bvab"


def test_repair_inserts_one_char_per_enabled_class(monkeypatch):
    monkeypatch.setattr("passcraft.generator.token_bytes", _fixed_bytes(bytes(8)))
    pw = generate(replace(ALL, length=8))
    assert len(pw) == 8
    assert missing_classes(pw, ALL) == []
    # four slots overwritten, the other four still the drawn 'A'
    assert pw.count("A") >= 4


def test_covering_draw_is_returned_unshuffled(monkeypatch):
    # 0 -> 'A', 26 -> 'a', 52 -> '0', 62 -> '!'
    monkeypatch.setattr("passcraft.generator.token_bytes", _fixed_bytes(bytes([62, 52, 26, 0, 1])))
    assert generate(replace(ALL, length=5)) == "!0aAB"
