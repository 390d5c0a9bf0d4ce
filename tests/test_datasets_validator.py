import json
from pathlib import Path
from wordmastermind.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane", "raise", "stare", "ab", "lemons"])

    rep = validate_wordlist(str(words), min_length=5, max_length=5)
    assert rep["passed"] is True
    assert rep["format"] == "text"
    assert rep["count"] == 5
    assert rep["lengths"] == {2: 1, 5: 3, 6: 1}
    assert rep["out_of_range"] == 2
    s = pretty_summary(rep)
    assert "words.txt" in s and "lengths=2..6" in s and s.endswith("OK")


def test_validate_wordlist_json(tmp_path: Path):
    p = tmp_path / "scrabble-dictionary.json"
    p.write_text(json.dumps({"hello": "", "world": ""}), encoding="utf-8")

    rep = validate_wordlist(str(p))
    assert rep["passed"] is True
    assert rep["format"] == "json"
    assert len(rep["sha256"]) == 64


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # invalid chars, duplicates
    p = tmp_path / "words.txt"
    p.write_text("raiser\n???\nraiser\nc3po\n", encoding="utf-8")

    rep = validate_wordlist(str(p))
    assert rep["passed"] is False
    assert rep["invalid_entries"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_range_violation(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "stare"])

    rep = validate_wordlist(str(p), min_length=16, max_length=16)
    assert rep["passed"] is False
    assert any("no words with length" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_and_malformed(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "missing.json"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])

    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")
    rep = validate_wordlist(str(bad))
    assert rep["exists"] is True and rep["passed"] is False
    assert any("not valid JSON" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_invalid_utf8(tmp_path: Path):
    for name, raw in [("words.txt", b"hello\n\xff\xfe\n"), ("words.json", b'["hello", "\xff\xfe"]')]:
        p = tmp_path / name
        p.write_bytes(raw)
        rep = validate_wordlist(str(p))
        assert rep["exists"] is True and rep["passed"] is False
        assert any("not valid UTF-8" in msg for msg in rep["issues"])
        assert len(rep["sha256"]) == 64
