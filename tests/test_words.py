import pytest

from dotword.words import load_words


def test_bundled_list_loads():
    words = load_words()
    assert len(words) >= 100
    assert len(set(words)) == len(words)


def test_load_words_filters_and_keeps_order(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("# header\nzebra\n\napple\nzebra\nno-way\n  mango  \n", encoding="utf-8")
    assert load_words(p) == ["zebra", "apple", "mango"]


def test_word_list_from_env(tmp_path, monkeypatch):
    p = tmp_path / "custom.txt"
    p.write_text("lemon\ngrape\n", encoding="utf-8")
    monkeypatch.setenv("WORD_LIST", str(p))
    assert load_words() == ["lemon", "grape"]


def test_missing_word_list(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.txt")
