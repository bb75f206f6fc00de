from drills.words import normalize_and_sort, word_tally


def test_counts_simple_sentence():
    counts = word_tally("Rust is fast and Rust is friendly")
    assert counts == {"rust": 2, "is": 2, "fast": 1, "and": 1, "friendly": 1}


def test_strips_punctuation():
    counts = word_tally("Hello, world! Hello???")
    assert counts.get("hello") == 2
    assert counts.get("world") == 1


def test_ignores_empty_segments():
    counts = word_tally(" ..RUST.. ")
    assert len(counts) == 1
    assert counts == {"rust": 1}


def test_handles_mixed_case_and_numbers():
    counts = word_tally("CPU cpu Cpu123 123cpu")
    assert counts.get("cpu") == 2
    assert counts.get("cpu123") == 1
    assert counts.get("123cpu") == 1


def test_empty_text_gives_empty_tally():
    assert word_tally("") == {}


def test_underscore_separates_words():
    assert word_tally("snake_case") == {"snake": 1, "case": 1}


def test_trims_and_lowercases():
    assert normalize_and_sort(["  Apple", "banana  ", "APPLE"]) == ["apple", "banana"]


def test_filters_empty_entries():
    assert normalize_and_sort([" ", "Rust", ""]) == ["rust"]


def test_handles_already_sorted_list():
    assert normalize_and_sort(["a", "b", "c"]) == ["a", "b", "c"]


def test_sorts_descending_input():
    result = normalize_and_sort(["Zulu", "Mike", "alpha", " mike"])
    assert result == ["alpha", "mike", "zulu"]


def test_empty_list_stays_empty():
    assert normalize_and_sort([]) == []