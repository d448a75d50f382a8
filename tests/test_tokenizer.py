from diedat.data.tokenizer import segment, tokenize
from diedat.data.vocab import Vocabulary


def test_segment_mask_words_punct() -> None:
    assert segment("Ik weet <mask> ik het kan.") == ["Ik", "weet", "<mask>", "ik", "het", "kan", "."]
    assert segment("   ") == []


def test_tokenize_masked_sentence(vocab: Vocabulary) -> None:
    assert tokenize("Ik weet <mask> ik het kan.", vocab) == [8, 9, 4, 12, 13, 14, 5, 6]


def test_unknown_word_and_punct_fall_back_to_unk(vocab: Vocabulary) -> None:
    assert tokenize("fiets", vocab) == [3]
    assert tokenize("!", vocab) == [5, 3]


def test_bare_word_never_looked_up() -> None:
    vocab = Vocabulary({"weet": 99, "<unk>": 3})
    assert tokenize("weet", vocab) == [3]


def test_missing_unk_drops_ids() -> None:
    vocab = Vocabulary({"Ġ": 5, "Ġja": 6})
    assert tokenize("ja nee !", vocab) == [6, 5]


def test_accented_letters_split_as_punctuation() -> None:
    assert segment("één") == ["é", "é", "n"]
    assert segment("ideeën") == ["idee", "ë", "n"]
    vocab = Vocabulary({"<unk>": 3, "Ġ": 5, "Ġn": 7, "Ġéén": 9})
    assert tokenize("één", vocab) == [5, 3, 5, 3, 7]


def test_non_breaking_space_is_punctuation() -> None:
    assert segment("a\xa0b") == ["a", "\xa0", "b"]
    assert segment("a\tb\nc") == ["a", "b", "c"]


def test_mask_fallbacks() -> None:
    assert tokenize("<mask>", Vocabulary({"<unk>": 3})) == [3]
    assert tokenize("<mask>", Vocabulary({"Ġja": 6})) == [0]
