from hypothesis import given, settings, strategies as st

from unicode_punctuation.punctuation import guess_punctuation

_letters = st.characters(whitelist_categories=("Ll", "Lu", "Nd", "Zs"))

# Free text never carries a straight double quote: one left unpaired on the
# first pass can pair up on the second (e.g. '"x "b" y" z').
alphabet = st.one_of(_letters, st.sampled_from(list("'-.,()!?\n")))
_inline = st.one_of(_letters, st.sampled_from(list("'-.,()!?")))

quoted = st.text(alphabet=_inline, min_size=1, max_size=20).map(lambda t: f'"{t}"')
measure = st.integers(min_value=0, max_value=999).map(lambda n: f'{n}"')
titles = st.lists(
    st.one_of(st.text(alphabet=alphabet, max_size=20), quoted, measure),
    max_size=10,
).map(" ".join)


@given(st.text(alphabet=alphabet, max_size=200))
@settings(deadline=None)
def test_guess_punctuation_idempotent(sample: str) -> None:
    once = guess_punctuation(sample)
    assert guess_punctuation(once) == once


@given(st.text(alphabet=alphabet, max_size=200))
@settings(deadline=None)
def test_no_ascii_apostrophes_or_hyphens_remain(sample: str) -> None:
    out = guess_punctuation(sample)
    assert "'" not in out
    assert "-" not in out


@given(titles)
@settings(deadline=None)
def test_balanced_quotes_and_inch_marks_are_idempotent(sample: str) -> None:
    once = guess_punctuation(sample)
    assert '"' not in once
    assert guess_punctuation(once) == once
