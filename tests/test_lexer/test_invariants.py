"""Property-based tests for lexer invariants using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from lexing_toy.lexer import Lexer, TokenType, tokenize
from lexing_toy.lexer.lexer import WHITESPACE

words = st.one_of(
    st.just("("),
    st.just(")"),
    st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,8}", fullmatch=True),
    st.from_regex(r"[0-9]{1,12}", fullmatch=True),
)
separators = st.sampled_from([" ", "\t", "  ", " \t "])


@st.composite
def valid_lines(draw) -> tuple[str, list[str]]:
    """A line of whitespace-separated words, with the words themselves."""
    pieces = draw(st.lists(words, max_size=20))
    line = draw(separators) if draw(st.booleans()) else ""
    for piece in pieces:
        line += piece + draw(separators)
    return line, pieces


class TestValidLines:
    @given(valid_lines())
    @settings(max_examples=200)
    def test_words_come_back_in_order(self, case) -> None:
        line, pieces = case
        result = tokenize(line)
        assert result.ok
        assert [t.value for t in result.tokens] == pieces

    @given(valid_lines())
    @settings(max_examples=200)
    def test_line_reconstructs_from_tokens(self, case) -> None:
        """Token text placed at its offset, plus whitespace, rebuilds the line."""
        line, _ = case
        rebuilt: list[str | None] = [None] * len(line)
        for token in Lexer(line):
            rebuilt[token.offset:token.end] = token.value

        for i, ch in enumerate(rebuilt):
            if ch is None:
                assert line[i] in WHITESPACE
                rebuilt[i] = line[i]
        assert "".join(rebuilt) == line

    @given(valid_lines())
    @settings(max_examples=100)
    def test_classification_matches_first_character(self, case) -> None:
        line, _ = case
        for token in Lexer(line):
            first = token.value[0]
            if first == "(":
                assert token.type is TokenType.LPAREN
            elif first == ")":
                assert token.type is TokenType.RPAREN
            elif first.isdigit():
                assert token.type is TokenType.INTEGER
            else:
                assert token.type is TokenType.IDENTIFIER


class TestArbitraryText:
    @given(st.text(max_size=200))
    @settings(max_examples=300)
    def test_every_character_accounted_for(self, source: str) -> None:
        """Up to the error, each character is in one token or is whitespace."""
        result = tokenize(source)
        limit = result.error.offset if result.error else len(source)

        covered = [False] * len(source)
        previous_end = 0
        for token in result.tokens:
            assert token.value
            assert token.offset >= previous_end
            assert source[token.offset:token.end] == token.value
            for i in range(token.offset, token.end):
                covered[i] = True
            previous_end = token.end

        assert previous_end <= limit
        for i in range(limit):
            assert covered[i] or source[i] in WHITESPACE

        if result.error:
            assert source[result.error.offset] == result.error.character
            assert result.error.character not in WHITESPACE

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_relexing_is_idempotent(self, source: str) -> None:
        assert tokenize(source) == tokenize(source)
