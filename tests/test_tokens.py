"""Unit tests for token classification and page tokenizing."""
import pytest

from masters_leaderboard.tokens import TokenKind, classify_token, is_name_marker, tokenize_page


class TestClassifyToken:
    """Every cell shape seen on the board gets the right tag."""

    @pytest.mark.parametrize("token", ["Scottie Scheffler", "Rory McIlroy", "Si Woo Kim", "Lee, K.H.", "Ludvig Aberg"])
    def test_player_names(self, token):
        """Two leading letters mark a player name."""
        assert classify_token(token) is TokenKind.NAME_MARKER

    @pytest.mark.parametrize("token", ["MC", "WD", "MC ", "WD (R2)"])
    def test_status_codes(self, token):
        """MC and WD are status codes, not names."""
        assert classify_token(token) is TokenKind.STATUS_CODE

    @pytest.mark.parametrize("token", ["E", "-3", "+2", "71", "278", "0"])
    def test_scores(self, token):
        """Even sentinel and signed integers are scores."""
        assert classify_token(token) is TokenKind.SCORE

    @pytest.mark.parametrize("token", ["T3", "F", "-", "", "10:45 AM", None])
    def test_other(self, token):
        """Tied places, thru markers, dashes and blanks fall through."""
        assert classify_token(token) is TokenKind.OTHER

    def test_single_letter_name_is_not_detected(self):
        """Known limitation: a one-letter name is not a marker."""
        assert not is_name_marker("J")
        assert not is_name_marker("J. Smith")

    def test_is_name_marker(self):
        assert is_name_marker("Tiger Woods")
        assert not is_name_marker("MC")
        assert not is_name_marker("T3")


class TestTokenizePage:
    """Markup to flat token list."""

    def test_extracts_data_cells_in_order(self, leaderboard_html, leaderboard_tokens):
        """Only .data elements are kept, whitespace collapsed, order preserved."""
        assert tokenize_page(leaderboard_html) == leaderboard_tokens

    def test_nested_text_is_joined(self):
        html = '<div class="data"><span>Scottie</span>\n<span>Scheffler</span></div>'
        assert tokenize_page(html) == ["Scottie Scheffler"]

    def test_element_with_several_classes(self):
        html = '<td class="data score under">-4</td><td class="database">no</td>'
        assert tokenize_page(html) == ["-4"]

    def test_empty_page(self):
        assert tokenize_page("") == []
        assert tokenize_page(None) == []
        assert tokenize_page("<html><body><p>Closed</p></body></html>") == []
