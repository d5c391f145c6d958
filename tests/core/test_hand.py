"""Tests for Hand evaluation."""

from hypothesis import given, strategies as st

from strategies import positions_strategy
from core.cards import Card, Rank, Suit, build_deck
from core.hand import Hand, is_bust, score_hand

DECK = build_deck()


def _positions(*cards: Card) -> list[int]:
    return [DECK.index(card) for card in cards]


class TestScoreHand:
    """Tests for score_hand."""

    def test_empty_hand_scores_zero(self, deck):
        assert score_hand(deck, []) == 0

    def test_simple_sum(self, deck):
        positions = _positions(Card(Rank.TEN, Suit.SPADES), Card(Rank.SIX, Suit.HEARTS))
        assert score_hand(deck, positions) == 16

    def test_ace_always_counts_eleven(self, deck):
        """There is no soft ace: A-A is 22 and busts."""
        positions = _positions(Card(Rank.ACE, Suit.SPADES), Card(Rank.ACE, Suit.HEARTS))
        assert score_hand(deck, positions) == 22

    def test_natural(self, deck):
        positions = _positions(Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.HEARTS))
        assert score_hand(deck, positions) == 21

    def test_score_is_not_capped(self, deck):
        positions = _positions(
            Card(Rank.KING, Suit.SPADES),
            Card(Rank.QUEEN, Suit.SPADES),
            Card(Rank.JACK, Suit.SPADES),
            Card(Rank.ACE, Suit.SPADES),
        )
        assert score_hand(deck, positions) == 41

    @given(positions_strategy())
    def test_score_is_sum_of_card_scores(self, positions):
        assert score_hand(DECK, positions) == sum(DECK[p].score for p in positions)

    @given(positions_strategy(min_cards=1), st.randoms())
    def test_score_is_order_independent(self, positions, random):
        shuffled = list(positions)
        random.shuffle(shuffled)
        assert score_hand(DECK, shuffled) == score_hand(DECK, positions)


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, deck):
        hand = Hand()
        assert len(hand) == 0
        assert hand.score(deck) == 0
        assert hand.cards(deck) == []

    def test_add_keeps_order(self, deck):
        hand = Hand()
        hand.add(51)
        hand.add(0)
        assert list(hand) == [51, 0]
        assert hand.cards(deck) == [Card(Rank.ACE, Suit.SPADES), Card(Rank.TWO, Suit.CLUBS)]
        assert hand.score(deck) == 13

    def test_clear(self, deck):
        hand = Hand([1, 2, 3])
        hand.clear()
        assert len(hand) == 0
        assert hand.score(deck) == 0


class TestIsBust:
    """Tests for bust detection."""

    def test_twenty_one_is_not_bust(self):
        assert not is_bust(21)

    def test_twenty_two_is_bust(self):
        assert is_bust(22)

    def test_custom_target(self):
        assert is_bust(18, target=17)
        assert not is_bust(17, target=17)
