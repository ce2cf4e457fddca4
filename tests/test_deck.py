import random
from collections import Counter

from game.deck import Deck


def test_new_deck_has_twelve_cards():
    deck = Deck(rng=random.Random(0))
    assert len(deck) == 12
    assert deck.remaining_counts() == {1: 4, 2: 4, 3: 4}


def test_full_cycle_draws_four_of_each():
    deck = Deck(rng=random.Random(1))
    drawn = [deck.draw() for _ in range(12)]
    assert Counter(drawn) == {1: 4, 2: 4, 3: 4}
    assert len(deck) == 0


def test_draw_refills_when_empty():
    deck = Deck(rng=random.Random(2))
    for _ in range(12):
        deck.draw()
    value = deck.draw()
    assert value in (1, 2, 3)
    assert len(deck) == 11


def test_every_generation_conserves_multiset():
    deck = Deck(rng=random.Random(3))
    drawn = [deck.draw() for _ in range(36)]
    for start in range(0, 36, 12):
        assert Counter(drawn[start:start + 12]) == {1: 4, 2: 4, 3: 4}


def test_partial_draws_conserve_multiset():
    deck = Deck(rng=random.Random(4))
    drawn = [deck.draw() for _ in range(5)]
    remaining = deck.remaining_counts()
    for value in (1, 2, 3):
        assert drawn.count(value) + remaining[value] == 4


def test_shuffle_is_a_permutation():
    deck = Deck(rng=random.Random(5))
    before = sorted(deck.cards)
    deck.shuffle()
    assert sorted(deck.cards) == before


def test_seeded_decks_are_reproducible():
    a = Deck(rng=random.Random(42))
    b = Deck(rng=random.Random(42))
    assert [a.draw() for _ in range(30)] == [b.draw() for _ in range(30)]
