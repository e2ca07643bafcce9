from datetime import date
from models import Transaction
from search import search, rank, CONTAINS, FUZZY, ACRONYM, NO_MATCH, WORD_STARTS_WITH

def tx(name, id=None):
    return Transaction(id=id or name, user_id="u1", counterparty=name, amount=-100,
                       date=date(2024, 1, 1), category="Bills")

def names(items):
    return [t.counterparty for t in items]

def test_empty_query_is_identity():
    items = [tx("Bolt"), tx("Acme"), tx("Crane")]
    assert search(items, "", ["counterparty"]) == items
    assert search(items, None, ["counterparty"]) == items
    assert search([], "acme", ["counterparty"]) == []

def test_ranking_tiers():
    items = [
        tx("Pacmeister"),
        tx("The Acme Store"),
        tx("Acme Corp"),
        tx("acme"),
        tx("Acme"),
        tx("Bravo Zen Spa"),
    ]
    assert names(search(items, "Acme", ["counterparty"])) == [
        "Acme", "acme", "Acme Corp", "The Acme Store", "Pacmeister",
    ]

def test_acronym_and_fuzzy_matches():
    assert rank("Savory Bites Bistro", "sbb") == ACRONYM
    assert rank("Pacmeister", "acme") == CONTAINS
    fuzzy = rank("Acme Corp", "Acne")
    assert FUZZY <= fuzzy < ACRONYM
    assert rank("Acme Corp", "xyz") == NO_MATCH
    assert rank(None, "acme") == NO_MATCH

def test_fuzzy_ranks_below_exact_tiers():
    items = [tx("Acme Corp"), tx("Acne Clinic")]
    assert names(search(items, "acne", ["counterparty"])) == ["Acne Clinic", "Acme Corp"]

def test_ties_keep_input_order():
    items = [tx("Acme Two"), tx("Acme One"), tx("Acme Three")]
    assert names(search(items, "acme", ["counterparty"])) == ["Acme Two", "Acme One", "Acme Three"]

def test_no_matches_are_dropped():
    items = [tx("Bolt"), tx("Crane")]
    assert search(items, "zzzz", ["counterparty"]) == []

def test_dotted_keys_and_dicts():
    items = [{"counterparty": {"name": "Bolt"}}, {"counterparty": {"name": "Acme"}}]
    assert search(items, "acme", ["counterparty.name"]) == [items[1]]

def test_best_key_wins():
    items = [tx("Bolt", id="x"), tx("Crane", id="acme")]
    assert names(search(items, "acme", ["counterparty", "id"])) == ["Crane"]

def test_multi_word_query_matches_word_start():
    assert rank("The Acme Store", "acme store") == WORD_STARTS_WITH
    items = [tx("Bacme Storey"), tx("The Acme Store")]
    assert names(search(items, "acme store", ["counterparty"])) == ["The Acme Store", "Bacme Storey"]
