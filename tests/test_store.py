from datetime import timedelta

import pytest

from codevote.core.store import StoreError, VoterStatus, VoterStore
from codevote.extensions import db

from conftest import VOTE_START

NINE_AM = VOTE_START.replace(hour=9)


@pytest.fixture
def store(ctx):
    return VoterStore(db.session)


def test_lookup(store):
    assert store.lookup("Ht67h") == VoterStatus(name="Titus Prasetyo", used=False)
    assert store.lookup("ZZZZZ") is None


def test_redeem_changes_one_row_once(store):
    assert store.redeem("Ht67h", "setuju", NINE_AM) == 1
    assert store.redeem("Ht67h", "tidak setuju", NINE_AM) == 0
    assert store.redeem("ZZZZZ", "setuju", NINE_AM) == 0
    assert store.lookup("Ht67h") == VoterStatus(name="Titus Prasetyo", used=True)


def test_exists_is_unaffected_by_redemption(store):
    assert store.exists("Ab12X")
    store.redeem("Ab12X", "setuju", NINE_AM)
    assert store.exists("Ab12X")
    assert not store.exists("ZZZZZ")


def test_list_all_orders_voted_first(store):
    store.redeem("Z9yQ1", "setuju", NINE_AM + timedelta(minutes=1))
    store.redeem("Ab12X", "tidak setuju", NINE_AM)

    records = store.list_all()

    assert [r.code for r in records] == ["Ab12X", "Z9yQ1", "Ht67h"]
    assert records[0].used and records[0].choice == "tidak setuju"
    assert not records[2].used and records[2].choice is None


def test_database_errors_become_store_errors(store):
    db.session.execute(db.text("DROP TABLE voters"))
    db.session.commit()

    with pytest.raises(StoreError):
        store.lookup("Ht67h")
    with pytest.raises(StoreError):
        store.redeem("Ht67h", "setuju", NINE_AM)
    with pytest.raises(StoreError):
        store.exists("Ht67h")
    with pytest.raises(StoreError):
        store.list_all()


def test_list_all_breaks_vote_time_ties_by_insertion_order(store):
    store.redeem("Z9yQ1", "setuju", NINE_AM)
    store.redeem("Ht67h", "tidak setuju", NINE_AM)

    assert [r.code for r in store.list_all()] == ["Ht67h", "Z9yQ1", "Ab12X"]
