"""Tests for the JSON-file repositories and the chain clock."""

import json

import pytest

from limestore.domain.exceptions import ValidationError
from limestore.domain.model.store import PaymentPolicy, StoreLedger
from limestore.domain.model.token import TokenLedger
from limestore.domain.model.value_objects import Money
from limestore.infrastructure.persistence.json_chain_clock import JsonChainClock
from limestore.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)
from limestore.infrastructure.persistence.json_token_repository import (
    JsonTokenRepository,
)

OWNER = "0xowner"
CUSTOMER1 = "0xcustomer1"
CUSTOMER3 = "0xcustomer3"


class TestJsonStoreRepository:

    def test_missing_file_means_no_store(self, tmp_path):
        assert JsonStoreRepository(tmp_path / "store.json").get() is None

    def test_reloaded_ledger_continues_where_it_left_off(self, tmp_path):
        repo = JsonStoreRepository(tmp_path / "data" / "store.json")
        ledger = StoreLedger.create(owner=OWNER, return_window=5, payment_policy=PaymentPolicy.AT_LEAST)
        for product_id in (606, 707, 201):
            ledger.add_product(OWNER, product_id, 1, Money.of("3"))
        ledger.buy_product(CUSTOMER1, 606, Money.of("3.5"), height=1)
        ledger.buy_product(CUSTOMER1, 201, Money.of("3"), height=1)
        ledger.return_product(CUSTOMER1, 201, height=2)
        ledger.buy_product(CUSTOMER3, 201, Money.of("3"), height=2)
        repo.save(ledger)

        loaded = repo.get()

        assert loaded.owner == OWNER
        assert loaded.return_window == 5
        assert loaded.payment_policy is PaymentPolicy.AT_LEAST
        assert loaded.get_available_products() == [707]
        assert loaded.get_total_balance() == Money.of("6.5")
        assert loaded.get_customers_by_product(201) == [CUSTOMER3]

        # first-purchase order and the active order survive the reload
        loaded.return_product(CUSTOMER1, 606, height=3)
        assert loaded.get_available_products() == [707, 606]
        assert loaded.get_total_balance() == Money.of("3")

    def test_no_temporary_file_left_behind(self, tmp_path):
        repo = JsonStoreRepository(tmp_path / "store.json")
        repo.save(StoreLedger.create(owner=OWNER))
        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]
        assert json.loads((tmp_path / "store.json").read_text())["owner"] == OWNER


class TestJsonTokenRepository:

    def test_large_balances_survive(self, tmp_path):
        repo = JsonTokenRepository(tmp_path / "token.json")
        ledger = TokenLedger.create(owner=OWNER)
        ledger.mint(OWNER, CUSTOMER1, 123456789 * 10**18 + 1)
        repo.save(ledger)

        loaded = repo.get()

        assert loaded.balance_of(CUSTOMER1) == 123456789 * 10**18 + 1
        assert loaded.symbol == "LMT"
        assert loaded.owner == OWNER


class TestJsonChainClock:

    def test_starts_at_zero_and_mines(self, tmp_path):
        clock = JsonChainClock(tmp_path / "chain.json")
        assert clock.current_height() == 0
        assert clock.mine(100) == 100
        assert JsonChainClock(tmp_path / "chain.json").current_height() == 100

    def test_mine_requires_positive_blocks(self, tmp_path):
        with pytest.raises(ValidationError):
            JsonChainClock(tmp_path / "chain.json").mine(0)

    def test_mine_leaves_no_temporary_file(self, tmp_path):
        clock = JsonChainClock(tmp_path / "chain.json")
        clock.mine(2)
        clock.mine(3)
        assert [p.name for p in tmp_path.iterdir()] == ["chain.json"]
        assert json.loads((tmp_path / "chain.json").read_text()) == {"height": 5}
