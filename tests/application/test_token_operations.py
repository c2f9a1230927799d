"""Integration tests for the token use cases."""

import pytest

from limestore.application.token_operations import (
    BurnTokensHandler,
    InitializeTokenHandler,
    MintTokensHandler,
    ShowTokenBalanceHandler,
    TransferTokensHandler,
)
from limestore.domain.exceptions import (
    AuthorizationError,
    EntityNotFoundError,
    InsufficientBalanceError,
    ValidationError,
)
from tests.fakes import FakeTokenRepository, RecordingListener

DEPLOYER = "0xdeployer"
CUSTOMER1 = "0xcustomer1"


def _setup():
    repo = FakeTokenRepository()
    InitializeTokenHandler(repo).handle(owner=DEPLOYER)
    return repo, RecordingListener()


class TestTokenFlow:

    def test_mint_transfer_burn(self):
        repo, listener = _setup()

        MintTokensHandler(repo, [listener]).handle(DEPLOYER, DEPLOYER, "4")
        TransferTokensHandler(repo, [listener]).handle(DEPLOYER, CUSTOMER1, "3")
        BurnTokensHandler(repo, [listener]).handle(DEPLOYER, "0.5")

        balances = ShowTokenBalanceHandler(repo)
        assert balances.handle(DEPLOYER).formatted == "0.5 LMT"
        assert balances.handle(CUSTOMER1).balance == 3 * 10**18
        assert len(listener.events) == 3

    def test_mint_by_customer_rejected(self):
        repo, listener = _setup()
        with pytest.raises(AuthorizationError):
            MintTokensHandler(repo, [listener]).handle(CUSTOMER1, CUSTOMER1, "1")
        assert listener.events == []

    def test_overdraft_rejected(self):
        repo, _ = _setup()
        with pytest.raises(InsufficientBalanceError):
            TransferTokensHandler(repo).handle(CUSTOMER1, DEPLOYER, "1")

    def test_deploy_twice_rejected(self):
        repo, _ = _setup()
        with pytest.raises(ValidationError, match="already initialised"):
            InitializeTokenHandler(repo).handle(owner=CUSTOMER1)

    def test_not_deployed(self):
        with pytest.raises(EntityNotFoundError):
            ShowTokenBalanceHandler(FakeTokenRepository()).handle(DEPLOYER)
