"""Tests for the account configuration store."""

import os
import stat

import pytest
import yaml

from src.gview.utils.config import AccountStore
from src.gview.utils.exceptions import (
    AccountNotFoundError,
    AccountStoreError,
    DuplicateAccountError,
    InvalidAccountError,
)
from src.gview.utils.models import AccountRecord


@pytest.fixture
def store(tmp_path):
    """Create an account store backed by a temporary file."""
    store = AccountStore(tmp_path / "aws-accounts.yaml")
    store.ensure_exists()
    return store


@pytest.fixture
def prod_account():
    return AccountRecord(
        name="prod",
        access_key="AKIAPRODEXAMPLE00001",
        secret_key="prod-secret",
        regions=["us-east-1", "eu-west-1"],
    )


@pytest.fixture
def dev_account():
    return AccountRecord(
        name="dev", access_key="AKIADEVEXAMPLE000001", secret_key="dev-secret", regions=["us-west-2"]
    )


class TestEnsureExists:
    def test_creates_empty_file(self, tmp_path):
        store = AccountStore(tmp_path / "new.yaml")

        assert store.ensure_exists() is True
        assert store.path.exists()
        assert store.load() == []
        with open(store.path) as f:
            assert yaml.safe_load(f) == {"accounts": []}

    def test_created_file_is_private(self, tmp_path):
        store = AccountStore(tmp_path / "new.yaml")
        store.ensure_exists()

        mode = stat.S_IMODE(os.stat(store.path).st_mode)
        assert mode == 0o600

    def test_existing_file_untouched(self, store, prod_account):
        store.add_account(prod_account)

        assert store.ensure_exists() is False
        assert store.load() == [prod_account]


class TestLoad:
    def test_load_preserves_order(self, store, prod_account, dev_account):
        store.add_account(prod_account)
        store.add_account(dev_account)

        accounts = store.load()

        assert [account.name for account in accounts] == ["prod", "dev"]
        assert accounts[0].regions == ["us-east-1", "eu-west-1"]

    def test_load_reads_yaml_layout(self, tmp_path):
        path = tmp_path / "aws-accounts.yaml"
        path.write_text(
            "accounts:\n"
            "- name: legacy\n"
            "  access_key: AKIALEGACY0000000001\n"
            "  secret_key: legacy-secret\n"
            "  regions:\n"
            "  - ap-south-1\n"
        )

        accounts = AccountStore(path).load()

        assert accounts == [
            AccountRecord(
                name="legacy",
                access_key="AKIALEGACY0000000001",
                secret_key="legacy-secret",
                regions=["ap-south-1"],
            )
        ]

    def test_empty_file_loads_as_no_accounts(self, tmp_path):
        path = tmp_path / "aws-accounts.yaml"
        path.write_text("")

        assert AccountStore(path).load() == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(AccountStoreError, match="error reading YAML file"):
            AccountStore(tmp_path / "missing.yaml").load()

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "aws-accounts.yaml"
        path.write_text("accounts: [unclosed")

        with pytest.raises(AccountStoreError, match="error parsing YAML file"):
            AccountStore(path).load()

    def test_entry_without_keys_raises(self, tmp_path):
        path = tmp_path / "aws-accounts.yaml"
        path.write_text("accounts:\n- name: broken\n  regions: [us-east-1]\n")

        with pytest.raises(InvalidAccountError):
            AccountStore(path).load()


class TestAddRemove:
    def test_add_then_remove_restores_store(self, store, prod_account, dev_account):
        store.add_account(prod_account)
        before = [account.name for account in store.load()]

        store.add_account(dev_account)
        removed = store.remove_account("dev")

        assert removed == dev_account
        assert [account.name for account in store.load()] == before

    def test_duplicate_add_leaves_store_unchanged(self, store, prod_account):
        store.add_account(prod_account)
        content_before = store.path.read_text()

        duplicate = AccountRecord(
            name="prod", access_key="AKIAOTHER00000000001", secret_key="other", regions=["us-east-2"]
        )
        with pytest.raises(DuplicateAccountError, match="Account prod already exists"):
            store.add_account(duplicate)

        assert store.path.read_text() == content_before
        assert store.load() == [prod_account]

    def test_remove_unknown_account_raises(self, store, prod_account):
        store.add_account(prod_account)

        with pytest.raises(AccountNotFoundError, match="Account staging not found"):
            store.remove_account("staging")

        assert store.load() == [prod_account]

    def test_remove_last_account(self, store, prod_account):
        store.add_account(prod_account)
        store.remove_account("prod")

        assert store.load() == []

    def test_save_leaves_no_temporary_files(self, store, prod_account, dev_account):
        store.add_account(prod_account)
        store.add_account(dev_account)

        assert sorted(p.name for p in store.path.parent.iterdir()) == ["aws-accounts.yaml"]
