"""Tests for wallet storage and management."""

import json

import pytest
from eth_account import Account

from swapsim.wallets.manager import NO_MNEMONIC, WalletManager
from swapsim.wallets.store import WalletStore
from tests.fakes import FakeProvider


class TestWalletStore:
    """Tests for the JSON file store."""

    def test_first_load_creates_empty_file(self, tmp_path):
        store = WalletStore(tmp_path / "wallets")

        assert store.load() == {}
        assert store.path.exists()
        assert json.loads(store.path.read_text()) == {}

    def test_save_and_load(self, tmp_path):
        store = WalletStore(tmp_path / "wallets")
        store.save({"alice": {"address": "0xabc"}})

        assert WalletStore(tmp_path / "wallets").load() == {"alice": {"address": "0xabc"}}

    def test_falls_back_to_memory(self, tmp_path):
        """A file where the directory should be makes the filesystem unusable."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = WalletStore(blocker / "wallets")

        assert store.load() == {}
        assert store.using_memory

        store.save({"bob": {"address": "0xdef"}})
        assert store.load() == {"bob": {"address": "0xdef"}}

    def test_corrupt_file_falls_back_to_memory(self, tmp_path):
        store = WalletStore(tmp_path)
        store.path.write_text("{not json")

        assert store.load() == {}
        assert store.using_memory

    def test_memory_load_returns_copy(self, tmp_path):
        store = WalletStore(tmp_path)
        store._using_memory = True
        store.save({"a": {}})

        loaded = store.load()
        loaded["b"] = {}

        assert "b" not in store.load()


class TestWalletManager:
    """Tests for WalletManager."""

    @pytest.fixture
    def manager(self, tmp_path):
        return WalletManager(WalletStore(tmp_path), provider=FakeProvider(balance_wei=2 * 10**18))

    def test_create_wallet(self, manager):
        record = manager.create_wallet("alice")

        assert record.name == "alice"
        assert record.address.startswith("0x") and len(record.address) == 42
        assert record.private_key.startswith("0x") and len(record.private_key) == 66
        assert len(record.mnemonic.split()) == 12
        assert record.created_at.endswith("Z")

    def test_created_keys_are_consistent(self, manager):
        record = manager.create_wallet("alice")

        assert Account.from_key(record.private_key).address == record.address
        assert Account.from_mnemonic(record.mnemonic).address == record.address

    def test_storage_format(self, manager):
        record = manager.create_wallet("alice")
        stored = manager.store.load()["alice"]

        assert stored == {
            "address": record.address,
            "privateKey": record.private_key,
            "mnemonic": record.mnemonic,
            "createdAt": record.created_at,
        }

    def test_get_wallet(self, manager):
        created = manager.create_wallet("alice")

        assert manager.get_wallet("alice") == created
        assert manager.get_wallet("nobody") is None

    def test_get_wallet_missing_fields(self, manager):
        manager.store.save({"legacy": {"address": "0xabc", "privateKey": "0x01"}})
        record = manager.get_wallet("legacy")

        assert record.mnemonic == NO_MNEMONIC
        assert record.created_at == "Unknown"

    def test_list_wallets(self, manager):
        manager.create_wallet("alice")
        manager.create_wallet("bob")

        names = [w.name for w in manager.list_wallets()]
        assert names == ["alice", "bob"]

    def test_create_same_name_replaces(self, manager):
        first = manager.create_wallet("alice")
        second = manager.create_wallet("alice")

        assert len(manager.list_wallets()) == 1
        assert manager.get_wallet("alice").address == second.address != first.address

    def test_delete_wallet(self, manager):
        manager.create_wallet("alice")

        assert manager.delete_wallet("alice") is True
        assert manager.delete_wallet("alice") is False
        assert manager.list_wallets() == []

    @pytest.mark.asyncio
    async def test_get_balance(self, manager):
        record = manager.create_wallet("alice")

        assert await manager.get_balance(record.address) == "2.0"

    @pytest.mark.asyncio
    async def test_get_balance_without_provider(self, tmp_path):
        manager = WalletManager(WalletStore(tmp_path))

        with pytest.raises(RuntimeError):
            await manager.get_balance("0x0000000000000000000000000000000000000000")
