"""
Tests for the JSON record store.
"""

from __future__ import annotations

import json

import pytest

from pocketbook.storage.record_store import (
    BUDGETS,
    GOALS,
    TRANSACTIONS,
    RecordStore,
    StoreError,
)


class DescribeRecordStore:
    @pytest.fixture
    def store(self, tmp_path):
        return RecordStore(tmp_path / "data" / "pocketbook.json")

    def it_should_return_empty_collections_when_file_missing(self, store):
        assert not store.exists()
        assert store.get(TRANSACTIONS) == []
        assert store.get(BUDGETS) == []
        assert store.get(GOALS) == []

    def it_should_create_parent_directories_on_write(self, store):
        store.set(TRANSACTIONS, [{"id": "a"}])
        assert store.path.exists()

    def it_should_preserve_record_order(self, store):
        rows = [{"id": "c"}, {"id": "a"}, {"id": "b"}]
        store.set(TRANSACTIONS, rows)
        assert store.get(TRANSACTIONS) == rows

    def it_should_keep_other_collections_when_setting_one(self, store):
        store.set(TRANSACTIONS, [{"id": "t"}])
        store.set(GOALS, [{"id": "g"}])
        assert store.get(TRANSACTIONS) == [{"id": "t"}]
        assert store.get(GOALS) == [{"id": "g"}]

    def it_should_clear_all_collections(self, store):
        store.set(TRANSACTIONS, [{"id": "t"}])
        store.set(BUDGETS, [{"id": "b"}])
        store.clear()
        assert store.get(TRANSACTIONS) == []
        assert store.get(BUDGETS) == []
        assert json.loads(store.path.read_text(encoding="utf-8")) == {
            "transactions": [],
            "budgets": [],
            "goals": [],
        }

    def it_should_reject_unknown_collection(self, store):
        with pytest.raises(KeyError):
            store.get("settings")
        with pytest.raises(KeyError):
            store.set("settings", [])

    def it_should_raise_store_error_on_invalid_json(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError, match="not valid JSON"):
            store.get(TRANSACTIONS)

    def it_should_raise_store_error_when_document_is_not_an_object(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("[]", encoding="utf-8")
        with pytest.raises(StoreError):
            store.get(TRANSACTIONS)

    def it_should_raise_store_error_when_collection_is_not_a_list(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text('{"transactions": {}}', encoding="utf-8")
        with pytest.raises(StoreError, match="not a list"):
            store.get(TRANSACTIONS)

    def it_should_treat_blank_file_as_empty(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("  \n", encoding="utf-8")
        assert store.get(GOALS) == []

    def it_should_not_leave_temp_files_behind(self, store):
        store.set(TRANSACTIONS, [{"id": "t"}])
        leftovers = [p.name for p in store.path.parent.iterdir() if p.name != store.path.name]
        assert leftovers == []
