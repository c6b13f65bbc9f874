import json

import pytest

from shiftlog.models import Shift
from shiftlog.sheets import SHIFT_COLUMNS
from shiftlog.store import DuplicateRecordError, RecordNotFoundError, SheetStore, StoreError


@pytest.fixture
def store(tmp_path):
    return SheetStore(str(tmp_path / "book.json"))


def _shift(date_str, **kwargs):
    return Shift(date=date_str, start_time="18:00", end_time="02:00", duration=8.0, **kwargs)


def test_empty_store(store):
    assert store.get_shifts() == []
    assert store.get_coworkers() == []
    assert store.get_shift("2024-07-22") is None


def test_add_and_list_newest_first(store):
    store.add_shift(_shift("2024-07-17"))
    store.add_shift(_shift("2024-07-22", tips=310.5))
    store.add_shift(_shift("2024-07-20"))
    assert [s.date for s in store.get_shifts()] == ["2024-07-22", "2024-07-20", "2024-07-17"]
    assert store.get_shift("2024-07-22").tips == 310.5


def test_file_has_header_row(store, tmp_path):
    store.add_shift(_shift("2024-07-22"))
    with open(tmp_path / "book.json", encoding="utf-8") as f:
        book = json.load(f)
    assert book["Shifts"][0] == SHIFT_COLUMNS
    assert book["Shifts"][1][0] == "2024-07-22"


def test_one_shift_per_date(store):
    store.add_shift(_shift("2024-07-22"))
    with pytest.raises(DuplicateRecordError):
        store.add_shift(_shift("2024-07-22"))


def test_update_and_save(store, busy_tuesday):
    store.add_shift(_shift("2024-07-22"))
    store.update_shift(busy_tuesday)
    assert store.get_shift("2024-07-22") == busy_tuesday

    store.save_shift(_shift("2024-07-23", notes="new"))
    store.save_shift(_shift("2024-07-23", notes="edited"))
    assert store.get_shift("2024-07-23").notes == "edited"
    assert len(store.get_shifts()) == 2


def test_update_missing(store):
    with pytest.raises(RecordNotFoundError, match="Shift not found to update."):
        store.update_shift(_shift("2024-07-22"))


def test_delete(store):
    store.add_shift(_shift("2024-07-22"))
    store.add_shift(_shift("2024-07-21"))
    assert store.delete_shift("2024-07-22") == {"id": "2024-07-22"}
    assert [s.date for s in store.get_shifts()] == ["2024-07-21"]
    with pytest.raises(RecordNotFoundError, match="Shift not found to delete."):
        store.delete_shift("2024-07-22")


def test_coworkers_sorted_by_first_name(store):
    from shiftlog.models import Coworker

    store.add_coworker(Coworker("1356", "Zoe", "Zoe", "Yeager", ["Server"]))
    store.add_coworker(Coworker("1439", "Ali", "Ali", "Lewis", ["Bartender"]))
    assert [c.name for c in store.get_coworkers()] == ["Ali", "Zoe"]

    store.delete_coworker("1356")
    assert [c.name for c in store.get_coworkers()] == ["Ali"]
    with pytest.raises(RecordNotFoundError, match="Coworker not found to update."):
        store.update_coworker(Coworker("1356", "Zoe", "Zoe", "Yeager", ["Server"]))


def test_unreadable_cell_raises_store_error(store):
    store.add_shift(_shift("2024-07-22"))
    book = store._load()
    book["Shifts"][1][SHIFT_COLUMNS.index("Chump Game")] = "[{"
    store._save(book)
    with pytest.raises(StoreError, match="row 2 of the Shifts sheet"):
        store.get_shifts()


def test_unreadable_workbook_raises_store_error(store):
    with open(store.path, "w", encoding="utf-8") as f:
        f.write("not json")
    with pytest.raises(StoreError, match="not valid JSON"):
        store.get_coworkers()
