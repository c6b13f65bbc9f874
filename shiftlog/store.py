"""
Sheet-shaped storage kept in a local JSON workbook.

Each tab is a list of rows with the header first, laid out exactly like the
Shifts/Coworkers tabs of the Google Sheet the data comes from.
"""
import json
import logging
import os

from .sheets import (
    COWORKER_COLUMNS, COWORKERS_SHEET, SHIFT_COLUMNS, SHIFTS_SHEET,
    coworker_to_row, find_row_index_by_id, row_to_coworker, row_to_shift, shift_to_row,
)

logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


class RecordNotFoundError(StoreError):
    pass


class DuplicateRecordError(StoreError):
    pass


class SheetStore:
    def __init__(self, path):
        self.path = path

    # --- workbook I/O ---

    def _load(self):
        if not os.path.exists(self.path):
            return {SHIFTS_SHEET: [list(SHIFT_COLUMNS)], COWORKERS_SHEET: [list(COWORKER_COLUMNS)]}
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                book = json.load(f)
            except ValueError as e:
                raise StoreError(f"Workbook {self.path} is not valid JSON: {e}") from e
        book.setdefault(SHIFTS_SHEET, [list(SHIFT_COLUMNS)])
        book.setdefault(COWORKERS_SHEET, [list(COWORKER_COLUMNS)])
        return book

    def _save(self, book):
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(book, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, self.path)

    def get_sheet_data(self, sheet_name):
        return self._load()[sheet_name]

    def _read_records(self, sheet_name, row_reader):
        records = []
        for row_number, row in enumerate(self.get_sheet_data(sheet_name)[1:], start=2):
            if not row:
                continue
            try:
                records.append(row_reader(row))
            except (ValueError, TypeError, KeyError, AttributeError) as e:
                raise StoreError(f"Could not read row {row_number} of the {sheet_name} sheet: {e}") from e
        return records

    def _update_row(self, sheet_name, record_id, row, label):
        book = self._load()
        data = book[sheet_name]
        row_index = find_row_index_by_id(record_id, data)
        if row_index < 2:
            raise RecordNotFoundError(f"{label} not found to update.")
        data[row_index - 1] = row
        self._save(book)

    def _delete_row(self, sheet_name, record_id, label):
        book = self._load()
        data = book[sheet_name]
        row_index = find_row_index_by_id(record_id, data)
        if row_index < 2:
            raise RecordNotFoundError(f"{label} not found to delete.")
        del data[row_index - 1]
        self._save(book)

    # --- shifts ---

    def get_shifts(self):
        logger.info("Fetching shifts from %s", self.path)
        shifts = self._read_records(SHIFTS_SHEET, row_to_shift)
        return sorted(shifts, key=lambda s: s.date, reverse=True)

    def get_shift(self, shift_id):
        return next((s for s in self.get_shifts() if s.id == shift_id), None)

    def add_shift(self, shift):
        logger.info("Adding shift %s", shift.id)
        book = self._load()
        if find_row_index_by_id(shift.id, book[SHIFTS_SHEET]) >= 2:
            raise DuplicateRecordError(f"A shift on {shift.date} already exists.")
        book[SHIFTS_SHEET].append(shift_to_row(shift))
        self._save(book)
        return shift

    def update_shift(self, shift):
        logger.info("Updating shift %s", shift.id)
        self._update_row(SHIFTS_SHEET, shift.id, shift_to_row(shift), "Shift")
        return shift

    def save_shift(self, shift):
        """Add, or overwrite the shift already stored for that date."""
        if self.get_shift(shift.id) is None:
            return self.add_shift(shift)
        return self.update_shift(shift)

    def delete_shift(self, shift_id):
        logger.info("Deleting shift %s", shift_id)
        self._delete_row(SHIFTS_SHEET, shift_id, "Shift")
        return {"id": shift_id}

    # --- coworkers ---

    def get_coworkers(self):
        logger.info("Fetching coworkers from %s", self.path)
        coworkers = self._read_records(COWORKERS_SHEET, row_to_coworker)
        return sorted(coworkers, key=lambda c: c.first_name.lower())

    def add_coworker(self, coworker):
        logger.info("Adding coworker %s", coworker.id)
        book = self._load()
        if any(row and str(row[0]) == str(coworker.id) for row in book[COWORKERS_SHEET][1:]):
            raise DuplicateRecordError("A coworker with this ID already exists.")
        book[COWORKERS_SHEET].append(coworker_to_row(coworker))
        self._save(book)
        return coworker

    def update_coworker(self, coworker):
        logger.info("Updating coworker %s", coworker.id)
        self._update_row(COWORKERS_SHEET, coworker.id, coworker_to_row(coworker), "Coworker")
        return coworker

    def delete_coworker(self, coworker_id):
        logger.info("Deleting coworker %s", coworker_id)
        self._delete_row(COWORKERS_SHEET, coworker_id, "Coworker")
        return {"id": coworker_id}
