import logging
from collections import UserList
from typing import Iterable, List, Optional

from carebook.records import PersonType, Predicate, Record, is_same_person

logger = logging.getLogger(__name__)


class RecordBook(UserList):
    """Ordered store of every record."""

    def has_record(self, candidate: Record) -> bool:
        return any(is_same_person(rec, candidate) for rec in self.data)

    def add_record(self, rec: Record):
        self.data.append(rec)

    def set_record(self, target: Record, edited: Record):
        # single-slot swap; the old record keeps its position
        for i, rec in enumerate(self.data):
            if rec is target:
                self.data[i] = edited
                return
        raise KeyError("Person not found in the address book.")

    def remove_record(self, target: Record):
        for i, rec in enumerate(self.data):
            if rec is target:
                del self.data[i]
                return
        raise KeyError("Person not found in the address book.")


class Model:
    """
    The record store plus the currently displayed (filtered) view.

    Commands receive a ``Model`` on every call and never keep a reference to
    it between commands.
    """

    def __init__(self, records: Optional[Iterable[Record]] = None,
                 person_type: PersonType = PersonType.PATIENT):
        self.book = RecordBook(records or [])
        self.person_type = person_type
        self._predicate: Predicate = person_type.search_predicate()

    def filtered_records(self) -> List[Record]:
        return [rec for rec in self.book if self._predicate(rec)]

    def update_filtered_records(self, predicate: Predicate, person_type: Optional[PersonType] = None):
        self._predicate = predicate
        if person_type is not None:
            self.person_type = person_type

    def has_record(self, candidate: Record) -> bool:
        return self.book.has_record(candidate)

    def set_record(self, target: Record, edited: Record):
        self.book.set_record(target, edited)
        logger.info("Replaced %s record", type(edited).__name__)

    def add_record(self, rec: Record):
        self.book.add_record(rec)
        logger.info("Added %s", type(rec).__name__)

    def delete_record(self, target: Record):
        self.book.remove_record(target)
        logger.info("Deleted %s", type(target).__name__)

    def clear(self):
        self.book.clear()
        logger.info("Address book cleared.")
