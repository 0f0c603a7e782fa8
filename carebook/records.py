"""
Patient and specialist records.

``Record`` is a closed union of the two variants.  Code that has to treat the
variants differently checks for each one explicitly and ends with
``unknown_record`` so that a new variant cannot slip through unnoticed.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, Iterable, List, NoReturn, Union

from carebook.fields import Address, Email, Name, Phone, Specialty, Tag


# ────────────────────────────────────────────────────────────────────────────
# Data model
# ────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Patient:
    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: FrozenSet[Tag]

    def is_same_person(self, other: "Record") -> bool:
        return is_same_person(self, other)


@dataclass(frozen=True)
class Specialist:
    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: FrozenSet[Tag]
    specialty: Specialty

    def is_same_person(self, other: "Record") -> bool:
        return is_same_person(self, other)


Record = Union[Patient, Specialist]
Predicate = Callable[[Record], bool]


def unknown_record(rec) -> NoReturn:
    raise TypeError(f"Unknown record type: {type(rec).__name__}")


def is_same_person(a: Record, b: Record) -> bool:
    """Same logical person: name and phone match, whatever the variant."""
    if b is None:
        return False
    return a.name == b.name and a.phone == b.phone


# ────────────────────────────────────────────────────────────────────────────
# Type discriminator
# ────────────────────────────────────────────────────────────────────────────
class PersonType(Enum):
    PATIENT = "-p"
    SPECIALIST = "-s"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def record_class(self) -> type:
        if self is PersonType.PATIENT:
            return Patient
        return Specialist

    def search_predicate(self) -> Predicate:
        """Default listing rule: every record of this type and nothing else."""
        cls = self.record_class
        return lambda rec: isinstance(rec, cls)

    @classmethod
    def of(cls, rec: Record) -> "PersonType":
        if isinstance(rec, Patient):
            return cls.PATIENT
        if isinstance(rec, Specialist):
            return cls.SPECIALIST
        unknown_record(rec)


# ────────────────────────────────────────────────────────────────────────────
# Predicates
# ────────────────────────────────────────────────────────────────────────────
class NameContainsKeywords:
    """True when any keyword equals a whole word of the name, ignoring case."""

    def __init__(self, keywords: Iterable[str]):
        self.keywords: List[str] = [k for k in keywords if k]

    def __call__(self, rec: Record) -> bool:
        words = {w.lower() for w in rec.name.value.split()}
        return any(k.lower() in words for k in self.keywords)

    def __eq__(self, other):
        return isinstance(other, NameContainsKeywords) and other.keywords == self.keywords

    def __repr__(self):
        return f"NameContainsKeywords({self.keywords!r})"


def all_of(predicates: Iterable[Predicate]) -> Predicate:
    """Logical AND of ``predicates``; vacuously true when there are none."""
    preds = list(predicates)
    return lambda rec: all(p(rec) for p in preds)


# ────────────────────────────────────────────────────────────────────────────
# Presentation
# ────────────────────────────────────────────────────────────────────────────
def format_tags(tags: Iterable[Tag]) -> str:
    return "".join(f"[{t.value}]" for t in sorted(tags))


def format_record(rec: Record) -> str:
    text = (f"{rec.name}; Phone: {rec.phone}; Email: {rec.email}; "
            f"Address: {rec.address}; Tags: {format_tags(rec.tags)}")
    if isinstance(rec, Specialist):
        return text + f"; Specialty: {rec.specialty}"
    if isinstance(rec, Patient):
        return text
    unknown_record(rec)
