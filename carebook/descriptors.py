"""
Partial-update descriptors for ``edit``.

A descriptor lists only the fields the user supplied.  ``None`` means "leave
unchanged"; for tags an empty frozenset is a real value ("clear all tags")
and stays distinct from ``None``.
"""
import logging
from dataclasses import dataclass, fields, replace
from typing import FrozenSet, Iterable, Optional, Tuple, Union

from carebook.errors import NoFieldsEditedError, TypeMismatchError
from carebook.fields import Address, Email, Name, Phone, Specialty, Tag
from carebook.records import Patient, PersonType, Record, Specialist, unknown_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatientEdit:
    name: Optional[Name] = None
    phone: Optional[Phone] = None
    email: Optional[Email] = None
    address: Optional[Address] = None
    tags: Optional[FrozenSet[Tag]] = None
    # fields given on the command line that a patient does not have
    inapplicable: Tuple[str, ...] = ()

    def edited_fields(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self)
                     if f.name != "inapplicable" and getattr(self, f.name) is not None)

    def is_any_field_edited(self) -> bool:
        return bool(self.edited_fields())


@dataclass(frozen=True)
class SpecialistEdit:
    name: Optional[Name] = None
    phone: Optional[Phone] = None
    email: Optional[Email] = None
    address: Optional[Address] = None
    tags: Optional[FrozenSet[Tag]] = None
    specialty: Optional[Specialty] = None

    def edited_fields(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)

    def is_any_field_edited(self) -> bool:
        return bool(self.edited_fields())


EditDescriptor = Union[PatientEdit, SpecialistEdit]


class EditDescriptorBuilder:
    """
    Collects parsed field values, then ``build`` freezes them into the
    descriptor variant chosen by the person type.
    """

    def __init__(self, person_type: PersonType):
        self.person_type = person_type
        self._values = {}

    def name(self, value: Name):
        self._values["name"] = value
        return self

    def phone(self, value: Phone):
        self._values["phone"] = value
        return self

    def email(self, value: Email):
        self._values["email"] = value
        return self

    def address(self, value: Address):
        self._values["address"] = value
        return self

    def tags(self, value: Iterable[Tag]):
        self._values["tags"] = frozenset(value)
        return self

    def specialty(self, value: Specialty):
        self._values["specialty"] = value
        return self

    def build(self) -> EditDescriptor:
        values = dict(self._values)
        if self.person_type is PersonType.SPECIALIST:
            descriptor = SpecialistEdit(**values)
        elif self.person_type is PersonType.PATIENT:
            inapplicable = ("specialty",) if values.pop("specialty", None) is not None else ()
            descriptor = PatientEdit(inapplicable=inapplicable, **values)
        else:
            raise TypeError(f"Unknown person type: {self.person_type!r}")
        if not descriptor.is_any_field_edited():
            raise NoFieldsEditedError()
        return descriptor


# ────────────────────────────────────────────────────────────────────────────
# Merge
# ────────────────────────────────────────────────────────────────────────────
def _overlay(rec: Record, descriptor: EditDescriptor) -> Record:
    changes = {name: getattr(descriptor, name) for name in descriptor.edited_fields()}
    return replace(rec, **changes)


def merge(rec: Record, descriptor: EditDescriptor) -> Record:
    """
    Return ``rec`` with every field set in ``descriptor`` replaced.

    The descriptor variant must match the record variant; a patient record
    only accepts a ``PatientEdit`` and a specialist only a ``SpecialistEdit``.

    Raises:
        TypeMismatchError: variants disagree, or a patient edit carries a
            field patients do not have.
    """
    if isinstance(rec, Patient):
        if not isinstance(descriptor, PatientEdit):
            raise TypeMismatchError()
        if descriptor.inapplicable:
            raise TypeMismatchError(
                f"Patients have no {', '.join(descriptor.inapplicable)}; "
                f"use {PersonType.SPECIALIST.tag} to edit a specialist.")
    elif isinstance(rec, Specialist):
        if not isinstance(descriptor, SpecialistEdit):
            raise TypeMismatchError()
    else:
        unknown_record(rec)
    merged = _overlay(rec, descriptor)
    logger.debug("Merged %s into %s", descriptor.edited_fields(), type(rec).__name__)
    return merged
