import pytest

from carebook.commands import AddCommand, ClearCommand, DeleteCommand, ExitCommand, ListCommand
from carebook.errors import DuplicateRecordError, InvalidIndexError, TypeMismatchError
from carebook.fields import Name
from carebook.parsers import parse_command
from carebook.records import Patient, PersonType, Specialist

from conftest import ALICE, BENSON, CARL, DANIEL, ELLE


def test_add_patient(model):
    result = parse_command("add -p n/Fiona Kunz p/9482427 e/lydia@example.com a/little tokyo t/new").execute(model)
    added = model.book[-1]
    assert isinstance(added, Patient)
    assert added.name == Name("Fiona Kunz")
    assert result.feedback.startswith("New person added: Fiona Kunz")
    assert model.filtered_records()[-1] == added


def test_add_specialist_switches_view(model):
    parse_command("add -s n/George Best p/9482442 e/anna@example.com a/4th street s/Dermatology").execute(model)
    assert isinstance(model.book[-1], Specialist)
    assert model.person_type is PersonType.SPECIALIST
    assert model.filtered_records() == [CARL, DANIEL, ELLE, model.book[-1]]


def test_add_duplicate_rejected(model):
    with pytest.raises(DuplicateRecordError):
        AddCommand(ALICE).execute(model)
    assert len(model.book) == 5


def test_delete(model):
    result = DeleteCommand(2, PersonType.PATIENT).execute(model)
    assert BENSON not in model.book
    assert result.feedback.startswith("Deleted Person: Benson Meier")


def test_delete_type_mismatch(specialist_model):
    with pytest.raises(TypeMismatchError):
        DeleteCommand(1, PersonType.PATIENT).execute(specialist_model)
    assert CARL in specialist_model.book


def test_delete_bad_index(model):
    with pytest.raises(InvalidIndexError):
        DeleteCommand(3, PersonType.PATIENT).execute(model)


def test_list(model):
    result = ListCommand(PersonType.SPECIALIST).execute(model)
    assert model.filtered_records() == [CARL, DANIEL, ELLE]
    assert result.feedback == "3 persons listed!"


def test_clear(model):
    ClearCommand().execute(model)
    assert len(model.book) == 0
    assert model.filtered_records() == []


def test_exit():
    assert ExitCommand().execute(None).exit
