import logging
from dataclasses import dataclass

from carebook.book import Model
from carebook.descriptors import EditDescriptor, merge
from carebook.errors import DuplicateRecordError, InvalidIndexError, TypeMismatchError
from carebook.records import PersonType, Predicate, Record, all_of, format_record

logger = logging.getLogger(__name__)

MESSAGE_EDIT_SUCCESS = "Edited Person: {}"
MESSAGE_ADD_SUCCESS = "New person added: {}"
MESSAGE_DELETE_SUCCESS = "Deleted Person: {}"
MESSAGE_LISTED = "{} persons listed!"
MESSAGE_CLEARED = "Address book has been cleared!"


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    show_list: bool = False
    show_help: bool = False
    exit: bool = False


class Command:
    def execute(self, model: Model) -> CommandResult:
        raise NotImplementedError


def _record_at(model: Model, index: int) -> Record:
    shown = model.filtered_records()
    if index < 1 or index > len(shown):
        raise InvalidIndexError(index)
    return shown[index - 1]


# ────────────────────────────────────────────────────────────────────────────
# edit
# ────────────────────────────────────────────────────────────────────────────
class EditCommand(Command):
    """
    Edit the record shown at ``index`` (1-based) in the current view.

    Fields the descriptor leaves out keep their current values.  Nothing is
    written unless every check passes.
    """

    def __init__(self, index: int, descriptor: EditDescriptor, person_type: PersonType):
        self.index = index
        self.descriptor = descriptor
        self.person_type = person_type

    def execute(self, model: Model) -> CommandResult:
        logger.debug("edit %s %d %s", self.person_type.tag, self.index, self.descriptor.edited_fields())
        target = _record_at(model, self.index)
        edited = merge(target, self.descriptor)

        if not target.is_same_person(edited) and model.has_record(edited):
            raise DuplicateRecordError()

        model.set_record(target, edited)
        model.update_filtered_records(self.person_type.search_predicate(), self.person_type)
        return CommandResult(MESSAGE_EDIT_SUCCESS.format(format_record(edited)), show_list=True)

    def __eq__(self, other):
        return (isinstance(other, EditCommand)
                and (self.index, self.descriptor, self.person_type)
                == (other.index, other.descriptor, other.person_type))

    def __repr__(self):
        return f"EditCommand(index={self.index}, descriptor={self.descriptor!r}, person_type={self.person_type})"


# ────────────────────────────────────────────────────────────────────────────
# find / list
# ────────────────────────────────────────────────────────────────────────────
class FindCommand(Command):
    def __init__(self, predicate: Predicate, person_type: PersonType):
        self.predicate = predicate
        self.person_type = person_type

    def execute(self, model: Model) -> CommandResult:
        logger.debug("find %s", self.person_type.tag)
        # records of the other type never show, whatever the field clauses say
        combined = all_of([self.person_type.search_predicate(), self.predicate])
        model.update_filtered_records(combined, self.person_type)
        return CommandResult(MESSAGE_LISTED.format(len(model.filtered_records())), show_list=True)


class ListCommand(Command):
    def __init__(self, person_type: PersonType):
        self.person_type = person_type

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_records(self.person_type.search_predicate(), self.person_type)
        return CommandResult(MESSAGE_LISTED.format(len(model.filtered_records())), show_list=True)

    def __eq__(self, other):
        return isinstance(other, ListCommand) and other.person_type is self.person_type


# ────────────────────────────────────────────────────────────────────────────
# add / delete / clear
# ────────────────────────────────────────────────────────────────────────────
class AddCommand(Command):
    def __init__(self, rec: Record):
        self.rec = rec

    def execute(self, model: Model) -> CommandResult:
        if model.has_record(self.rec):
            raise DuplicateRecordError()
        model.add_record(self.rec)
        person_type = PersonType.of(self.rec)
        model.update_filtered_records(person_type.search_predicate(), person_type)
        return CommandResult(MESSAGE_ADD_SUCCESS.format(format_record(self.rec)), show_list=True)

    def __eq__(self, other):
        return isinstance(other, AddCommand) and other.rec == self.rec


class DeleteCommand(Command):
    def __init__(self, index: int, person_type: PersonType):
        self.index = index
        self.person_type = person_type

    def execute(self, model: Model) -> CommandResult:
        target = _record_at(model, self.index)
        if PersonType.of(target) is not self.person_type:
            raise TypeMismatchError()
        model.delete_record(target)
        return CommandResult(MESSAGE_DELETE_SUCCESS.format(format_record(target)), show_list=True)

    def __eq__(self, other):
        return (isinstance(other, DeleteCommand)
                and (self.index, self.person_type) == (other.index, other.person_type))


class ClearCommand(Command):
    def execute(self, model: Model) -> CommandResult:
        model.clear()
        return CommandResult(MESSAGE_CLEARED)


class HelpCommand(Command):
    def execute(self, model: Model) -> CommandResult:
        return CommandResult("", show_help=True)


class ExitCommand(Command):
    def execute(self, model: Model) -> CommandResult:
        return CommandResult("Bye!", exit=True)
