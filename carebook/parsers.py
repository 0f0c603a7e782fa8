"""
Turns a raw command line into a ``Command``.

Every field value is validated here, so a command that reaches ``execute``
only fails on the state of the model, never on its own arguments.
"""
import logging
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple

from carebook.commands import (AddCommand, ClearCommand, Command, DeleteCommand, EditCommand,
                               ExitCommand, FindCommand, HelpCommand, ListCommand)
from carebook.config import (ALL_PREFIXES, COMMAND_DESC, PREFIX_ADDRESS, PREFIX_EMAIL, PREFIX_NAME,
                             PREFIX_PHONE, PREFIX_SPECIALTY, PREFIX_TAG, SINGLE_PREFIXES)
from carebook.descriptors import EditDescriptorBuilder
from carebook.errors import ParseError
from carebook.fields import Address, Email, Name, Phone, Specialty, Tag
from carebook.records import (NameContainsKeywords, Patient, PersonType, Predicate, Specialist,
                              all_of)
from carebook.tokenizer import ArgumentMultimap, parse_index, tokenize

logger = logging.getLogger(__name__)


def usage(command: str) -> ParseError:
    return ParseError(f"Invalid command format!\n{COMMAND_DESC[command]}")


# ────────────────────────────────────────────────────────────────────────────
# Field values
# ────────────────────────────────────────────────────────────────────────────
def parse_tags(values: List[str]) -> FrozenSet[Tag]:
    return frozenset(Tag(v) for v in values)


def parse_optional_tags(values: List[str]) -> Optional[FrozenSet[Tag]]:
    """
    ``t/`` values for edit and find.

    No ``t/`` at all gives None (tags not mentioned); a single empty ``t/``
    gives an empty set (no tags).
    """
    if not values:
        return None
    if values == [""]:
        return frozenset()
    return parse_tags(values)


def parse_person_type(token: str) -> PersonType:
    for person_type in PersonType:
        if token.strip() == person_type.tag:
            return person_type
    raise ParseError(f"Unknown person type '{token}'. Use {PersonType.PATIENT.tag} for patients "
                     f"or {PersonType.SPECIALIST.tag} for specialists.")


def split_type(command: str, args: str) -> Tuple[PersonType, str]:
    token, _, rest = args.strip().partition(" ")
    if not token:
        raise usage(command)
    return parse_person_type(token), rest


# ────────────────────────────────────────────────────────────────────────────
# edit
# ────────────────────────────────────────────────────────────────────────────
def build_edit_descriptor(multimap: ArgumentMultimap, person_type: PersonType):
    builder = EditDescriptorBuilder(person_type)
    if PREFIX_NAME in multimap:
        builder.name(Name(multimap.value(PREFIX_NAME)))
    if PREFIX_PHONE in multimap:
        builder.phone(Phone(multimap.value(PREFIX_PHONE)))
    if PREFIX_EMAIL in multimap:
        builder.email(Email(multimap.value(PREFIX_EMAIL)))
    if PREFIX_ADDRESS in multimap:
        builder.address(Address(multimap.value(PREFIX_ADDRESS)))
    if PREFIX_SPECIALTY in multimap:
        builder.specialty(Specialty(multimap.value(PREFIX_SPECIALTY)))
    tags = parse_optional_tags(multimap.all_values(PREFIX_TAG))
    if tags is not None:
        builder.tags(tags)
    return builder.build()


def parse_edit(args: str) -> EditCommand:
    person_type, rest = split_type("edit", args)
    multimap = tokenize(rest, *ALL_PREFIXES)
    if not multimap.preamble:
        raise usage("edit")
    index = parse_index(multimap.preamble)
    multimap.verify_no_duplicate_prefixes(*SINGLE_PREFIXES)
    return EditCommand(index, build_edit_descriptor(multimap, person_type), person_type)


# ────────────────────────────────────────────────────────────────────────────
# find
# ────────────────────────────────────────────────────────────────────────────
def parse_find(args: str) -> FindCommand:
    person_type, rest = split_type("find", args)
    if person_type is PersonType.PATIENT:
        return parse_find_patient(rest)
    if person_type is PersonType.SPECIALIST:
        return parse_find_specialist(rest)
    raise usage("find")


def parse_find_patient(args: str) -> FindCommand:
    # TODO: patient filters; until then every patient is listed and args are ignored
    return FindCommand(PersonType.PATIENT.search_predicate(), PersonType.PATIENT)


def parse_find_specialist(args: str) -> FindCommand:
    multimap = tokenize(args, *ALL_PREFIXES)
    if multimap.preamble:
        raise usage("find")
    multimap.verify_no_duplicate_prefixes(*SINGLE_PREFIXES)

    clauses: List[Predicate] = []
    if PREFIX_NAME in multimap:
        keywords = multimap.value(PREFIX_NAME).split()
        if not keywords:
            raise ParseError("Give at least one name keyword after n/.")
        clauses.append(NameContainsKeywords(keywords))
    if PREFIX_PHONE in multimap:
        phone = Phone(multimap.value(PREFIX_PHONE))
        clauses.append(lambda rec: rec.phone == phone)
    if PREFIX_EMAIL in multimap:
        email = Email(multimap.value(PREFIX_EMAIL))
        clauses.append(lambda rec: rec.email == email)
    if PREFIX_ADDRESS in multimap:
        address = Address(multimap.value(PREFIX_ADDRESS))
        clauses.append(lambda rec: rec.address == address)
    if PREFIX_SPECIALTY in multimap:
        specialty = Specialty(multimap.value(PREFIX_SPECIALTY))
        clauses.append(lambda rec: isinstance(rec, Specialist) and rec.specialty == specialty)
    tags = parse_optional_tags(multimap.all_values(PREFIX_TAG))
    if tags is not None:
        clauses.append(lambda rec: rec.tags == tags)

    logger.debug("find -s with %d clause(s)", len(clauses))
    return FindCommand(all_of(clauses), PersonType.SPECIALIST)


# ────────────────────────────────────────────────────────────────────────────
# add / delete / list
# ────────────────────────────────────────────────────────────────────────────
def parse_add(args: str) -> AddCommand:
    person_type, rest = split_type("add", args)
    multimap = tokenize(rest, *ALL_PREFIXES)
    required = [PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS]
    if person_type is PersonType.SPECIALIST:
        required.append(PREFIX_SPECIALTY)
    elif PREFIX_SPECIALTY in multimap:
        raise ParseError("Patients have no specialty; drop s/ or use "
                         f"{PersonType.SPECIALIST.tag}.")
    if multimap.preamble or any(p not in multimap for p in required):
        raise usage("add")
    multimap.verify_no_duplicate_prefixes(*SINGLE_PREFIXES)

    name = Name(multimap.value(PREFIX_NAME))
    phone = Phone(multimap.value(PREFIX_PHONE))
    email = Email(multimap.value(PREFIX_EMAIL))
    address = Address(multimap.value(PREFIX_ADDRESS))
    tags = parse_tags(multimap.all_values(PREFIX_TAG))
    if person_type is PersonType.SPECIALIST:
        specialty = Specialty(multimap.value(PREFIX_SPECIALTY))
        return AddCommand(Specialist(name, phone, email, address, tags, specialty))
    return AddCommand(Patient(name, phone, email, address, tags))


def parse_delete(args: str) -> DeleteCommand:
    person_type, rest = split_type("delete", args)
    if not rest.strip():
        raise usage("delete")
    return DeleteCommand(parse_index(rest), person_type)


def parse_list(args: str) -> ListCommand:
    person_type, rest = split_type("list", args)
    if rest.strip():
        raise usage("list")
    return ListCommand(person_type)


# ────────────────────────────────────────────────────────────────────────────
# Dispatch
# ────────────────────────────────────────────────────────────────────────────
PARSERS: Dict[str, Callable[[str], Command]] = {
    "add": parse_add,
    "edit": parse_edit,
    "find": parse_find,
    "delete": parse_delete,
    "list": parse_list,
    "clear": lambda args: ClearCommand(),
    "help": lambda args: HelpCommand(),
    "hello": lambda args: HelpCommand(),
    "exit": lambda args: ExitCommand(),
    "close": lambda args: ExitCommand(),
}


def parse_command(text: str) -> Command:
    word, _, args = text.strip().partition(" ")
    parser = PARSERS.get(word.lower())
    if parser is None:
        raise ParseError(f"Unknown command '{word}'. Type 'help' to see all commands.")
    return parser(args)
