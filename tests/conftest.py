import pytest

from carebook.book import Model
from carebook.fields import Address, Email, Name, Phone, Specialty, Tag
from carebook.records import Patient, PersonType, Specialist


def tags(*names):
    return frozenset(Tag(n) for n in names)


ALICE = Patient(Name("Alice Pauline"), Phone("91234567"), Email("alice@example.com"),
                Address("123, Jurong West Ave 6, #08-111"), tags("friends"))
BENSON = Patient(Name("Benson Meier"), Phone("98765432"), Email("johnd@example.com"),
                 Address("311, Clementi Ave 2, #02-25"), tags("owesMoney", "friends"))
CARL = Specialist(Name("Carl Kurz"), Phone("95352563"), Email("heinz@example.com"),
                  Address("wall street"), tags("urgent"), Specialty("Cardiology"))
DANIEL = Specialist(Name("Daniel Meier"), Phone("87652533"), Email("cornelia@example.com"),
                    Address("10th street"), tags(), Specialty("Oncology"))
ELLE = Specialist(Name("Elle Meyer"), Phone("9482224"), Email("werner@example.com"),
                  Address("michegan ave"), tags("urgent"), Specialty("Oncology"))


@pytest.fixture
def model():
    """Patients shown; store holds two patients and three specialists."""
    return Model([ALICE, BENSON, CARL, DANIEL, ELLE])


@pytest.fixture
def specialist_model(model):
    model.update_filtered_records(PersonType.SPECIALIST.search_predicate(), PersonType.SPECIALIST)
    return model
