import pytest

from carebook.descriptors import EditDescriptorBuilder, PatientEdit, SpecialistEdit, merge
from carebook.errors import NoFieldsEditedError, TypeMismatchError
from carebook.fields import Address, Email, Name, Phone, Specialty
from carebook.records import PersonType

from conftest import ALICE, CARL, tags


def test_builder_picks_variant_from_person_type():
    """The variant follows the type tag, not the fields given."""
    patient = EditDescriptorBuilder(PersonType.PATIENT).phone(Phone("999")).build()
    specialist = EditDescriptorBuilder(PersonType.SPECIALIST).phone(Phone("999")).build()
    assert isinstance(patient, PatientEdit)
    assert isinstance(specialist, SpecialistEdit)


def test_builder_rejects_empty_descriptor():
    with pytest.raises(NoFieldsEditedError):
        EditDescriptorBuilder(PersonType.PATIENT).build()
    with pytest.raises(NoFieldsEditedError):
        EditDescriptorBuilder(PersonType.SPECIALIST).build()


def test_specialty_on_patient_is_kept_for_merge_time():
    descriptor = (EditDescriptorBuilder(PersonType.PATIENT)
                  .phone(Phone("999")).specialty(Specialty("Oncology")).build())
    assert descriptor.inapplicable == ("specialty",)
    assert descriptor.edited_fields() == ("phone",)


def test_cleared_tags_differ_from_absent_tags():
    cleared = EditDescriptorBuilder(PersonType.PATIENT).tags([]).build()
    assert cleared.tags == frozenset()
    assert cleared.is_any_field_edited()
    assert PatientEdit(name=Name("Bob")).tags is None


def test_descriptor_is_immutable():
    descriptor = PatientEdit(name=Name("Bob"))
    with pytest.raises(AttributeError):
        descriptor.name = Name("Amy")


@pytest.mark.parametrize("descriptor", [
    PatientEdit(name=Name("Bob")),
    PatientEdit(phone=Phone("999"), tags=frozenset()),
    PatientEdit(email=Email("bob@example.com"), address=Address("Main St")),
    PatientEdit(name=Name("Bob"), phone=Phone("999"), email=Email("bob@example.com"),
                address=Address("Main St"), tags=tags("vip")),
])
def test_merge_patient_field_by_field(descriptor):
    """Set fields come from the descriptor, the rest from the record."""
    merged = merge(ALICE, descriptor)
    for field in ("name", "phone", "email", "address", "tags"):
        wanted = getattr(descriptor, field)
        expected = wanted if wanted is not None else getattr(ALICE, field)
        assert getattr(merged, field) == expected
    assert type(merged) is type(ALICE)


def test_merge_specialist_keeps_other_fields():
    merged = merge(CARL, SpecialistEdit(specialty=Specialty("Neurology")))
    assert merged.specialty == Specialty("Neurology")
    assert (merged.name, merged.phone, merged.email, merged.address, merged.tags) == \
        (CARL.name, CARL.phone, CARL.email, CARL.address, CARL.tags)


def test_tags_are_replaced_not_merged():
    merged = merge(ALICE, PatientEdit(tags=tags("new")))
    assert merged.tags == tags("new")


def test_merge_variant_mismatch():
    with pytest.raises(TypeMismatchError):
        merge(ALICE, SpecialistEdit(name=Name("Bob")))
    with pytest.raises(TypeMismatchError):
        merge(CARL, PatientEdit(name=Name("Bob")))


def test_merge_rejects_specialty_on_patient():
    descriptor = PatientEdit(phone=Phone("999"), inapplicable=("specialty",))
    with pytest.raises(TypeMismatchError) as info:
        merge(ALICE, descriptor)
    assert "specialty" in str(info.value)
