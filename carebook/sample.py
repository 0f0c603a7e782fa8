"""Demo contacts loaded at start-up (see ``Settings.load_sample_data``)."""
from typing import List

from carebook.fields import Address, Email, Name, Phone, Specialty, Tag
from carebook.records import Patient, Record, Specialist


def _tags(*names: str):
    return frozenset(Tag(n) for n in names)


def sample_records() -> List[Record]:
    return [
        Patient(Name("Alex Yeoh"), Phone("87438807"), Email("alexyeoh@example.com"),
                Address("Blk 30 Geylang Street 29, #06-40"), _tags("diabetic")),
        Patient(Name("Bernice Yu"), Phone("99272758"), Email("berniceyu@example.com"),
                Address("Blk 30 Lorong 3 Serangoon Gardens, #07-18"), _tags("elderly", "diabetic")),
        Patient(Name("Charlotte Oliveiro"), Phone("93210283"), Email("charlotte@example.com"),
                Address("Blk 11 Ang Mo Kio Street 74, #11-04"), _tags()),
        Specialist(Name("David Li"), Phone("91031282"), Email("lidavid@example.com"),
                   Address("Blk 436 Serangoon Gardens Street 26, #16-43"), _tags("urgent"),
                   Specialty("Cardiology")),
        Specialist(Name("Irfan Ibrahim"), Phone("92492021"), Email("irfan@example.com"),
                   Address("Blk 47 Tampines Street 20, #17-35"), _tags(),
                   Specialty("Oncology")),
    ]
