"""
Shared fixtures for all tests.

factory-boy factories live here so both unit/ and integration/ can import them.
"""
import pytest
from django.test import Client

import factory
from dme.enums import AddOnType, DeviceType, MaskType, OxygenTankUseType
from dme.extraction.types import ExtractedOrder


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

class ExtractedOrderFactory(factory.Factory):
    """默认是一条完整的 CPAP extract。"""

    class Meta:
        model = ExtractedOrder

    device = DeviceType.CPAP
    mask_type = MaskType.FULL_FACE
    add_ons = (AddOnType.HUMIDIFIER,)
    qualifier = 'AHI > 20'
    ordering_provider = 'Dr. Cameron'
    diagnosis = 'Asthma'
    patient_name = 'John Doe'
    dob = '01/01/1980'


class OxygenTankExtractFactory(ExtractedOrderFactory):
    device = DeviceType.OXYGEN_TANK
    mask_type = None
    add_ons = ()
    qualifier = ''
    liters = '2 L'
    usage = OxygenTankUseType.SLEEP_AND_EXERTION
    ordering_provider = factory.Sequence(lambda n: f'Dr. Provider{n}')


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

CPAP_NOTE = (
    "Patient Name: John Doe\n"
    "DOB: 01/01/1980\n"
    "Diagnosis: Asthma\n"
    "Patient needs a CPAP with full face mask and humidifier. AHI > 20. Ordered by Dr. Cameron."
)

OXYGEN_NOTE = (
    "Patient Name: Harold Finch\n"
    "DOB: 04/12/1952\n"
    "Diagnosis: COPD\n"
    "Prescription: Requires a portable oxygen tank delivering 2 L per minute.\n"
    "Usage: During sleep and exertion.\n"
    "Ordering Physician: Dr. Cuddy\n"
)


@pytest.fixture
def api_client():
    """Django test client for integration tests."""
    return Client()


@pytest.fixture
def cpap_note():
    return CPAP_NOTE


@pytest.fixture
def oxygen_note():
    return OXYGEN_NOTE


@pytest.fixture
def note_file(tmp_path):
    """A physician note written to disk, UTF-8."""
    path = tmp_path / 'physician_note.txt'
    path.write_text(CPAP_NOTE, encoding='utf-8')
    return path
