"""
Unit tests for the extract assembler and detector registry.

覆盖：
1. 注册表字段和顺序
2. create_extract 完整场景（CPAP / Oxygen Tank / 空笔记）
3. detector 意外抛错 → ExtractionError
"""
import pytest

from dme.enums import AddOnType, DeviceType, MaskType, OxygenTankUseType
from dme.exceptions import ExtractionError
from dme.extraction import create_extract, create_extract_json, get_detectors
from dme.extraction.types import ExtractedOrder


class TestDetectorRegistry:

    def test_field_order(self):
        assert list(get_detectors()) == [
            'liters', 'usage', 'diagnosis', 'mask_type', 'add_ons',
            'qualifier', 'ordering_provider', 'patient_name', 'dob',
        ]

    def test_registry_is_fresh_per_call(self):
        detectors = get_detectors()
        detectors.pop('dob')
        assert 'dob' in get_detectors()

    def test_add_ons_detector_returns_tuple(self):
        detect = get_detectors()['add_ons']
        assert detect('humidifier', DeviceType.UNKNOWN) == (AddOnType.HUMIDIFIER,)
        assert detect('nothing', DeviceType.UNKNOWN) == ()


class TestCreateExtract:

    def test_cpap_note(self, cpap_note):
        order = create_extract(cpap_note)

        assert isinstance(order, ExtractedOrder)
        assert order.device == DeviceType.CPAP
        assert order.mask_type == MaskType.FULL_FACE
        assert order.add_ons == (AddOnType.HUMIDIFIER,)
        assert order.qualifier == 'AHI > 20'
        assert order.ordering_provider == 'Dr. Cameron'
        assert order.patient_name == 'John Doe'
        assert order.dob == '01/01/1980'
        assert order.diagnosis == 'Asthma'
        assert order.liters is None
        assert order.usage is None

    def test_oxygen_note(self, oxygen_note):
        order = create_extract(oxygen_note)

        assert order.device == DeviceType.OXYGEN_TANK
        assert order.liters == '2 L'
        assert order.usage == OxygenTankUseType.SLEEP_AND_EXERTION
        assert order.mask_type is None
        assert order.ordering_provider == 'Dr. Cuddy'
        assert order.diagnosis == 'COPD'

    def test_empty_note_uses_defaults(self):
        order = create_extract('')

        assert order.device == DeviceType.UNKNOWN
        assert order.ordering_provider == 'Unknown'
        assert order.diagnosis == 'Unknown'
        assert order.qualifier == ''
        assert order.add_ons == ()

    def test_record_is_frozen(self, cpap_note):
        order = create_extract(cpap_note)
        with pytest.raises(AttributeError):
            order.device = DeviceType.WHEELCHAIR

    def test_detector_fault_raises_extraction_error(self, cpap_note):
        def broken(note, device):
            raise RuntimeError('boom')

        detectors = get_detectors()
        detectors['qualifier'] = broken

        with pytest.raises(ExtractionError) as exc_info:
            create_extract(cpap_note, detectors=detectors)

        assert exc_info.value.code == 'EXTRACTION_FAILED'
        assert exc_info.value.detail == {'field': 'qualifier'}
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestCreateExtractJson:

    def test_end_to_end_scenario(self, cpap_note):
        assert create_extract_json(cpap_note) == {
            'device': 'CPAP',
            'diagnosis': 'Asthma',
            'mask_type': 'FullFace',
            'add_ons': ['Humidifier'],
            'qualifier': 'AHI > 20',
            'ordering_provider': 'Dr. Cameron',
            'patient_name': 'John Doe',
            'dob': '01/01/1980',
        }

    def test_omits_liters_and_usage_for_cpap(self, cpap_note):
        result = create_extract_json(cpap_note)
        assert 'liters' not in result
        assert 'usage' not in result

    def test_dob_year_not_read_as_liters(self):
        note = (
            "Patient Name: Harold Finch\n"
            "DOB: 04/12/1952\n"
            "Length of need: lifetime\n"
            "Requires an oxygen tank at 2 L"
        )
        result = create_extract_json(note)

        assert result['liters'] == '2 L'
        assert result['dob'] == '04/12/1952'

    def test_oxygen_tank_fields(self, oxygen_note):
        result = create_extract_json(oxygen_note)
        assert result['device'] == 'OxygenTank'
        assert result['liters'] == '2 L'
        assert result['usage'] == 'SleepAndExertion'
        assert 'mask_type' not in result
        assert 'qualifier' not in result
