import json

import pytest

from edgecontracts.reading import Reading
from edgecontracts.validator import ContractInvalidError

DEVICE_NAME = "test device"

TEST_READING = Reading(
    id="Thermometer",
    pushed=123,
    created=123,
    origin=123,
    modified=123,
    device=DEVICE_NAME,
    name="Temperature",
    value="45",
    binary_value=bytes([0xBF]),
)


def test_reading_string():
    expected = (
        '{"id":"Thermometer","pushed":123,"created":123,"origin":123,"modified":123,'
        '"device":"' + DEVICE_NAME + '","name":"Temperature","value":"45",'
        '"binaryValue":"vw=="}'
    )
    assert str(TEST_READING) == expected
    assert TEST_READING.to_json() == expected


def test_reading_empty_marshal():
    assert Reading().to_json() == "{}"


@pytest.mark.parametrize(
    "reading",
    [
        TEST_READING,
        Reading(name="test", value="0"),
        Reading(name="test", binary_value=b"\x01\x02"),
    ],
)
def test_valid_readings(reading):
    assert reading.validate() is True


@pytest.mark.parametrize(
    "reading, message",
    [
        (Reading(device="test", value="0"), "name for reading's value descriptor not specified"),
        (Reading(device="test", name="test"), "reading has no value"),
    ],
)
def test_invalid_readings(reading, message):
    with pytest.raises(ContractInvalidError, match=message):
        reading.validate()


def test_round_trip():
    decoded = Reading.from_json(TEST_READING.to_json())
    assert decoded == TEST_READING
    assert decoded.binary_value == bytes([0xBF])


def test_from_json_nulls_leave_defaults():
    decoded = Reading.from_json('{"id":null,"name":"Temperature","value":"45","pushed":null}')
    assert (decoded.id, decoded.pushed, decoded.name) == ("", 0, "Temperature")


def test_from_json_runs_validation():
    with pytest.raises(ContractInvalidError):
        Reading.from_json(json.dumps({"device": "test", "value": "0"}))


@pytest.mark.parametrize(
    "text",
    [
        '{"name":"x","value":"1","pushed":"soon"}',
        '{"name":5,"value":"1"}',
        '{"name":"x","binaryValue":"!!"}',
        "{not json",
        "[]",
    ],
)
def test_from_json_rejects_bad_input(text):
    with pytest.raises(ValueError):
        Reading.from_json(text)