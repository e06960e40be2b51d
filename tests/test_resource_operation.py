import json

import pytest

from edgecontracts.resource_operation import ResourceOperation
from edgecontracts.validator import ContractInvalidError

INDEX = "test index"
OPERATION = "test operation"
DEVICE_RESOURCE = "test device resource"
PARAMETER = "test parameter"
DEVICE_COMMAND = "test device command"
SECONDARY = ["test secondary"]


def make_operation() -> ResourceOperation:
    return ResourceOperation(
        index=INDEX,
        operation=OPERATION,
        device_resource=DEVICE_RESOURCE,
        parameter=PARAMETER,
        device_command=DEVICE_COMMAND,
        secondary=list(SECONDARY),
        mappings={},
    )


def test_to_json_matches_str():
    op = make_operation()
    assert op.to_json() == str(op)


def test_string():
    expected = (
        '{"index":"' + INDEX + '"'
        ',"operation":"' + OPERATION + '"'
        ',"object":"' + DEVICE_RESOURCE + '"'
        ',"deviceResource":"' + DEVICE_RESOURCE + '"'
        ',"parameter":"' + PARAMETER + '"'
        ',"resource":"' + DEVICE_COMMAND + '"'
        ',"deviceCommand":"' + DEVICE_COMMAND + '"'
        ',"secondary":["test secondary"]}'
    )
    assert str(make_operation()) == expected


def test_mappings_written_when_present():
    op = ResourceOperation(device_resource="r", mappings={"a": "b"})
    assert op.to_dict()["mappings"] == {"a": "b"}


def test_valid_operation():
    assert make_operation().validate() is True


def test_without_object_and_device_resource():
    op = make_operation()
    op.object = ""
    op.device_resource = ""
    with pytest.raises(ContractInvalidError, match="both blank"):
        op.validate()


EXPECTED_AUTO = (
    '{"object":"' + DEVICE_RESOURCE + '"'
    ',"deviceResource":"' + DEVICE_RESOURCE + '"'
    ',"resource":"' + DEVICE_COMMAND + '"'
    ',"deviceCommand":"' + DEVICE_COMMAND + '"}'
)


@pytest.mark.parametrize(
    "op",
    [
        ResourceOperation(object=DEVICE_RESOURCE, resource=DEVICE_COMMAND),
        ResourceOperation(device_resource=DEVICE_RESOURCE, device_command=DEVICE_COMMAND),
        ResourceOperation(
            object="XX",
            device_resource=DEVICE_RESOURCE,
            resource="XX",
            device_command=DEVICE_COMMAND,
        ),
    ],
    ids=["old fields only", "new fields only", "new and old differ"],
)
def test_fields_auto_population_to_json(op):
    assert op.to_json() == EXPECTED_AUTO


@pytest.mark.parametrize(
    "text",
    [
        '{"object":"' + DEVICE_RESOURCE + '","resource":"' + DEVICE_COMMAND + '"}',
        '{"deviceResource":"' + DEVICE_RESOURCE + '","deviceCommand":"' + DEVICE_COMMAND + '"}',
        '{"object":"XX","deviceResource":"' + DEVICE_RESOURCE
        + '","resource":"XX","deviceCommand":"' + DEVICE_COMMAND + '"}',
    ],
    ids=["old fields only", "new fields only", "new and old differ"],
)
def test_fields_auto_population_from_json(text):
    op = ResourceOperation.from_json(text)
    assert op.object == DEVICE_RESOURCE
    assert op.device_resource == DEVICE_RESOURCE
    assert op.resource == DEVICE_COMMAND
    assert op.device_command == DEVICE_COMMAND


def test_round_trip():
    op = make_operation()
    assert ResourceOperation.from_json(op.to_json()) == ResourceOperation(
        index=INDEX,
        operation=OPERATION,
        object=DEVICE_RESOURCE,
        device_resource=DEVICE_RESOURCE,
        parameter=PARAMETER,
        resource=DEVICE_COMMAND,
        device_command=DEVICE_COMMAND,
        secondary=SECONDARY,
    )


def test_from_json_missing_resource_fails_validation():
    with pytest.raises(ContractInvalidError):
        ResourceOperation.from_json('{"index":"1"}')


def test_from_json_wrong_type():
    with pytest.raises(ValueError):
        ResourceOperation.from_json('{"object":5}')


def test_from_json_not_an_object():
    with pytest.raises(ValueError):
        ResourceOperation.from_json(json.dumps("{}"))