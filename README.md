# edgecontracts

Data contracts shared by edge device services. Each model is a plain Python
dataclass that turns itself into compact JSON and checks that its contents
make sense. The package has no dependencies beyond the standard library.

## Installation

```
pip install edgecontracts
```

For running the test suite:

```
pip install "edgecontracts[test]"
pytest
```

## Modules

- `edgecontracts.validator` – `Validator`, the base class with a `validate()`
  method; `validate_fields(obj)`, which validates every public field of a
  model that is itself a `Validator`; and `ContractInvalidError`, a
  `ValueError` raised when a model breaks its contract.
- `edgecontracts.timestamps` – `Timestamps` (created, modified and origin
  times in milliseconds) with `compare_to(other)`, which returns `1` when
  `other` was created later and `-1` otherwise.
- `edgecontracts.statuses` – the `NotificationsSeverity` and
  `NotificationsStatus` enums, each with `from_json`; the checks
  `is_notifications_severity`, `is_notifications_status` and
  `is_transmission_status`; `parse_transmission_status`, which reads a JSON
  string and upper-cases it; and `validate_transmission_status`, which raises
  `ContractInvalidError` for an unknown status.
- `edgecontracts.transmission_record` – `TransmissionRecord`, one delivery
  attempt; an empty response is written as `null`.
- `edgecontracts.response` – `Response`, an expected command response.
- `edgecontracts.properties` – `PropertyValue` and `Units`, which describe a
  device resource's value, and the constants `BASE64_ENCODING` and
  `E_NOTATION`.
- `edgecontracts.reading` – `Reading`, a single value gathered from a device;
  `binary_value` is written as base64.
- `edgecontracts.operation` – `Operation`, an operation request for a
  management agent.
- `edgecontracts.resource_operation` – `ResourceOperation`, which keeps its
  older `object`/`resource` fields in step with `device_resource` /
  `device_command`; the newer name wins, and both names are written.
- `edgecontracts.value_descriptor` – `ValueDescriptor`, with a printf-style
  check of its `formatting` field.
- `edgecontracts.config` – `SetConfigRequest` and `SetConfigResponse`.

## Encoding

Every model has `to_dict()` and `to_json()`, and `str()` returns the same JSON
text. Empty strings, zero times and empty collections are mostly left out:

```python
from edgecontracts.reading import Reading

reading = Reading(name="Temperature", value="45", device="Thermometer")
print(reading.to_json())
# {"device":"Thermometer","name":"Temperature","value":"45"}
```

Some fields are always written: `TransmissionRecord` always has `status`,
`response` and `sent`, `SetConfigResponse` always has `success`, and
`ValueDescriptor` writes `min`, `max` and `defaultValue` unless `min` or `max`
is the empty string.

## Decoding and validation

`Reading`, `ResourceOperation` and `ValueDescriptor` have `from_dict` and
`from_json`; `Operation`, `SetConfigRequest`, `SetConfigResponse` and the two
enums have `from_json`. All but `Operation` and the enums validate what they
decode:

```python
from edgecontracts.reading import Reading
from edgecontracts.validator import ContractInvalidError

try:
    Reading.from_json('{"device": "test", "value": "0"}')
except ContractInvalidError as exc:
    print(exc)
# name for reading's value descriptor not specified
```

Calling `validate()` on a model built in code runs the same checks; it returns
`True` or raises `ContractInvalidError`. Malformed input (wrong field types,
bad base64) raises `ValueError`.

## What it does not do

The package holds data models only. It does not talk to any service over the
network, store anything, or provide a command to run.