# dapjson

`dapjson` handles the JSON layer of a Debug Adapter Protocol program. It
reads JSON text into typed Python values and builds JSON documents that it
writes out as indented text. It also has a small thread-safe flag that tells
a running session to stop.

## Installation

```
pip install dapjson
```

With the test dependencies:

```
pip install "dapjson[test]"
```

## Reading JSON

`dapjson.serializer.JsonDeserializer` parses JSON text (a `str` or `bytes`).
Each accessor returns the value in the requested type or raises
`DeserializeError` (a `ValueError`). Invalid JSON, and the literals `NaN`
and `Infinity`, also raise `DeserializeError`.

```python
from dapjson.serializer import JsonDeserializer

d = JsonDeserializer('{"seq": 1, "command": "launch", "arguments": {"noDebug": true}}')

seq = d.field("seq", lambda f: f.integer())           # 1
command = d.field("command", lambda f: f.string())    # "launch"
args = d.field("arguments", lambda f: f.object())     # {"noDebug": True}
missing = d.field("body", lambda f: f.any())          # None
```

- `boolean()`, `integer()`, `number()` and `string()` check the JSON type.
  `integer()` accepts whole numbers only and reads values above the signed
  64-bit range (up to the unsigned 64-bit maximum) as their signed
  two's-complement equivalent. `number()` accepts integers and floats and
  returns a `float`.
- `object()` returns a `dict` whose members are converted with `any()`.
- `any()` takes its type from the JSON: booleans, floats, strings, null
  (`None`), objects and arrays. Integers must fit in 32 bits; larger ones
  raise `DeserializeError`.
- `count()` returns the length of an array.
- `array(callback)` calls `callback` with a deserializer for each element
  and returns the list of results.
- `field(name, callback)` calls `callback` with a deserializer for the
  member `name`. A missing member is presented as null.

## Writing JSON

`dapjson.serializer.JsonSerializer` starts with an empty object as its root.
`dump()` returns the document indented by four spaces.

```python
from dapjson.serializer import JsonSerializer

def write_fields(fs):
    fs.field("seq", lambda f: f.serialize(1))
    fs.field("type", lambda f: f.serialize("response"))
    fs.field("success", lambda f: f.serialize(True))
    fs.field("message", lambda f: f.remove())

s = JsonSerializer()
s.object(write_fields)
print(s.dump())
```

- `serialize(value)` writes booleans, integers (within the signed 64-bit
  range), floats, strings, dictionaries with string keys, and lists or
  tuples. `None` leaves the current value untouched. A dictionary is merged
  into an existing object member by member.
- `array(count, callback)` makes the value an array of at least `count`
  elements and calls `callback(serializer, index)` for each of the first
  `count` of them.
- `object(callback)` makes the value an object and calls `callback` with a
  `FieldSerializer`, whose `field(name, callback)` hands a serializer for
  that member to `callback`.
- `remove()`, called inside a field callback, drops that member from the
  object. This is how unset optional values are left out.

Anything that cannot be written, including NaN or infinite floats at
`dump()` time, raises `SerializeError` (a `ValueError`).

## Ending a session

```python
import threading
from dapjson.session_state import SessionState

state = SessionState()
threading.Timer(0.1, state.request_terminate).start()
state.wait_for_terminate(timeout=5)  # True once termination was requested
```

`request_terminate()` sets the flag and wakes every waiting thread.
`wait_for_terminate(timeout)` returns `True` when termination has been
requested and `False` when the timeout runs out first; with `None` it waits
with no time limit. The `terminate` property reads the flag.

## What this package does not do

`dapjson` has no debug adapter server, no transport for reading or writing
framed protocol messages, and no definitions of the protocol's request,
response or event types. It only converts between JSON text and Python
values and provides the termination flag; a program that serves the
protocol has to supply the rest.