# idxdkit

Pure-Python tools for building and reading the structures used by data
streaming (DSA) and analytics (IAX) accelerators, along with a few small
low-level helpers.

## Modules

### `idxdkit.descriptor`

- Enums: `DsaOpcode`, `IaxOpcode`, `DsaCompletionStatus`,
  `IaxCompletionStatus`, `WinType`. Flag sets: `OpFlag` (descriptor flags)
  and `WinFlag` (window flags).
- `HwDescriptor` is a packed little-endian 64-byte work descriptor.
  `CompletionRecord` is a 64-byte completion record. It can also be read
  from the 32 bytes that a DSA device writes. Fields are addressed by name
  with `get_field` / `set_field`, or with `record["name"]`. The names of one
  union share the same bytes. A value that does not fit its field raises
  `ValueError`. An unknown field name raises `KeyError`. Byte-array fields
  are read and written as `bytes` of the exact length.
- `to_bytes()` returns the packed record. `parse_descriptor(data)` and
  `parse_completion_record(data)` read a record back from its bytes.
- `decode_scmd_status(status)` returns the symbolic name of a driver command
  error status, such as `"IDXD_SCMD_WQ_NO_GRP"`. It raises `ValueError` for a
  value that is not a known driver command error.
  `completion_status_code(status)` masks a completion status byte down to its
  status code, which drops the write bit.
- `WinParam`, `WinAttach` and `WinFault` are dataclasses. Their `to_bytes()`
  packs the window ioctl arguments to 24, 6 and 20 bytes. `from_bytes()`
  reads them back. `WinParam.to_bytes()` rejects unknown window flags. The
  ioctl request numbers are available as `IDXD_WIN_CREATE`,
  `IDXD_WIN_ATTACH` and `IDXD_WIN_FAULT`.

### `idxdkit.endian`

- `bswap16`, `bswap32` and `bswap64` reverse the bytes of a value. Wider
  input is truncated first.
- `cpu_to_le`, `le_to_cpu`, `cpu_to_be` and `be_to_cpu` take a value and a
  bit width of 16, 32 or 64. They convert between host order and the fixed
  order.

### `idxdkit.strutil`

- `streq`, `strstarts`, `strends`, and `strcount`. `strcount` counts
  non-overlapping occurrences and rejects an empty needle.
- `str_max_chars(nbytes)` gives a buffer size large enough for the decimal,
  negative or hex form of an `nbytes`-wide integer, with its terminator.
- The C-locale character tests take a one-character string, a single byte or
  an int: `cisalnum`, `cisalpha`, `cisascii`, `cisblank`, `ciscntrl`,
  `cisdigit`, `cisgraph`, `cislower`, `cisprint`, `cispunct`, `cisspace`,
  `cisupper` and `cisxdigit`.

### `idxdkit.dlist`

`LinkedList` is a circular doubly linked list of `ListNode` entries with a
sentinel head. Each node carries a `value`.

- `add` and `add_tail` accept a node or a plain value and return the node.
- `top`, `tail`, `pop`, `next` and `prev` return nodes, or `None` at the
  ends.
- `remove` takes a node out of this list. `ListNode.unlink()` takes a node
  out of whatever list holds it.
- `append_list` and `prepend_list` move all entries of another list into
  this one.
- Iterating, `reversed()` and `len()` work on the node values. The current
  entry may be removed while iterating.
- `check()` and `check_node()` verify that the backward links match the
  forward links. They return `None` on a mismatch, or raise
  `ListCorruptError` when given a message string.

### `idxdkit.attempts`

`AttemptTracker` counts attempted and skipped tests against a kernel version.

- `attempt(kver)` returns whether a test needing kernel `kver` may run. When
  the kernel is too old, the attempt is counted as skipped.
- `skip()` records an explicit skip.
- `result(rc)` works out the exit status of the run. A failure status is
  passed through. The run returns `EXIT_SKIP` (77) when every attempt was
  skipped, and 0 otherwise.
- Skips are reported through the `logging` module.

Helpers:

- `kernel_version(a, b, c)` encodes a release.
- `parse_kernel_version` reads the leading `major.minor.sublevel` of a string.
- `format_kernel_version` turns an encoded version back into text.
- `system_kernel_version` reads the running kernel's version, or the `KVER`
  environment variable when it is set.

## Example

```python
from idxdkit.descriptor import HwDescriptor, DsaOpcode, OpFlag, parse_descriptor

desc = HwDescriptor()
desc.set_field("opcode", DsaOpcode.MEMMOVE)
desc.set_field("flags", OpFlag.CRAV | OpFlag.RCR)
desc.set_field("xfer_size", 4096)

raw = desc.to_bytes()          # 64 bytes, little-endian
again = parse_descriptor(raw)
assert again.get_field("xfer_size") == 4096
```

```python
from idxdkit.attempts import AttemptTracker, kernel_version

tracker = AttemptTracker(kernel_version(5, 10, 0))
if tracker.attempt(kernel_version(6, 0, 0), "test_feature", 42):
    ...
exit_code = tracker.result(0)   # 77 when every attempt was skipped
```

## What it does not do

idxdkit only builds and reads the structures in memory. It does not:

- open accelerator devices or configure them;
- submit descriptors or wait on completion records;
- issue the window ioctls whose arguments it packs.

There is no command-line tool.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```