"""
=============================================================================
HEADER COLLECTION
=============================================================================

An immutable, case-insensitive, order-preserving multimap of header
name → list of values.

=============================================================================
STORAGE MODEL
=============================================================================

HTTP header names are case-insensitive, but the casing a caller used is
what gets written back out. Each entry is therefore stored under a
lowercased lookup key, paired with the name as the caller spelled it:

    _entries = {
        "content-type": ("Content-Type", ("text/html",)),
        "accept":       ("ACCEPT",       ("text/html", "application/json")),
    }
       ────┬───────      ────┬───────   ─────────────┬──────────────────
           │                 │                       │
      lookup key      original casing         values in append order

There is at most one entry per lookup key, and dict order is insertion
order, which is the order headers are emitted in.

=============================================================================
REPLACE VS ADD
=============================================================================

    headers = Headers().with_header("Foo", "a")

    headers.with_header("FOO", "b")     →  {"FOO": ["b"]}       replaced,
                                                                 caller's casing,
                                                                 moved to the end
    headers.with_added("foo", "b")      →  {"Foo": ["a", "b"]}  appended,
                                                                 stored casing kept

A plain string value passed to with_header() / with_added() is treated as
an already-serialized list and split on commas:

    with_header("Accept", "a,b")        →  ["a", "b"]
    with_header("Accept", ["a,b"])      →  ["a,b"]

Pass a list when a value legitimately contains a comma (Date, Set-Cookie).

=============================================================================
"""

from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from ..errors import ValidationError


HeaderValue = Union[str, Sequence[str]]

_Entry = Tuple[str, Tuple[str, ...]]


def _validate_name(name) -> str:
    if not isinstance(name, str):
        raise ValidationError(
            f"Header name must be a string, got {type(name).__name__}",
            argument="name",
        )
    return name


def _validate_values(value) -> Tuple[str, ...]:
    # str is itself a Sequence; callers handle it before getting here
    if not isinstance(value, (list, tuple)):
        raise ValidationError(
            f"Header value must be a string or a list of strings, got {type(value).__name__}",
            argument="value",
        )
    for item in value:
        if not isinstance(item, str):
            raise ValidationError(
                f"Header values must be strings, got {type(item).__name__}",
                argument="value",
            )
    return tuple(value)


def split_header_value(value: HeaderValue) -> Tuple[str, ...]:
    """
    Normalize a header value given to with_header() / with_added().

    A string is split on commas (no trimming); a list is taken as-is.

    Raises:
        ValidationError: If value is neither a string nor a list of strings.
    """
    if isinstance(value, str):
        return tuple(value.split(","))
    return _validate_values(value)


class Headers:
    """
    Immutable header multimap.

    Nothing in a Headers instance is ever modified after construction;
    with_header(), with_added() and without() return new instances.
    Returned value lists are fresh copies, so mutating them has no effect.

        headers = Headers({"Host": "example.com"})
        headers = headers.with_added("Accept", ["text/html", "application/json"])

        headers.get("accept")        # ["text/html", "application/json"]
        headers.get_line("ACCEPT")   # "text/html,application/json"
        "host" in headers            # True
    """

    __slots__ = ("_entries",)

    def __init__(self, headers: Optional[Mapping[str, HeaderValue]] = None):
        """
        Build from a mapping of name → value.

        Unlike with_header(), a string value here is NOT split on commas;
        it becomes a one-element list. Names that collide case-insensitively
        are merged into the first one's entry.

        Raises:
            ValidationError: On a non-string name or invalid value.
        """
        entries: Dict[str, _Entry] = {}

        for name, value in (headers or {}).items():
            _validate_name(name)
            values = (value,) if isinstance(value, str) else _validate_values(value)

            key = name.lower()
            if key in entries:
                stored_name, stored_values = entries[key]
                entries[key] = (stored_name, stored_values + values)
            else:
                entries[key] = (name, values)

        self._entries = entries

    @classmethod
    def _from_entries(cls, entries: Dict[str, _Entry]) -> "Headers":
        headers = cls.__new__(cls)
        headers._entries = entries
        return headers

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def has(self, name: str) -> bool:
        """Case-insensitive existence check."""
        return isinstance(name, str) and name.lower() in self._entries

    __contains__ = has

    def get(self, name: str) -> List[str]:
        """
        All values for a header, in append order.

        Returns:
            A new list; empty when the header is absent.
        """
        if not isinstance(name, str):
            return []
        entry = self._entries.get(name.lower())
        return list(entry[1]) if entry else []

    def get_line(self, name: str) -> str:
        """The header's values joined with ","; "" when absent."""
        return ",".join(self.get(name))

    # =========================================================================
    # COPY-ON-WRITE MUTATORS
    # =========================================================================

    def with_header(self, name: str, value: HeaderValue) -> "Headers":
        """
        Replace a header (case-insensitive) with the given value(s).

        The old entry is removed and the new one is appended under the
        caller's casing; the relative order of all other entries is kept.

        Raises:
            ValidationError: On a non-string name or invalid value.
        """
        _validate_name(name)
        values = split_header_value(value)

        entries = dict(self._entries)
        key = name.lower()
        entries.pop(key, None)
        entries[key] = (name, values)

        return self._from_entries(entries)

    def with_added(self, name: str, value: HeaderValue) -> "Headers":
        """
        Append value(s) to a header, creating it if absent.

        An existing entry keeps its stored casing and its position.

        Raises:
            ValidationError: On a non-string name or invalid value.
        """
        _validate_name(name)
        values = split_header_value(value)

        entries = dict(self._entries)
        key = name.lower()
        if key in entries:
            stored_name, stored_values = entries[key]
            entries[key] = (stored_name, stored_values + values)
        else:
            entries[key] = (name, values)

        return self._from_entries(entries)

    def without(self, name: str) -> "Headers":
        """Remove a header (case-insensitive). Absent names are a no-op."""
        if not self.has(name):
            return self

        entries = dict(self._entries)
        del entries[name.lower()]

        return self._from_entries(entries)

    # =========================================================================
    # ITERATION
    # =========================================================================

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        """(name, values) pairs in order, names in their stored casing."""
        for name, values in self._entries.values():
            yield name, list(values)

    def lines(self) -> Iterator[Tuple[str, str]]:
        """One (name, value) pair per value, the way headers go on the wire."""
        for name, values in self._entries.values():
            for value in values:
                yield name, value

    def to_dict(self) -> Dict[str, List[str]]:
        return dict(self.items())

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return list(self._entries.values()) == list(other._entries.values())

    __hash__ = None

    def __repr__(self) -> str:
        return f"Headers({self.to_dict()!r})"
