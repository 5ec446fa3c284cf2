# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import ChangeFormatError


class ChangeOp:
    "Collection of valid values for the op field of changes."
    INSERTION = "insertion"
    DELETION = "deletion"
    SUBSTITUTION = "substitution"
    MOVE = "move"


class Change(object):
    """Base class of the four change variants.

    Changes are immutable value objects. Two changes compare equal
    only if they are of the same variant and all fields are equal,
    e.g. an insertion is never equal to a deletion of the same value
    at the same index.

    The indices are not validated on construction, use
    validate_changes() to check a script against its sequences.
    """
    __slots__ = ()

    op = None
    _fields = ()
    _description = ""

    def __setattr__(self, name, value):
        raise AttributeError("{} objects are immutable".format(type(self).__name__))

    def __delattr__(self, name):
        raise AttributeError("{} objects are immutable".format(type(self).__name__))

    def _values(self):
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self):
        return hash((self.op,) + self._values())

    def __reduce__(self):
        return (type(self), self._values())

    def __repr__(self):
        args = ", ".join("{}={!r}".format(name, getattr(self, name))
                         for name in self._fields)
        return "{}({})".format(type(self).__name__, args)

    def __str__(self):
        return self._description.format(**dict(zip(self._fields, self._values())))


class _IndexedChange(Change):
    __slots__ = ("value", "destination")

    _fields = ("value", "destination")

    def __init__(self, value, destination):
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "destination", destination)


class Insertion(_IndexedChange):
    "The value was inserted, destination is its index in the new sequence."
    __slots__ = ()
    op = ChangeOp.INSERTION
    _description = "Inserted {value} at index {destination}"


class Deletion(_IndexedChange):
    "The value was deleted, destination is its index in the old sequence."
    __slots__ = ()
    op = ChangeOp.DELETION
    _description = "Deleted {value} at index {destination}"


class Substitution(_IndexedChange):
    """The value overwrote the element at destination.

    The value is the new element, e.g. the changes of [1, 2, 3]
    since [1, 2, 4] hold Substitution(3, 2).
    """
    __slots__ = ()
    op = ChangeOp.SUBSTITUTION
    _description = "Substituted with {value} at index {destination}"


class Move(Change):
    "The value moved from origin in the old sequence to destination in the new."
    __slots__ = ("value", "origin", "destination")
    op = ChangeOp.MOVE
    _fields = ("value", "origin", "destination")
    _description = "Moved {value} from index {origin} to {destination}"

    def __init__(self, value, origin, destination):
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "destination", destination)


change_types = {
    ChangeOp.INSERTION: Insertion,
    ChangeOp.DELETION: Deletion,
    ChangeOp.SUBSTITUTION: Substitution,
    ChangeOp.MOVE: Move,
}


def change_to_dict(change):
    "Convert a change to a json-like dict."
    d = {"op": change.op}
    for name in change._fields:
        d[name] = getattr(change, name)
    return d


def change_from_dict(d):
    """Create a change from a json-like dict.

    Raises a ChangeFormatError if the dict is not a well formed change.
    """
    if not isinstance(d, dict):
        raise ChangeFormatError("Change entry '{}' is not a dict.".format(d))
    op = d.get("op")
    if op not in change_types:
        raise ChangeFormatError("Unknown change op '{}'.".format(op))
    cls = change_types[op]
    args = []
    for name in cls._fields:
        if name not in d:
            raise ChangeFormatError(
                "{} entry is missing the '{}' field.".format(op, name))
        args.append(d[name])
    change = cls(*args)
    _validate_indices(change)
    return change


def changes_to_json(changes):
    "Convert a list of changes to a list of json-like dicts."
    return [change_to_dict(c) for c in changes]


def changes_from_json(entries):
    "Convert a list of json-like dicts to a list of changes."
    if not isinstance(entries, list):
        raise ChangeFormatError("Changes must be a list.")
    return [change_from_dict(e) for e in entries]


def _validate_indices(change):
    for name in ("origin", "destination"):
        if name not in change._fields:
            continue
        index = getattr(change, name)
        # bool is an int subclass, but never a valid index here
        if not isinstance(index, int) or isinstance(index, bool):
            raise ChangeFormatError(
                "{} expects an integer {}, not '{}'.".format(change.op, name, index))
        if index < 0:
            raise ChangeFormatError(
                "{} {} {} is negative.".format(change.op, name, index))


def _check_range(change, name, seq, seqname):
    index = getattr(change, name)
    if not 0 <= index < len(seq):
        raise ChangeFormatError(
            "{} {} {} is out of range for the {} sequence of length {}.".format(
                change.op, name, index, seqname, len(seq)))


def validate_changes(changes, old=None, new=None):
    """Check whether a list of changes is well formed.

    If the old and/or new sequences are given, the indices
    of each change are also checked to be valid offsets
    into the sequence they refer to.

    Raises a ChangeFormatError if not well formed.
    """
    if not isinstance(changes, list):
        raise ChangeFormatError("Changes must be a list.")
    for c in changes:
        if not isinstance(c, Change) or c.op not in change_types:
            raise ChangeFormatError("Change entry '{}' is not a change type.".format(c))
        _validate_indices(c)
        if old is not None:
            if c.op == ChangeOp.DELETION:
                _check_range(c, "destination", old, "old")
            elif c.op == ChangeOp.MOVE:
                _check_range(c, "origin", old, "old")
        if new is not None:
            if c.op in (ChangeOp.INSERTION, ChangeOp.SUBSTITUTION, ChangeOp.MOVE):
                _check_range(c, "destination", new, "new")


def is_valid_changes(changes, old=None, new=None):
    """Checks whether a list of changes is well formed.

    Returns a boolean indicating the well-formedness of the changes.
    """
    try:
        validate_changes(changes, old=old, new=new)
        result = True
    except ChangeFormatError:
        result = False
    return result
