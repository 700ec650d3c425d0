# -*- coding: utf-8 -*-
#
# This file is part of `bml`, a library for the BML settings format
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Binds BML nodes to dataclass instances and back.

Mark the dataclass fields that correspond to a node with :func:`field`,
giving the name (or path) of the node::

    import dataclasses
    from bml import bind

    @dataclasses.dataclass
    class Video:
        driver: str = bind.field("Driver", default="")
        multiplier: int = bind.field("Multiplier", default=1)

    @dataclasses.dataclass
    class Settings:
        video: Video = bind.field("Video", default_factory=Video)

    settings = bind.unmarshal(text, Settings())
    text = bind.marshal(settings)

Supported field types are :class:`str`, :class:`bool`, :class:`int`,
:class:`float`, other dataclasses, and ``Optional`` versions of those. For
every dataclass a mapping table is built once, holding a reader and a writer
for each marked field; fields that are not marked, or whose name starts with
an underscore, are skipped.

"""

import dataclasses
import logging
import types
import typing

from . import exceptions
from .document import Document
from .node import (
    Node, format_bool, format_float, format_int, parse_float, parse_int,
    split_path,
)
from .writer import Writer


logger = logging.getLogger(__name__)


#: the key in the field metadata holding the node name
METADATA_KEY = "bml"

_union_types = tuple(t for t in (typing.Union, getattr(types, 'UnionType', None)) if t)

# cache of mapping tables, by dataclass
_tables = {}


def field(name, **kwargs):
    """Return a :func:`dataclasses.field` that maps to the node ``name``.

    The name may also be a path, like ``"Video/Driver"``. All keyword
    arguments are given to :func:`dataclasses.field`.

    """
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[METADATA_KEY] = name
    return dataclasses.field(metadata=metadata, **kwargs)


class FieldMapping:
    """Reads and writes one dataclass field.

    ``attr`` is the name of the field and ``name`` the name or path of the
    node. ``read(node, current)`` returns the new field value from the node
    (it may raise :class:`ValueError`), and ``write(value, parent)`` appends
    a node with the value to the parent node.

    """
    __slots__ = ('attr', 'name', 'read', 'write')

    def __init__(self, attr, name, read, write):
        self.attr = attr
        self.name = name
        self.read = read
        self.write = write

    def __repr__(self):
        return '<{} {} -> {!r}>'.format(type(self).__name__, self.attr, self.name)


def mapping(cls):
    """Return the tuple of :class:`FieldMapping` objects for the dataclass.

    The table is built on first use and then cached. Raises
    :class:`TypeError` if a marked field has an unsupported type.

    """
    try:
        return _tables[cls]
    except KeyError:
        pass
    try:
        hints = typing.get_type_hints(cls)
    except NameError:
        hints = {}
    table = []
    for f in dataclasses.fields(cls):
        name = f.metadata.get(METADATA_KEY)
        if not name or f.name.startswith('_'):
            continue
        read, write = converters(hints.get(f.name, f.type), f.name, name)
        table.append(FieldMapping(f.name, name, read, write))
    table = _tables[cls] = tuple(table)
    logger.debug("mapping for %s: %d fields", cls.__qualname__, len(table))
    return table


def converters(tp, attr, name):
    """Return a (read, write) tuple of functions for a field of type ``tp``."""
    optional = False
    if typing.get_origin(tp) in _union_types:
        args = typing.get_args(tp)
        if len(args) == 2 and type(None) in args:
            tp = args[0] if args[1] is type(None) else args[1]
            optional = True

    if tp is str:
        convert = lambda text, current: text
        to_text = str
    elif tp is bool:
        convert = lambda text, current: text == "true"
        to_text = format_bool
    elif tp is int:
        convert = _numeric(parse_int, "int")
        to_text = format_int
    elif tp is float:
        convert = _numeric(parse_float, "float")
        to_text = format_float
    elif isinstance(tp, type) and dataclasses.is_dataclass(tp):
        def read(node, current):
            if current is None:
                try:
                    current = tp()
                except TypeError as e:
                    raise ValueError("cannot create {}: {}".format(tp.__name__, e)) from None
            return read_node(node, current)
        def write(value, parent):
            if value is not None:
                write_node(value, _make_node(parent, name))
        return read, write
    else:
        raise TypeError("unsupported type for field {!r}: {}".format(attr,
            "Optional[{}]".format(tp) if optional else tp))

    def read(node, current):
        return convert(node.value.strip(), current)
    def write(value, parent):
        if value is not None:
            _make_node(parent, name).value = to_text(value)
    return read, write


def _numeric(parse, type_name):
    """Return a converter for int or float text.

    An empty text keeps the current value.

    """
    def convert(text, current):
        if not text:
            return current
        value = parse(text)
        if value is None:
            raise ValueError("cannot parse {!r} as {}".format(text, type_name))
        return value
    return convert


def _make_node(parent, path):
    """Append a new node at the path to the parent, and return it.

    Nodes in between are reused if they exist.

    """
    names = split_path(path)
    for n in names[:-1]:
        parent = parent.child(n) or parent.append_node(n)
    return parent.append_node(names[-1])


def _check_instance(obj, func):
    """Raise TypeError if obj is not a dataclass instance."""
    if obj is None or isinstance(obj, type) or not dataclasses.is_dataclass(obj):
        raise TypeError("{}() requires a dataclass instance, not {!r}".format(func, obj))


def read_node(node, target):
    """Set the marked fields of the dataclass instance from the node.

    Fields for which no node is found are left unchanged. Raises
    :class:`~.exceptions.BindError` if a value can't be converted. Returns
    the target.

    """
    _check_instance(target, "read_node")
    for m in mapping(type(target)):
        child = node.get(m.name)
        if not child:
            continue
        try:
            value = m.read(child, getattr(target, m.attr))
        except exceptions.BindError as e:
            raise exceptions.BindError("{}.{}".format(m.attr, e.field), e.reason) from None
        except ValueError as e:
            raise exceptions.BindError(m.attr, str(e)) from None
        setattr(target, m.attr, value)
    return target


def write_node(obj, node=None):
    """Append a node for every marked field of the dataclass instance.

    Fields with a None value are skipped. If no node is given, a new unnamed
    root node is created. Returns the node.

    """
    _check_instance(obj, "write_node")
    if node is None:
        node = Node()
    for m in mapping(type(obj)):
        m.write(getattr(obj, m.attr), node)
    return node


def unmarshal(text, target):
    """Read BML text into the dataclass instance and return it.

    Raises a :class:`~.exceptions.ParseError` if the text is invalid, and a
    :class:`~.exceptions.BindError` if a value can't be converted.

    """
    _check_instance(target, "unmarshal")
    if isinstance(text, (bytes, bytearray)):
        text = text.decode('utf-8')
    return read_node(Document.from_text(text).root, target)


def marshal(obj, indent_width=2):
    """Return the BML text for the dataclass instance."""
    return Writer(indent_width).write(write_node(obj))
