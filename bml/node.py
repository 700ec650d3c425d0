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
This module defines a :class:`Node` class, the tree structure of a BML
document, based on Python lists.

A node has a :attr:`~Node.name`, a :attr:`~Node.value` and child nodes. The
child nodes are addressed by paths, ``/``-separated sequences of names::

    >>> from bml.node import Node
    >>> root = Node()
    >>> root.set("Video/Driver", "Metal")
    <Node 'Driver' 'Metal'>
    >>> root.get("Video/Driver").string()
    'Metal'
    >>> root.get("Audio/Driver").string("SDL")
    'SDL'

A lookup that finds nothing returns the :data:`MISSING` object, on which all
the accessor methods still work, returning the fallback value you specify.
So there is no need to check for presence before every call.

"""

import decimal
import math
import re


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


_int_re = re.compile(r'[+-]?[0-9]+')


def split_path(path):
    """Return the list of names in the path, skipping empty segments.

    So ``"A//B/"`` yields the same as ``"A/B"``, and an empty path yields an
    empty list.

    """
    return [name for name in path.split('/') if name]


def format_bool(value):
    """Return ``"true"`` or ``"false"``."""
    return "true" if value else "false"


def format_int(value):
    """Return the value as a decimal integer."""
    return "{:d}".format(value)


def format_float(value):
    """Return the float in the shortest positional notation that reads back
    to the same value.

    No decimal point is added when the value is integral, and there is never
    an exponent::

        >>> format_float(1.0)
        '1'
        >>> format_float(0.1)
        '0.1'
        >>> format_float(1e21)
        '1000000000000000000000'

    """
    if math.isnan(value):
        return "NaN"
    elif math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(decimal.Decimal(repr(float(value))), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def parse_bool(text):
    """Return True or False for exactly ``"true"`` or ``"false"``, otherwise None."""
    if text == "true":
        return True
    elif text == "false":
        return False


def parse_int(text):
    """Return the text as an int if it is an optionally signed decimal
    integer, otherwise None."""
    if _int_re.fullmatch(text):
        return int(text)


def parse_float(text):
    """Return the text as a float, or None if it can't be read as one."""
    if '_' not in text:
        try:
            return float(text)
        except ValueError:
            pass


class Missing:
    """The result of a path lookup that did not find a node.

    There is only one instance, :data:`MISSING`. It evaluates to False and
    has no children, so iterating, :meth:`child` and the ``/`` operator find
    nothing. All the accessor methods of :class:`Node` are available and
    never fail: the getters return the fallback value, the setters do
    nothing and return MISSING, and :meth:`remove` returns False.

    """
    __slots__ = ()

    name = value = ''

    def __repr__(self):
        return '<Missing>'

    def __bool__(self):
        return False

    def __len__(self):
        return 0

    def __iter__(self):
        return iter(())

    def __truediv__(self, name):
        return iter(())

    def child(self, name):
        return None

    def descendants(self, reverse=False):
        return iter(())

    def get(self, path):
        return self

    def string(self, fallback=''):
        return fallback

    def bool(self, fallback=False):
        return fallback

    def int(self, fallback=0):
        return fallback

    def float(self, fallback=0.0):
        return fallback

    def set(self, path, value):
        return self

    def set_bool(self, path, value):
        return self

    def set_int(self, path, value):
        return self

    def set_float(self, path, value):
        return self

    def remove(self, path):
        return False


#: The single :class:`Missing` instance.
MISSING = Missing()


class Node(list):
    """Node implements a BML tree node, based on Python :class:`list`.

    The ``name`` is a string of letters, digits, ``-`` and ``.``; only the
    root node of a document has no name. The ``value`` is a string, and may
    contain newlines. An empty value means no value.

    Iterating over a node yields the child nodes, just like the underlying
    Python list. Their order is preserved, and more than one child can have
    the same name; lookups by name use the first one. Unlike Python's list, a
    node always evaluates to True, even if there are no children.

    A node does not know its parent: a tree is owned from the top down. Use
    :meth:`copy` to get an independent copy of a subtree.

    The ``/`` operator iterates over the children with a name::

        for n in node / "Input":
            # do something with all the Input child nodes

    """

    __slots__ = ('name', 'value')

    def __init__(self, name='', value='', *children):
        """Constructor.

        If children are given they are appended to the node.

        """
        self.name = name
        self.value = value
        if children:
            list.extend(self, children)

    def __repr__(self):
        parts = [type(self).__name__]
        if self.name:
            parts.append(repr(self.name))
        if self.value:
            parts.append(repr(self.value))
        if len(self):
            c = "child" if len(self) == 1 else "children"
            parts.append('({} {})'.format(len(self), c))
        return '<{}>'.format(' '.join(parts))

    def __bool__(self):
        """Always True."""
        return True

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare to make Node.index robust and "faster"."""
        return self is other

    def __ne__(self, other):
        """Identity compare to make Node.index robust and "faster"."""
        return self is not other

    def __truediv__(self, name):
        """Iterate over the children with the specified name."""
        if not isinstance(name, str):
            return NotImplemented
        return (node for node in self if node.name == name)

    def copy(self, with_children=True):
        """Return a copy of this Node.

        If ``with_children`` is True (the default), child nodes are also
        copied.

        """
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(self.name, self.value, *children)

    def equals(self, other):
        """Return True if we and other are equivalent.

        This is the case when we and the other have the same class, the same
        amount of children, :meth:`body_equals` returns True, and finally for
        all the children this method returns True.

        """
        return type(self) is type(other) and len(self) == len(other) and \
            self.body_equals(other) and \
            all(a.equals(b) for a, b in zip(self, other))

    def body_equals(self, other):
        """Return True if name and value of the other node are the same."""
        return self.name == other.name and self.value == other.value

    def descendants(self, reverse=False):
        """Iterate over all the descendants of this node.

        If ``reverse`` is set to True, yields all descendants in backward
        direction.

        When you :meth:`~generator.send` False to this generator, child nodes
        of the just yielded node will not be yielded.

        """
        iterate = reversed if reverse else iter
        stack = []
        gen = iterate(self)
        while True:
            for n in gen:
                if (yield n) is not False and len(n):
                    stack.append(gen)
                    gen = iterate(n)
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def child(self, name):
        """Return the first child with the name, or None."""
        for node in self:
            if node.name == name:
                return node

    def append_node(self, name, value=''):
        """Create a new child node, append it and return it."""
        node = type(self)(name, value)
        self.append(node)
        return node

    def get(self, path):
        """Return the node at the path, or :data:`MISSING`.

        Each name in the path selects the first child with that name. An empty
        path returns the node itself.

        """
        node = self
        for name in split_path(path):
            node = node.child(name)
            if node is None:
                return MISSING
        return node

    def string(self, fallback=''):
        """Return the value, stripped of surrounding whitespace.

        If the stripped value is empty, the fallback is returned.

        """
        return self.value.strip() or fallback

    def bool(self, fallback=False):
        """Return True for a ``true`` value and False for ``false``.

        Any other value returns the fallback.

        """
        value = parse_bool(self.value.strip())
        return fallback if value is None else value

    def int(self, fallback=0):
        """Return the value as an integer, or the fallback if it isn't one."""
        value = parse_int(self.value.strip())
        return fallback if value is None else value

    def float(self, fallback=0.0):
        """Return the value as a float, or the fallback if it isn't one."""
        value = parse_float(self.value.strip())
        return fallback if value is None else value

    def set(self, path, value):
        """Set the value of the node at the path and return that node.

        Nodes that do not exist yet are created, the ones in between with an
        empty value. An empty path returns this node unchanged.

        """
        names = split_path(path)
        if not names:
            return self
        node = self
        for name in names:
            node = node.child(name) or node.append_node(name)
        node.value = value
        return node

    def set_bool(self, path, value):
        """Set a ``true`` or ``false`` value at the path."""
        return self.set(path, format_bool(value))

    def set_int(self, path, value):
        """Set an integer value at the path."""
        return self.set(path, format_int(value))

    def set_float(self, path, value):
        """Set a float value at the path, see :func:`format_float`."""
        return self.set(path, format_float(value))

    def remove(self, path):
        """Remove the node at the path.

        Only the first child with the last name in the path is removed, the
        other children keep their order. Returns True if a node was removed.

        """
        names = split_path(path)
        if not names:
            return False
        parent = self.get('/'.join(names[:-1]))
        for index, node in enumerate(parent):
            if node.name == names[-1]:
                del parent[index]
                return True
        return False

    def dump(self, file=None, style=None):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        print(repr(self), file=file)
        def dump(node, prefix):
            for n in node:
                last = n is node[-1]
                print(prefix + d[3 if last else 2] + repr(n), file=file)
                dump(n, prefix + d[1 if last else 0])
        dump(self, '')
