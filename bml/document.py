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
The :class:`Document` class, holding a BML node tree.

"""

from . import parser, writer
from .node import Node


class Document:
    """A BML document.

    The ``root`` attribute is an unnamed :class:`~.node.Node`, whose children
    are the toplevel nodes of the document. If no root is given, an empty one
    is created.

    Iterating over a document yields the toplevel nodes. The path methods
    :meth:`get`, :meth:`set` and :meth:`remove` and the typed variants
    operate on the root node.

    """
    def __init__(self, root=None):
        self.root = Node() if root is None else root

    def __repr__(self):
        c = "node" if len(self.root) == 1 else "nodes"
        return '<{} ({} {})>'.format(type(self).__name__, len(self.root), c)

    def __iter__(self):
        return iter(self.root)

    def __len__(self):
        return len(self.root)

    def __bool__(self):
        """Always True."""
        return True

    @classmethod
    def from_text(cls, text):
        """Read the text and return a Document.

        Raises a :class:`~.exceptions.ParseError` if the text is not valid.

        """
        return cls(parser.Parser.from_text(text).parse())

    def write(self, indent_width=2, start_indent=0):
        """Return the document as BML text. See :class:`~.writer.Writer`."""
        return writer.Writer(indent_width, start_indent).write(self.root)

    def copy(self):
        """Return a copy of the document, with a copy of all nodes."""
        return type(self)(self.root.copy())

    def equals(self, other):
        """Return True if the other document has the same nodes and values."""
        return self.root.equals(other.root)

    def get(self, path):
        """Return the node at the path or :data:`~.node.MISSING`."""
        return self.root.get(path)

    def string(self, path, fallback=''):
        """Return the stripped value at the path, or the fallback."""
        return self.get(path).string(fallback)

    def bool(self, path, fallback=False):
        return self.get(path).bool(fallback)

    def int(self, path, fallback=0):
        return self.get(path).int(fallback)

    def float(self, path, fallback=0.0):
        return self.get(path).float(fallback)

    def set(self, path, value):
        """Set a value at the path and return the node."""
        return self.root.set(path, value)

    def set_bool(self, path, value):
        """Set a boolean value at the path and return the node."""
        return self.root.set_bool(path, value)

    def set_int(self, path, value):
        """Set an integer value at the path and return the node."""
        return self.root.set_int(path, value)

    def set_float(self, path, value):
        """Set a float value at the path and return the node."""
        return self.root.set_float(path, value)

    def remove(self, path):
        """Remove the node at the path, returns True if it was there."""
        return self.root.remove(path)

    def dump(self, file=None, style=None):
        """Display the node tree, see :meth:`.node.Node.dump`."""
        self.root.dump(file, style)
