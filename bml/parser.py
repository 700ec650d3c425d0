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
Reads BML text into a tree of :class:`~bml.node.Node` objects.

Reading happens in two steps. First the text is split in lines, dropping
blank lines and comment lines (see :func:`normalize_lines`). Then a
:class:`Parser` walks over the lines, using the indentation depth of each
line to decide whether it is a child of the node above, a continuation of
that node's value, or a sibling of one of its ancestors.

A line looks like this::

    Name[value] [attribute[value] ...] [// comment]

and a value is written in one of three ways:

``:`` value
    the rest of the line, up to an inline comment, right-stripped;
``=value``
    a value without spaces or double quotes;
``="value"``
    a quoted value, which may contain spaces, but not a double quote.

Attributes become child nodes, just like indented lines. A deeper indented
line starting with ``:`` adds a line to the value of its node.

"""

import logging
import string

from . import exceptions
from .node import Node


logger = logging.getLogger(__name__)


#: The characters a node or attribute name can consist of.
NAME_CHARS = frozenset(string.ascii_letters + string.digits + '-.')

#: The characters that make up the indentation of a line.
INDENT_CHARS = ' \t'


def numbered_lines(text):
    """Yield (lineno, line) tuples for the lines that matter in the text.

    Line numbers start at 1 and refer to the original text. All of ``\\n``,
    ``\\r\\n`` and ``\\r`` end a line. Lines that only contain whitespace and
    lines starting with ``//`` are skipped. The indentation of the other lines
    is kept as it is.

    """
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    for lineno, line in enumerate(text.split('\n'), 1):
        if line.strip() and not line.lstrip(INDENT_CHARS).startswith('//'):
            yield lineno, line


def normalize_lines(text):
    """Return the list of lines in the text that are not blank or a comment."""
    return [line for lineno, line in numbered_lines(text)]


def read_depth(line):
    """Return the number of spaces and tabs the line starts with."""
    return len(line) - len(line.lstrip(INDENT_CHARS))


def read_name(line, pos):
    """Return the name starting at pos and the position after it.

    The name is empty if the character at pos is not a name character.

    """
    end = pos
    while end < len(line) and line[end] in NAME_CHARS:
        end += 1
    return line[pos:end], end


def parse_value(line, pos, lineno=None):
    """Parse the value of a name ending at pos in line.

    Returns a tuple (value, pos), where pos is the position in the line after
    the value. If there is no value at pos, the value is an empty string and
    the position is not changed. Raises :class:`~.exceptions.UnclosedQuote` if
    a quoted value does not end on this line; the ``lineno``, if given, is
    mentioned in the exception.

    """
    if line.startswith(':', pos):
        pos += 1
        if line.startswith(' ', pos):
            pos += 1
        end = line.find('//', pos)
        if end == -1:
            end = len(line)
        return line[pos:end].rstrip(' '), end
    elif line.startswith('=', pos):
        pos += 1
        if line.startswith('"', pos):
            end = line.find('"', pos + 1)
            if end == -1:
                raise exceptions.UnclosedQuote(line, lineno)
            return line[pos+1:end], end + 1
        end = pos
        while end < len(line) and line[end] not in ' "':
            end += 1
        return line[pos:end], end
    return '', pos


class Parser:
    """Builds a node tree from a list of lines.

    The ``lines`` should already be normalized, see :func:`normalize_lines`.
    If ``linenos`` is given, it is a list of the same length with the line
    numbers of the lines in the original text, used in error messages.
    Otherwise, the position in the list of lines is used. Use
    :meth:`from_text` to create a Parser for a text.

    The ``index`` attribute is the index of the next line to read. Call
    :meth:`parse` to read all lines and get the root node, or
    :meth:`parse_node` to read just one node.

    """
    def __init__(self, lines=(), linenos=None):
        self.lines = list(lines)
        self.linenos = list(linenos) if linenos is not None else None
        self.index = 0

    @classmethod
    def from_text(cls, text):
        """Return a Parser for the text."""
        numbered = list(numbered_lines(text))
        return cls((line for lineno, line in numbered), [lineno for lineno, line in numbered])

    def lineno(self, index):
        """Return the line number of the line at index, for messages."""
        if self.linenos is None:
            return index + 1
        return self.linenos[index]

    def parse(self):
        """Read all remaining lines and return an unnamed root node.

        The nodes that are read are the children of the root node. Any
        :class:`~.exceptions.ParseError` propagates, no partial tree is
        returned.

        """
        root = Node()
        while self.index < len(self.lines):
            root.append(self.parse_node(-1))
        logger.debug("read %d lines, %d toplevel nodes", len(self.lines), len(root))
        return root

    def parse_node(self, parent_depth):
        """Read one node with its attributes, value lines and children.

        The node's line must be indented deeper than ``parent_depth``, unless
        ``parent_depth`` is negative, which means there is no parent.

        """
        if self.index >= len(self.lines):
            raise exceptions.UnexpectedEndOfInput()
        index = self.index
        line = self.lines[index]
        self.index += 1

        depth = read_depth(line)
        if parent_depth >= 0 and depth <= parent_depth:
            raise exceptions.InvalidIndentation(line, self.lineno(index))

        name, pos = read_name(line, depth)
        if not name:
            raise exceptions.InvalidNodeName(line, self.lineno(index))
        node = Node(name)
        node.value, pos = parse_value(line, pos, self.lineno(index))
        self.parse_attributes(node, line, pos, self.lineno(index))
        self.parse_children(node, depth)
        return node

    def parse_attributes(self, node, line, pos, lineno=None):
        """Append the attributes following pos in the line to the node.

        Reading stops at the end of the line, at an inline comment, or at a
        character that can't start a name.

        """
        while pos < len(line):
            while line.startswith(' ', pos):
                pos += 1
            if pos >= len(line) or line.startswith('//', pos):
                break
            name, pos = read_name(line, pos)
            if not name:
                break
            value, pos = parse_value(line, pos, lineno)
            node.append(Node(name, value))

    def parse_children(self, node, depth):
        """Read the lines indented deeper than depth into the node.

        A line starting with ``:`` adds a line to the value, other lines are
        read as child nodes.

        """
        while self.index < len(self.lines):
            line = self.lines[self.index]
            if read_depth(line) <= depth:
                break
            text = line.lstrip(INDENT_CHARS)
            if text.startswith(':'):
                text = text[1:]
                if text.startswith(' '):
                    text = text[1:]
                node.value = node.value + '\n' + text if node.value else text
                self.index += 1
            else:
                node.append(self.parse_node(depth))
