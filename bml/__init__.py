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
The bml module.

Reads and writes BML, an indentation based markup format for settings::

    >>> import bml
    >>> d = bml.parse("Video\\n  Driver: Metal\\n  Multiplier: 2\\n")
    >>> d.get("Video/Multiplier").int()
    2
    >>> d.set("Audio/Mute", "true")
    <Node 'Mute' 'true'>
    >>> print(bml.write(d), end='')
    Video
      Driver: Metal
      Multiplier: 2
    Audio
      Mute: true

"""

from .document import Document
from .exceptions import (
    BmlError, ParseError, UnexpectedEndOfInput, InvalidIndentation,
    InvalidNodeName, UnclosedQuote, BindError,
)
from .node import Node, MISSING
from .pkginfo import version, version_string
from .registry import find
from .writer import Writer


__all__ = (
    'parse', 'write', 'load', 'find', 'version', 'version_string',
    'Document', 'Node', 'MISSING', 'Writer',
    'BmlError', 'ParseError', 'UnexpectedEndOfInput', 'InvalidIndentation',
    'InvalidNodeName', 'UnclosedQuote', 'BindError',
)


def parse(text):
    """Read the text and return a :class:`Document`.

    The text may also be given as UTF-8 encoded :class:`bytes`. Raises a
    :class:`ParseError` subclass if the text is not valid BML.

    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode('utf-8')
    return Document.from_text(text)


def write(tree, indent_width=2, start_indent=0):
    """Return the BML text of a :class:`Document` or the children of a
    :class:`Node`.

    An empty document results in an empty string.

    """
    if isinstance(tree, Document):
        tree = tree.root
    return Writer(indent_width, start_indent).write(tree)


def load(filename, encoding='utf-8', errors=None):
    """Convenience function to read text from ``filename`` and return a
    :class:`Document`.

    A byte order mark at the start of the file is ignored. The ``errors``
    argument is passed to Python's :func:`open` function. Raises
    :class:`OSError` if the file can't be read.

    """
    with open(filename, encoding=encoding, errors=errors) as f:
        text = f.read()
    return Document.from_text(text.lstrip('\ufeff'))
