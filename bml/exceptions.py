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
The exceptions raised by :mod:`bml`.

All parse errors abort the parse; there is no partial result. They inherit
from :class:`ParseError`, which in turn is a :class:`ValueError`, so callers
that only want to know whether some text is valid BML can simply catch
:class:`ValueError`.

"""


class BmlError(ValueError):
    """Base class for all errors raised by :mod:`bml`."""


class ParseError(BmlError):
    """Raised when text can't be read as a BML document.

    The offending source line is in the :attr:`line` attribute, and its
    1-based number in the original text in :attr:`lineno` (None if unknown).

    """
    description = "parse error"

    def __init__(self, line="", lineno=None):
        self.line = line
        self.lineno = lineno
        super().__init__(self.format())

    def format(self):
        """Return a human readable message."""
        if self.lineno is None:
            return "{} at line: {!r}".format(self.description, self.line)
        return "{} at line {}: {!r}".format(self.description, self.lineno, self.line)


class UnexpectedEndOfInput(ParseError):
    """Raised when the parser is asked to read beyond the last line."""
    description = "unexpected end of input"

    def format(self):
        return self.description


class InvalidIndentation(ParseError):
    """Raised when a child line is not indented deeper than its parent."""
    description = "invalid indentation"


class InvalidNodeName(ParseError):
    """Raised when no valid name character is found where a name is required."""
    description = "invalid node name"


class UnclosedQuote(ParseError):
    """Raised when a ``="`` value has no closing quote on the same line."""
    description = "unclosed quote"


class BindError(BmlError):
    """Raised when a node value can't be stored in a dataclass field.

    The name of the field is in the :attr:`field` attribute, for nested
    dataclasses in dotted notation, e.g. ``"video.multiplier"``. The
    :attr:`reason` attribute describes what went wrong.

    """
    def __init__(self, field, reason):
        self.field = field
        self.reason = reason
        super().__init__("field {!r}: {}".format(field, reason))
