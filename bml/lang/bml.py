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
BML language definition.

Tokenizes BML text for highlighting. The names of nodes get the
``Name.Tag`` action, attribute names ``Name.Attribute``. Values after a
colon and on continuation lines are ``Data``, quoted values ``String``. A
quoted value that is not closed on its line is ``Invalid``, text after a
tab or a character that can't start an attribute is ``Unimportant``,
because it is ignored when the document is read.

Example::

    >>> import parce
    >>> from bml.lang.bml import Bml
    >>> for t in parce.root(Bml.root, 'Video\\n  Driver: Metal').tokens():
    ...     print(t)
    ...
    <Token 'Video' at 0:5 (Name.Tag)>
    <Token 'Driver' at 8:14 (Name.Tag)>
    <Token ':' at 14:15 (Delimiter)>
    <Token ' Metal' at 15:21 (Literal.Data)>

"""

__all__ = ('Bml',)

from parce import Language, lexicon, default_action, default_target, skip
import parce.action as a


NAME = r'[A-Za-z0-9.\-]+'


class Bml(Language):
    """BML settings markup."""
    @lexicon
    def root(cls):
        """Line starts: comment lines, continuation lines and node names."""
        yield r'//[^\n]*', a.Comment
        yield r':', a.Delimiter, cls.continuation
        yield NAME, a.Name.Tag, cls.node
        yield r'[^\s][^\n]*', a.Invalid

    @lexicon
    def node(cls):
        """The rest of a node line: value, attributes and comment."""
        yield r'\n', skip, -1
        yield r'//[^\n]*', a.Comment
        yield r':', a.Delimiter, cls.value
        yield r'=', a.Delimiter, cls.assignment
        yield NAME, a.Name.Attribute
        yield r'(?:\t|[^\sA-Za-z0-9.\-:=])[^\n]*', a.Unimportant

    @lexicon
    def value(cls):
        """A value after a colon, up to the end of the line."""
        yield r'\n', skip, -2
        yield r'//[^\n]*', a.Comment
        yield default_action, a.Data

    @lexicon
    def assignment(cls):
        """A value after an equals sign."""
        yield r'"[^"\n]*"', a.String, -1
        yield r'"[^\n]*', a.Invalid, -1
        yield r'[^ "\n]+', a.Data, -1
        yield default_target, -1

    @lexicon
    def continuation(cls):
        """A value line, without comments."""
        yield r'\n', skip, -1
        yield default_action, a.Data
