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
Writes a node tree as BML text.

The output always uses the same notation, regardless of how the tree was
read: every node is on a line of its own, attributes are written as child
nodes, and values are written after a colon. A value containing newlines is
written on indented ``:`` lines below its node::

    Video
      Driver: Metal
    Description
      : first line
      : second line

"""


class _Block:
    """Keeps the administration of a line of output text.

    The number of spaces to indent this line is in the ``indent`` attribute;
    the line itself is built as a list in the ``line`` attribute.

    """
    def __init__(self, indent):
        self.indent = indent
        self.line = []

    def output(self):
        """Get the output line."""
        return ' ' * self.indent + ''.join(self.line) + '\n'


class Writer:
    """Prints the BML text of the children of a node.

    Preferences can be given on instantiation or by setting the attributes of
    the same name.

    The ``indent_width`` is the number of spaces each level is indented with,
    and defaults to 2. The ``start_indent`` is prepended to every output line,
    in number of spaces, and defaults to 0.

    Call :meth:`write` to get the text output of a node. The node itself is
    not written, only its children, as it usually is the unnamed root node of
    a document.

    """
    def __init__(self,
            indent_width = 2,
            start_indent = 0,
        ):

        #: the number of spaces per indent level
        self.indent_width = indent_width

        #: the number of spaces to prepend to every output line
        self.start_indent = start_indent

        # the list in which the result output is built up
        self._output = []

    def write(self, node):
        """Get the text output of the children of the node.

        Returns an empty string if the node has no children.

        """
        self._output.clear()
        for child in node:
            self.output_node(child, 0)
        return ''.join(block.output() for block in self._output)

    def output_node(self, node, depth):
        """*(Internal.)* Output one node and its children at the indent depth."""
        indent = self.start_indent + depth * self.indent_width
        line = self.create_new_block(indent).line
        line.append(node.name)
        if '\n' in node.value:
            for text in node.value.split('\n'):
                self.create_new_block(indent + self.indent_width).line.extend((': ', text))
        elif node.value:
            line.extend((': ', node.value))
        for child in node:
            self.output_node(child, depth + 1)

    def create_new_block(self, indent):
        """*(Internal.)* Go to a new line, and return the new block."""
        block = _Block(indent)
        self._output.append(block)
        return block
