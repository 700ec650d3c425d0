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
Test writing BML text, and reading back what was written.
"""

### find bml
import sys
sys.path.insert(0, '.')

import bml
from bml.node import Node
from bml.writer import Writer


def check_round_trip(text):
    """Return True if text read, written and read again gives the same tree."""
    d = bml.parse(text)
    return d.equals(bml.parse(d.write()))


def test_main():
    assert bml.write(bml.Document()) == ""
    assert bml.write(Node()) == ""
    assert bml.write(Node('', '', Node("Video"))) == "Video\n"
    assert bml.write(Node('', '', Node("Driver", "Metal"))) == "Driver: Metal\n"
    assert bml.write(Node('', '', Node("Video", "", Node("Driver", "Metal")))) == "Video\n  Driver: Metal\n"
    assert bml.write(Node('', '', Node("Desc", "Line1\nLine2"))) == "Desc\n  : Line1\n  : Line2\n"


def test_value_and_children():
    tree = Node('', '',
        Node("Desc", "Line1\nLine2",
            Node("Child", "value", Node("Grandchild")),
        ),
        Node("Next", "x"),
    )
    text = bml.write(tree)
    assert text == """\
Desc
  : Line1
  : Line2
  Child: value
    Grandchild
Next: x
"""
    assert bml.parse(text).root.equals(tree)


def test_attributes_are_written_as_children():
    d = bml.parse('Input device=keyboard port="Port 1" // comment\nDesc: a\n  : b')
    assert d.write() == """\
Input
  device: keyboard
  port: Port 1
Desc
  : a
  : b
"""


def test_round_trip():
    assert check_round_trip("""\
Video
  Driver: Metal
  Multiplier: 2
Audio
  Driver: SDL
  Volume: 1.0
""")
    assert check_round_trip("A\n\tB: 1\n\t\tC\n\tD: two words\nE\n  : x\n  : y\n  F: z")
    assert check_round_trip("")

    d = bml.parse("Video\n  Driver: Metal\nAudio\n  Volume: 1.0")
    d2 = bml.parse(bml.write(d))
    assert d2.get("Video/Driver").string("") == "Metal"
    assert d2.get("Audio/Volume").float(0) == 1.0


def test_modify_and_write():
    d = bml.parse("Video\n  Driver: Metal\n  Multiplier: 2\n")
    d.set("Video/Driver", "OpenGL")
    d.set_int("Video/Multiplier", 3)
    d.set_bool("Audio/Mute", True)
    d.remove("Video/Multiplier")
    assert d.write() == "Video\n  Driver: OpenGL\nAudio\n  Mute: true\n"


def test_writer_preferences():
    tree = Node('', '', Node("Video", "", Node("Driver", "Metal"), Node("Desc", "a\nb")))
    assert Writer(indent_width=4).write(tree) == "Video\n    Driver: Metal\n    Desc\n        : a\n        : b\n"
    w = Writer()
    w.start_indent = 1
    assert w.write(tree) == " Video\n   Driver: Metal\n   Desc\n     : a\n     : b\n"
    assert bml.write(tree, indent_width=1) == "Video\n Driver: Metal\n Desc\n  : a\n  : b\n"
    # the written text can be read back
    assert bml.parse(Writer(indent_width=4, start_indent=3).write(tree)).root.equals(tree)



if __name__ == "__main__":
    for name, func in list(globals().items()):
        if name.startswith('test_'):
            func()
