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
Registry of the language definitions bundled with :mod:`bml`.

When adding languages to :mod:`bml.lang` please also add a registration
here.

"""

__all__ = ['find', 'register']


import parce.registry


#: bml's own registry; languages not found here are looked up in *parce*
registry = parce.registry.Registry(parce.registry.registry)


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Get the root lexicon for a language with name.

    See for all the arguments :func:`parce.find`. If no root lexicon can be
    found in bml's bundled languages, falls back to :mod:`parce`. Returns None
    if no language is found at all.

    """
    return registry.find(name, filename=filename, mimetype=mimetype, contents=contents)


def register(lexicon_name, *,
    name = None,
    desc = None,
    aliases = (),
    filenames = (),
    mimetypes = (),
    guesses = (),
):
    """Register a root lexicon name with specified properties.

    See for an explanation of all the arguments
    :meth:`parce.registry.Registry.add`.

    """
    registry.add(
        lexicon_name, name = name, desc = desc, aliases = aliases,
        filenames = filenames, mimetypes = mimetypes, guesses = guesses)



## register bundled languages here
register("bml.lang.bml.Bml.root",
    name = "BML",
    desc = "BML settings markup",
    aliases = ["bml"],
    filenames = [("*.bml", 1)],
    mimetypes = [("text/x-bml", 1)],
)
