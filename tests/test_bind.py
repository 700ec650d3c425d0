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
Test binding BML documents to dataclasses.
"""

### find bml
import sys
sys.path.insert(0, '.')

import dataclasses
import typing

import pytest

import bml
from bml import bind, exceptions


@dataclasses.dataclass
class VideoSettings:
    driver: str = bind.field("Driver", default="")
    multiplier: int = bind.field("Multiplier", default=0)
    luminance: float = bind.field("Luminance", default=0.0)
    color_bleed: bool = bind.field("ColorBleed", default=False)


@dataclasses.dataclass
class AudioSettings:
    driver: str = bind.field("Driver", default="")
    volume: float = bind.field("Volume", default=0.0)
    mute: bool = bind.field("Mute", default=False)
    latency: int = bind.field("Latency", default=0)


@dataclasses.dataclass
class Settings:
    video: VideoSettings = bind.field("Video", default_factory=VideoSettings)
    audio: AudioSettings = bind.field("Audio", default_factory=AudioSettings)


@dataclasses.dataclass
class Options:
    name: typing.Optional[str] = bind.field("Name", default=None)
    count: typing.Optional[int] = bind.field("Count", default=None)
    video: typing.Optional[VideoSettings] = bind.field("Video", default=None)
    shader: str = bind.field("Video/Shader", default="None")
    comment: str = "not bound"
    _secret: str = bind.field("Secret", default="hidden")


@dataclasses.dataclass
class Unsupported:
    ports: list = bind.field("Ports", default_factory=list)


@dataclasses.dataclass
class Port:
    number: int = bind.field("Number")


@dataclasses.dataclass
class Input:
    port: typing.Optional[Port] = bind.field("Port", default=None)


SETTINGS = """\
Video
  Driver: Metal
  Multiplier: 2
  Luminance: 1.5
  ColorBleed: true
Audio
  Driver: SDL
  Volume: 0.8
  Mute: false
  Latency: 20
"""


def test_unmarshal():
    s = bind.unmarshal(SETTINGS, Settings())
    assert s.video == VideoSettings("Metal", 2, 1.5, True)
    assert s.audio == AudioSettings("SDL", 0.8, False, 20)


def test_unmarshal_missing_nodes():
    s = bind.unmarshal("Video\n  Driver: Metal", Settings())
    assert s.video.driver == "Metal"
    assert s.video.multiplier == 0
    assert s.audio == AudioSettings()

    s = bind.unmarshal("", Settings())
    assert s == Settings()

    # empty numeric values leave the field unchanged
    s = VideoSettings(multiplier=4, luminance=2.5)
    bind.unmarshal("Multiplier:\nLuminance=\nColorBleed: yes", s)
    assert s.multiplier == 4
    assert s.luminance == 2.5
    assert s.color_bleed is False


def test_unmarshal_optional():
    o = bind.unmarshal("Name:  Metal \nCount: 3\nVideo\n  Multiplier: 2\n  Shader: crt", Options())
    assert o.name == "Metal"
    assert o.count == 3
    assert o.video == VideoSettings(multiplier=2)
    assert o.shader == "crt"
    assert o.comment == "not bound"
    assert o._secret == "hidden"

    o = bind.unmarshal("Secret: shown\ncomment: x", Options())
    assert o.name is None and o.count is None and o.video is None
    assert o.shader == "None"
    assert o._secret == "hidden"
    assert o.comment == "not bound"


def test_unmarshal_errors():
    with pytest.raises(exceptions.BindError) as info:
        bind.unmarshal("Video\n  Multiplier: two", Settings())
    assert info.value.field == "video.multiplier"
    assert "two" in str(info.value)

    with pytest.raises(exceptions.BindError) as info:
        bind.unmarshal("Luminance: bright", VideoSettings())
    assert info.value.field == "luminance"

    with pytest.raises(exceptions.UnclosedQuote):
        bind.unmarshal('Video\n  Driver="Metal', Settings())

    with pytest.raises(TypeError):
        bind.unmarshal(SETTINGS, Settings)
    with pytest.raises(TypeError):
        bind.unmarshal(SETTINGS, None)
    with pytest.raises(TypeError):
        bind.unmarshal(SETTINGS, {})
    with pytest.raises(TypeError):
        bind.unmarshal("Ports: 1", Unsupported())

    # a nested dataclass that needs arguments
    with pytest.raises(exceptions.BindError) as info:
        bind.unmarshal("Port\n  Number: 3", Input())
    assert info.value.field == "port"
    assert bind.unmarshal("Other: 1", Input()).port is None
    i = bind.unmarshal("Port\n  Number: 3", Input(Port(1)))
    assert i.port.number == 3


def test_marshal():
    s = Settings(VideoSettings("Metal", 2, 1.5, True), AudioSettings("SDL", 0.8, False, 20))
    assert bind.marshal(s) == SETTINGS
    assert bind.unmarshal(bind.marshal(s), Settings()) == s


def test_marshal_optional():
    assert bind.marshal(Options()) == "Video\n  Shader: None\n"
    o = Options(name="Metal", count=0, video=VideoSettings(driver="SDL"), shader="crt")
    assert bind.marshal(o) == """\
Name: Metal
Count: 0
Video
  Driver: SDL
  Multiplier: 0
  Luminance: 0
  ColorBleed: false
  Shader: crt
"""
    with pytest.raises(TypeError):
        bind.marshal(None)
    with pytest.raises(TypeError):
        bind.marshal(42)


def test_read_write_node():
    d = bml.parse(SETTINGS)
    video = bind.read_node(d.get("Video"), VideoSettings())
    assert video.multiplier == 2
    # reading from a missing node changes nothing
    assert bind.read_node(d.get("Display"), VideoSettings()) == VideoSettings()

    node = bind.write_node(AudioSettings(driver="SDL", volume=1e-7))
    assert [(n.name, n.value) for n in node] == [
        ("Driver", "SDL"), ("Volume", "0.0000001"), ("Mute", "false"), ("Latency", "0"),
    ]
    node = bind.write_node(VideoSettings(), bml.Node("Video"))
    assert node.name == "Video" and len(node) == 4


def test_mapping():
    table = bind.mapping(Options)
    assert [(m.attr, m.name) for m in table] == [
        ("name", "Name"), ("count", "Count"), ("video", "Video"), ("shader", "Video/Shader"),
    ]
    assert bind.mapping(Options) is table



if __name__ == "__main__":
    for name, func in list(globals().items()):
        if name.startswith('test_'):
            func()
