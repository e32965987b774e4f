import xml.etree.ElementTree as ET

import pytest

from dcspec.xmlsub import Substitutions


@pytest.fixture
def subs():
    return Substitutions(environ={"HOME_DIR": "/srv/display", "N": "3"})


def test_plain_text_unchanged(subs):
    assert subs.replace("no references here") == "no references here"


def test_argument_reference(subs):
    subs.add_argument("width", "640")
    assert subs.replace("w=#width;") == "w=640;"


def test_environment_reference(subs):
    assert subs.replace("$HOME_DIR/images") == "/srv/display/images"


def test_unknown_references_expand_to_nothing(subs):
    assert subs.replace("[#missing][$MISSING]") == "[][]"


def test_escaped_markers(subs):
    assert subs.replace(r"cost \$5 and \#1") == "cost $5 and #1"


def test_braced_reference(subs):
    subs.add_argument("size", "12")
    assert subs.replace("#{size}px") == "12px"


def test_nested_braced_reference(subs):
    subs.add_argument("item_3", "found")
    assert subs.replace("#{item_$N}") == "found"


def test_argument_wins_over_constant(subs):
    subs.process_constant(ET.fromstring('<Constant Name="mode">constant</Constant>'))
    assert subs.replace("#mode") == "constant"
    subs.add_argument("mode", "argument")
    assert subs.replace("#mode") == "argument"


def test_constant_content_is_substituted(subs):
    subs.add_argument("base", "10")
    subs.process_constant(ET.fromstring('<Constant Name="derived">#base</Constant>'))
    assert subs.replace("#derived") == "10"


def test_node_content(subs):
    subs.add_argument("name", "speed")
    assert subs.node_content(ET.fromstring("<String>#name</String>")) == "speed"
    assert subs.node_content(ET.fromstring("<String/>")) is None


def test_element_data_direct_attribute(subs):
    subs.add_argument("x", "7")
    node = ET.fromstring('<Rectangle X="#x"/>')
    assert subs.element_data(node, "X") == "7"
    assert subs.element_data(node, "Y") is None


def test_style_and_defaults_precedence(subs):
    subs.process_defaults(ET.fromstring('<Defaults><Rectangle Width="1" Height="1"/></Defaults>'))
    subs.process_style(ET.fromstring('<Style Name="big"><Rectangle Width="99"/></Style>'))
    styled = ET.fromstring('<Rectangle Style="big"/>')
    plain = ET.fromstring("<Rectangle/>")
    explicit = ET.fromstring('<Rectangle Style="big" Width="5"/>')
    assert subs.element_data(styled, "Width") == "99"
    assert subs.element_data(styled, "Height") == "1"
    assert subs.element_data(plain, "Width") == "1"
    assert subs.element_data(explicit, "Width") == "5"


def test_style_only_applies_to_matching_element(subs):
    subs.process_style(ET.fromstring('<Style Name="s"><Circle Radius="4"/></Style>'))
    assert subs.element_data(ET.fromstring('<Rectangle Style="s"/>'), "Radius") is None
    assert subs.element_data(ET.fromstring('<Circle Style="s"/>'), "Radius") == "4"


def test_later_defaults_take_precedence(subs):
    subs.process_defaults(ET.fromstring('<Defaults><Line Color="first"/></Defaults>'))
    subs.process_defaults(ET.fromstring('<Defaults><Line Color="second"/></Defaults>'))
    assert subs.element_data(ET.fromstring("<Line/>"), "Color") == "second"


def test_defaults_are_copied(subs):
    defaults = ET.fromstring('<Defaults><Line Color="a"/></Defaults>')
    subs.process_defaults(defaults)
    defaults[0].set("Color", "b")
    assert subs.element_data(ET.fromstring("<Line/>"), "Color") == "a"