import io
import xml.etree.ElementTree as ET

from dcspec.report import ReportLog, escape_xml
from dcspec.xmlsub import Substitutions


def _log():
    buf = io.StringIO()
    return buf, ReportLog(buf, Substitutions(environ={}))


def test_escape_xml_entities():
    assert escape_xml("a<b>&'\"") == "a&lt;b&gt;&amp;&apos;&quot;"


def test_escape_round_trip_through_parser():
    text = "x < y && \"q\" > 'z'"
    parsed = ET.fromstring(f'<A v="{escape_xml(text)}">{escape_xml(text)}</A>')
    assert parsed.get("v") == text
    assert parsed.text == text


def test_empty_log():
    buf, log = _log()
    log.close()
    assert buf.getvalue() == "<DCAPP>\n</DCAPP>\n"


def test_window_with_variable_layout():
    buf, log = _log()
    window = ET.fromstring('<Window X="1"/>')
    variable = ET.fromstring('<Variable Type="Decimal">@a</Variable>')
    log.log_node_start(window)
    log.log_node_data(variable)
    log.log_node_end(window)
    log.close()
    assert buf.getvalue() == (
        "<DCAPP>\n"
        '    <Window X="1">\n'
        '        <Variable Type="Decimal">@a</Variable>\n'
        "    </Window>\n"
        "</DCAPP>\n"
    )


def test_output_parses_back():
    buf, log = _log()
    trick = ET.fromstring('<TrickIo Host="localhost" Port="7000" DisconnectAction="Reconnect"/>')
    from_trick = ET.fromstring("<FromTrick/>")
    tv = ET.fromstring('<TrickVariable Name="sim.x" Units="m">@x &amp; y</TrickVariable>')
    with log:
        log.log_node_start(trick)
        log.log_node_start(from_trick)
        log.log_node_data(tv)
        log.log_node_end(from_trick)
        log.log_node_end(trick)
    root = ET.fromstring(buf.getvalue())
    trick_out = root.find("TrickIo")
    assert trick_out.attrib == trick.attrib
    item = trick_out.find("FromTrick/TrickVariable")
    assert item.text == "@x & y"
    assert item.get("Name") == "sim.x"
    assert item.get("Units") == "m"


def test_empty_attributes_omitted_and_unlisted_ignored():
    buf, log = _log()
    panel = ET.fromstring('<Panel DisplayIndex="0" Extra="ignored"/>')
    log.log_node_start(panel)
    log.log_node_end(panel)
    log.close()
    out = ET.fromstring(buf.getvalue()).find("Panel")
    assert out.attrib == {"DisplayIndex": "0"}


def test_unrelated_nodes_write_nothing():
    buf, log = _log()
    before = buf.getvalue()
    log.log_node_start(ET.fromstring('<Circle Radius="2"/>'))
    log.log_node_data(ET.fromstring("<Circle/>"))
    assert buf.getvalue() == before


def test_logging_after_close_is_ignored():
    buf, log = _log()
    log.close()
    snapshot = buf.getvalue()
    log.log_node_data(ET.fromstring("<Function>f</Function>"))
    log.close()
    assert buf.getvalue() == snapshot
    assert log.closed is True