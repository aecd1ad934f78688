"""Tests for report assembly and rendering."""

import io
import json
import termios

import pytest
from rich.console import Console

from termflags.report import FIELD_ORDER, build_report, render_json, render_table, render_text
from termflags.types import TerminalAttributes

LABELS = ["c_iflag", "c_oflag", "c_cflag", "c_lflag", "c_cc", "c_ispeed", "c_ospeed"]


def _attrs(**overrides):
    values = dict(
        iflag=termios.ICRNL | termios.IXON,
        oflag=termios.OPOST,
        cflag=termios.CREAD,
        lflag=termios.ECHO | termios.ICANON | termios.ISIG,
        ispeed=termios.B9600,
        ospeed=termios.B38400,
        cc=(3, 28, 127, 21, 4, 0, 1, 0),
    )
    values.update(overrides)
    return TerminalAttributes(**values)


def describe_build_report():
    def decodes_fields_in_fixed_order(expect):
        report = build_report(_attrs())
        expect([line.label for line in report.lines]) == LABELS
        expect([str(f) for f in FIELD_ORDER]) == LABELS

    def decodes_mode_fields(expect):
        report = build_report(_attrs())
        expect(report["c_iflag"]) == "ICRNL|IXON"
        expect(report["c_oflag"]) == "OPOST"
        expect(report["c_lflag"]) == "ECHO|ICANON|ISIG"

    def joins_control_characters(expect):
        expect(build_report(_attrs())["c_cc"]) == "3,28,127,21,4,0,1,0"

    def strips_speed_prefix(expect):
        report = build_report(_attrs())
        expect(report["c_ispeed"]) == "9600"
        expect(report["c_ospeed"]) == "38400"

    def keeps_unknown_speed_numeric(expect):
        expect(build_report(_attrs(ispeed=12345))["c_ispeed"]) == "12345"

    def keeps_raw_values(expect):
        report = build_report(_attrs())
        expect(report.lines[0].raw) == termios.ICRNL | termios.IXON
        expect(report.lines[4].raw) == None

    def empty_mask_has_empty_value(expect):
        expect(build_report(_attrs(oflag=0))["c_oflag"]) == ""

    @pytest.mark.skipif(not hasattr(termios, "CBAUD"), reason="speed not stored in c_cflag")
    def names_embedded_speed_last(expect):
        cflag = termios.CREAD | termios.CS8 | termios.B38400
        expect(build_report(_attrs(cflag=cflag))["c_cflag"]) == "CREAD|CSIZE|B38400"


def describe_render_text():
    def prints_label_tab_value_lines(expect):
        text = render_text(build_report(_attrs()))
        lines = text.split("\n")
        expect(lines[-1]) == ""
        expect(len(lines[:-1])) == 7
        for label, line in zip(LABELS, lines):
            expect(line.split("\t")[0]) == label
            expect(line.count("\t")) == 1
        expect(lines[3]) == "c_lflag\tECHO|ICANON|ISIG"
        expect(lines[5]) == "c_ispeed\t9600"


def describe_render_json():
    def serialises_lines(expect):
        data = json.loads(render_json(build_report(_attrs())))
        expect([line["label"] for line in data["lines"]]) == LABELS
        expect(data["lines"][3]["value"]) == "ECHO|ICANON|ISIG"
        expect(data["lines"][3]["raw"]) == termios.ECHO | termios.ICANON | termios.ISIG


def describe_render_table():
    def prints_every_field(expect):
        buf = io.StringIO()
        render_table(build_report(_attrs()), Console(file=buf, width=200))
        output = buf.getvalue()
        for label in LABELS:
            expect(label in output) == True
        expect("ECHO|ICANON|ISIG" in output) == True
