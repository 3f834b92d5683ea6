"""Tests for the command line front-end."""

import sys

import pytest

from tonelab import __version__
from tonelab.main import main as tonelab_main
from tonelab.subcommands import accessible, contrast, convert, delta_e, palette, report
from tonelab.subcommands.command_registry import SUBCOMMANDS

pytestmark = pytest.mark.usefixtures("truecolor_env")


def run_tonelab(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["tonelab", *argv])
    with pytest.raises(SystemExit) as exc:
        tonelab_main()
    return exc.value.code


class TestParsers:
    def test_palette_defaults(self) -> None:
        args = palette.get_palette_parser().parse_args(["-H", "F2A30F"])
        assert args.hex == "#f2a30f"
        assert args.steps == 9

    def test_palette_steps_clamped(self) -> None:
        args = palette.get_palette_parser().parse_args(["-H", "fff", "-S", "500"])
        assert args.steps == 100

    def test_accessible_defaults(self) -> None:
        args = accessible.get_accessible_parser().parse_args(["-fg", "ff0", "-bg", "fff"])
        assert (args.foreground, args.background) == ("#ffff00", "#ffffff")
        assert args.ratio == 4.5
        assert args.iterations == 50

    def test_accessible_ratio_clamped(self) -> None:
        args = accessible.get_accessible_parser().parse_args(["-fg", "000", "-bg", "fff", "-R", "30"])
        assert args.ratio == 21.0

    def test_delta_e_collects_two_colors(self) -> None:
        args = delta_e.get_delta_e_parser().parse_args(["-H", "000", "-H", "fff", "-m", "CIE2000"])
        assert args.hex == ["#000000", "#ffffff"]
        assert args.method == "cie2000"

    def test_invalid_hex_exits_2(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            contrast.get_contrast_parser().parse_args(["-fg", "nothex", "-bg", "fff"])
        assert exc.value.code == 2
        assert "invalid hex color" in capsys.readouterr().err

    def test_convert_rejects_unknown_format(self) -> None:
        with pytest.raises(SystemExit) as exc:
            convert.get_convert_parser().parse_args(["-H", "fff", "-t", "cmyk"])
        assert exc.value.code == 2

    def test_registry_has_parser_for_every_command(self) -> None:
        for name, module in SUBCOMMANDS.items():
            getter = getattr(module, f"get_{name.replace('-', '_')}_parser")
            assert getter().prog == f"tonelab {name}"


class TestConvertCommand:
    def test_hex_to_rgb(self, capsys) -> None:
        convert.main(["-H", "F2A30F", "-t", "rgb"])
        assert "rgb(242, 163, 15)" in capsys.readouterr().out

    def test_hex_to_hsl(self, capsys) -> None:
        convert.main(["-H", "F2A30F", "-t", "hsl"])
        assert "hsl(39.12deg, 89.72%, 50.39%)" in capsys.readouterr().out

    def test_value_to_hex(self, capsys) -> None:
        convert.main(["-V", "rgb(242, 163, 15)", "-f", "rgb", "-t", "hex"])
        assert "#F2A30F" in capsys.readouterr().out

    def test_hsl_value_to_hex(self, capsys) -> None:
        convert.main(["-V", "0 100 50", "-f", "hsl", "-t", "hex"])
        assert "#FF0000" in capsys.readouterr().out

    def test_verbose_shows_source(self, capsys) -> None:
        convert.main(["-H", "000", "-t", "rgb", "-v"])
        out = capsys.readouterr().out
        assert "#000000" in out
        assert "rgb(0, 0, 0)" in out

    def test_missing_input(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            convert.main(["-t", "rgb"])
        assert exc.value.code == 2
        assert "required" in capsys.readouterr().err

    def test_value_without_from(self) -> None:
        with pytest.raises(SystemExit) as exc:
            convert.main(["-V", "1 2 3", "-t", "hex"])
        assert exc.value.code == 2


class TestCommands:
    def test_contrast(self, capsys) -> None:
        assert contrast.main(["-fg", "777777", "-bg", "FFFFFF"]) == 0
        out = capsys.readouterr().out
        assert "4.48:1" in out
        assert "FAIL" in out

    def test_contrast_large_text(self, capsys) -> None:
        contrast.main(["-fg", "777777", "-bg", "FFFFFF", "--large-text"])
        assert "AA  (>= 3)" in capsys.readouterr().out

    def test_accessible(self, capsys) -> None:
        accessible.main(["-fg", "FFFF00", "-bg", "FFFFFF"])
        captured = capsys.readouterr()
        assert "#7A7A00" in captured.out
        assert captured.err == ""

    def test_accessible_warns_when_not_converged(self, capsys) -> None:
        accessible.main(["-fg", "777777", "-bg", "808080", "-R", "21"])
        assert "no variant reached" in capsys.readouterr().err

    def test_palette(self, capsys) -> None:
        palette.main(["-H", "808080", "-S", "3"])
        out = capsys.readouterr().out
        assert "#F2F2F2" in out
        assert "#0D0D0D" in out
        assert "750" in out

    def test_delta_e(self, capsys) -> None:
        delta_e.main(["-H", "FFFFFF", "-H", "000000"])
        assert "distinct colors" in capsys.readouterr().out

    def test_delta_e_needs_two_colors(self) -> None:
        with pytest.raises(SystemExit) as exc:
            delta_e.main(["-H", "FFFFFF"])
        assert exc.value.code == 2

    def test_report(self, capsys) -> None:
        assert report.main([]) == 0
        out = capsys.readouterr().out
        assert "compliance 60%" in out
        assert "CRITICAL: primary-button has insufficient contrast" in out

    def test_report_strict(self, capsys) -> None:
        assert report.main(["--strict"]) == 1


class TestMainRouting:
    def test_routes_subcommand(self, monkeypatch, capsys) -> None:
        assert run_tonelab(monkeypatch, "contrast", "-fg", "000", "-bg", "fff") == 0
        assert "21.00:1" in capsys.readouterr().out

    def test_routes_hyphenated_command(self, monkeypatch, capsys) -> None:
        assert run_tonelab(monkeypatch, "delta-e", "-H", "000", "-H", "000") == 0
        assert "imperceptible" in capsys.readouterr().out

    def test_command_is_case_insensitive(self, monkeypatch) -> None:
        assert run_tonelab(monkeypatch, "PALETTE", "-H", "fff") == 0

    def test_strict_report_exit_code(self, monkeypatch) -> None:
        assert run_tonelab(monkeypatch, "report", "--strict") == 1

    def test_version(self, monkeypatch, capsys) -> None:
        assert run_tonelab(monkeypatch, "-v") == 0
        assert f"tonelab {__version__}" in capsys.readouterr().out

    def test_full_help(self, monkeypatch, capsys) -> None:
        assert run_tonelab(monkeypatch, "-hf") == 0
        out = capsys.readouterr().out
        for name in SUBCOMMANDS:
            assert f"tonelab {name}" in out

    def test_unknown_command(self, monkeypatch, capsys) -> None:
        assert run_tonelab(monkeypatch, "bogus") == 2
        assert "unrecognized command" in capsys.readouterr().err

    def test_no_arguments_prints_help(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "argv", ["tonelab"])
        tonelab_main()
        assert "usage: tonelab" in capsys.readouterr().out
