import pytest
from PIL import Image

from asciiref import cli
from asciiref.cli import main
from asciiref.render import EMPTY_MESSAGE


def test_no_terms_prints_grouped_table(capsys):
    assert main(["-w", "80"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Control Characters (00-1F)\n")
    assert "Lowercase Letters (61-7A)" in out
    assert "\033[" not in out


def test_search_prints_matches(capsys):
    assert main(["-w", "80", "bell"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("07    7  BEL   Bell")
    assert out.endswith(r"\a ^G")
    assert len(out.split("\n")) == 1


def test_multiple_terms(capsys):
    assert main(["-w", "80", "tab", "vertical"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("0B   11  VT")


def test_no_matches(capsys):
    assert main(["bel", "tab"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert EMPTY_MESSAGE in captured.err


def test_forced_colour(capsys):
    assert main(["--colour"]) == 0
    assert "\033[1m" in capsys.readouterr().out


def test_writes_chart(tmp_path, capsys):
    path = tmp_path / "chart.png"
    assert main(["--chart", str(path), "digit"]) == 0
    with Image.open(path) as image:
        assert image.mode == "L"
        assert image.width > 0
    assert "Digit Zero" in capsys.readouterr().out


def test_chart_with_missing_font(tmp_path, capsys):
    path = tmp_path / "chart.png"
    assert main(["--chart", str(path), "--font", str(tmp_path / "missing.ttf")]) == 2
    assert "Cannot load font" in capsys.readouterr().err
    assert not path.exists()


def test_chart_into_missing_directory(tmp_path, capsys):
    path = tmp_path / "nodir" / "chart.png"
    assert main(["--chart", str(path), "bel"]) == 2
    err = capsys.readouterr().err
    assert f"Cannot write chart {path}" in err
    assert "Cannot load font" not in err


def test_chart_with_unknown_extension(tmp_path, capsys):
    path = tmp_path / "chart.xyz"
    assert main(["--chart", str(path), "bel"]) == 2
    assert "Cannot write chart" in capsys.readouterr().err
    assert not path.exists()


def test_automatic_colour_on_terminal(monkeypatch, capsys):
    monkeypatch.setattr(cli, "supports_colour", lambda: True)
    assert main([]) == 0
    assert "\033[1m" in capsys.readouterr().out


def test_no_colour_flag_overrides_terminal(monkeypatch, capsys):
    monkeypatch.setattr(cli, "supports_colour", lambda: True)
    assert main(["--no-colour"]) == 0
    assert "\033[1m" not in capsys.readouterr().out


def test_no_color_environment(monkeypatch, capsys):
    monkeypatch.setenv("NO_COLOR", "1")
    assert main([]) == 0
    assert "\033[" not in capsys.readouterr().out


@pytest.mark.parametrize("width", ["0", "-5"])
def test_rejects_non_positive_width(width, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-w", width, "bel"])
    assert exc.value.code == 2
    assert "width must be at least 1" in capsys.readouterr().err
