import pytest

from matrix2d import __main__ as cli


@pytest.fixture(autouse=True)
def no_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logger", lambda *args, **kwargs: None)


def test_parse_args():
    args = cli.parse_args(["1", "0", "0", "1", "-5", "3", "--apply", "1", "2", "--apply", "0", "0"])
    assert args.values == [1, 0, 0, 1, -5, 3]
    assert args.apply == [[1, 2], [0, 0]]
    assert args.format == "text"
    assert args.invert is False
    assert args.decompose is None


def test_main_text(capsys):
    assert cli.main(["2", "0", "0", "2", "10", "20", "--precision", "1"]) == 0
    out = capsys.readouterr().out
    assert out == "a=2.0 b=0.0 c=0.0 d=2.0 e=10.0 f=20.0\n"


def test_main_invert_apply(capsys):
    assert cli.main(["2", "0", "0", "2", "10", "20", "--invert", "--format", "css", "--apply", "10", "20"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["matrix(0.5,0,0,0.5,-5,-10)", "0.0000 0.0000"]


def test_main_decompose(capsys):
    assert cli.main(["0", "2", "-2", "0", "1", "1", "--decompose", "qr", "--format", "csv", "--precision", "2"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "0,2,-2,0,1,1",
        "translate=1.00,1.00",
        "rotation=1.57",
        "scale=2.00,2.00",
        "skew=0.00,0.00",
    ]


def test_main_not_invertible(capsys):
    assert cli.main(["1", "2", "2", "4", "0", "0", "--invert"]) == 1
    assert capsys.readouterr().out == ""


def test_main_negative_precision(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["1", "0", "0", "1", "0", "0", "--precision", "-1"])
    assert exc_info.value.code == 2
    assert "must not be negative" in capsys.readouterr().err


def test_main_version(capsys):
    with pytest.raises(SystemExit):
        cli.main(["--version"])
    assert capsys.readouterr().out.startswith("matrix2d ")
