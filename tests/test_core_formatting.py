import json

from matrix2d.core import formatting


def test_format_number():
    assert formatting.format_number(0) == "0"
    assert formatting.format_number(-0.) == "0"
    assert formatting.format_number(2.0) == "2"
    assert formatting.format_number(-2.5) == "-2.5"
    assert formatting.format_number(0.1) == "0.1"
    assert formatting.format_number(1e-20) == "1e-20"
    assert formatting.format_number(float("nan")) == "nan"


def test_format_fixed():
    assert formatting.format_fixed([1, 0, 0, 1, 0, 0]) == "a=1.0000 b=0.0000 c=0.0000 d=1.0000 e=0.0000 f=0.0000"
    assert formatting.format_fixed([1, 2, 3, 4, 5.125, -6], 2) == "a=1.00 b=2.00 c=3.00 d=4.00 e=5.12 f=-6.00"
    assert formatting.format_fixed([1, 2, 3, 4, 5, 6], 0) == "a=1 b=2 c=3 d=4 e=5 f=6"


def test_format_csv():
    assert formatting.format_csv([1, 0, 0, 1, 0.5, -2]) == "1,0,0,1,0.5,-2\r\n"


def test_format_json():
    text = formatting.format_json([1., 2., 3., 4., 5.5, 6.])
    assert json.loads(text) == {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5.5, "f": 6}
    assert " " not in text


def test_format_css():
    assert formatting.format_css([1, 0, 0, 1, 0, 0]) == "matrix(1,0,0,1,0,0)"
    assert formatting.format_css([0.5, 0.25, -1, 2, 10, 20]) == "matrix(0.5,0.25,-1,2,10,20)"


def test_format_css3d():
    assert formatting.format_css3d([1, 2, 3, 4, 5, 6]) == "matrix3d(1,2,0,0,3,4,0,0,0,0,1,0,5,6,0,1)"
