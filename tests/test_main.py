import pytest

from asr_text_utils.main import main


def test_parse_floats(capsys):
    assert main(["parse-floats", "1,2,3"]) == 0
    assert capsys.readouterr().out.strip() == "1.0 2.0 3.0"


def test_parse_floats_failure():
    assert main(["parse-floats", "1,x"]) == 1


def test_parse_floats_options(capsys):
    assert main(["parse-floats", "0.5;;inf", "--delim", ";", "--omit-empty", "--dtype", "float32"]) == 0
    assert capsys.readouterr().out.strip() == "0.5 inf"


def test_merge(capsys):
    assert main(["merge", "ö", "f", "f", "n", "e", "n", " ", "jetzt"]) == 0
    assert capsys.readouterr().out.strip() == "öffnen jetzt"


def test_merge_with_reference(capsys):
    assert main(["merge", "h", "i", ",", "--reference", "hi ,"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "hi ,"
    assert out[1] == "WER: 0.000000"
    assert out[2] == "Span F1: 1.000000"


def test_merge_with_reference_oversplit(capsys):
    assert main(["merge", "o", "ä", "ffnen", "--reference", "oäffnen"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "oä ffnen"
    assert out[1] == "WER: 2.000000"
    assert out[2] == "Span F1: 0.000000"


@pytest.mark.parametrize("text,expected", [
    ("-1.5,2", "-1.5 2.0"),
    ("-1.5", "-1.5"),
    ("-inf", "-inf"),
    ("-INFINITY,1", "-inf 1.0"),
])
def test_parse_floats_negative_first(capsys, text, expected):
    assert main(["parse-floats", text]) == 0
    assert capsys.readouterr().out.strip() == expected


def test_parse_floats_negative_first_with_options(capsys):
    assert main(["parse-floats", "-1;-2", "--delim", ";", "--dtype", "float32"]) == 0
    assert capsys.readouterr().out.strip() == "-1.0 -2.0"


def test_parse_floats_requires_text():
    with pytest.raises(SystemExit):
        main(["parse-floats"])


def test_merge_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["merge", "a", "--bogus"])
