import pytest

from bitsquat.cli import main


def test_prints_valid_domains(capsys):
    assert main(["ab.co"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["ab.co", "qb.co", "ib.co", "eb.co", "cb.co", "ar.co", "aj.co", "af.co", "ac.co", "ab.co"]


def test_verbose_prints_bitstrings(capsys):
    assert main(["--verbose", "https://ab.co"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Target Domain: https://ab.co"
    assert out[1] == "Domain Name: ab\tDomain extension: co"
    assert out[2] == "ab:\t0110000101100010"
    assert out[3] == "co:\t0110001101101111"
    assert out[4] == "ab.co"


def test_extension_too_and_strict(capsys):
    assert main(["-e", "--strict", "ab.co"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "ab.co" not in out
    assert "qb.co" in out
    assert "ab.go" in out


def test_csv_output(capsys):
    assert main(["-f", "csv", "ab.co"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "domain,index,domain_variant,extension_variant"
    assert out[1] == "ab.co,0,0,"


def test_split_failure(capsys):
    assert main(["localhost"]) == 1
    captured = capsys.readouterr()
    assert captured.err.strip() == "Failed to split URL: localhost into domain name and extension"
    assert captured.out == ""


def test_missing_url_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
