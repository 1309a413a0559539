"""Unit tests for the prettifier CLI."""

import pytest

from itinerary.prettify.cli import main


@pytest.fixture
def files(tmp_path, lookup_csv: str):
    input_path = tmp_path / "input.txt"
    output_path = tmp_path / "output.txt"
    lookup_path = tmp_path / "airport-lookup.csv"
    input_path.write_text("To *#JFK\\v\\vOn D(2024-03-05T10:00:00Z)\n", encoding="utf-8")
    lookup_path.write_text(lookup_csv, encoding="utf-8")
    return input_path, output_path, lookup_path


class TestMain:
    """Tests for the CLI entry point."""

    def test_writes_output(self, files) -> None:
        input_path, output_path, lookup_path = files
        main([str(input_path), str(output_path), str(lookup_path)])
        assert output_path.read_text(encoding="utf-8") == "To New York\n\nOn 05 Mar 2024\n"

    def test_crlf_input_normalized(self, files) -> None:
        input_path, output_path, lookup_path = files
        input_path.write_bytes(b"#LAX\r\nline two\r\n")
        main([str(input_path), str(output_path), str(lookup_path)])
        assert output_path.read_bytes() == b"Los Angeles International Airport\nline two\n"

    def test_non_utf8_input_replaced(self, files) -> None:
        input_path, output_path, lookup_path = files
        input_path.write_bytes(b"#JFK caf\xe9\n")
        main([str(input_path), str(output_path), str(lookup_path)])
        assert output_path.read_text(encoding="utf-8") == "John F Kennedy International Airport caf\ufffd\n"

    def test_non_utf8_lookup_malformed(self, files, capsys) -> None:
        input_path, output_path, lookup_path = files
        lookup_path.write_bytes(b"iata_code,icao_code,name,municipality\nBOG,SKBO,El Dorado,Bogot\xe1\n")
        with pytest.raises(SystemExit) as exc:
            main([str(input_path), str(output_path), str(lookup_path)])
        assert exc.value.code == 1
        assert "Airport lookup malformed" in capsys.readouterr().err

    def test_missing_input(self, files, capsys) -> None:
        input_path, output_path, lookup_path = files
        input_path.unlink()
        with pytest.raises(SystemExit) as exc:
            main([str(input_path), str(output_path), str(lookup_path)])
        assert exc.value.code == 1
        assert "Input not found" in capsys.readouterr().err
        assert not output_path.exists()

    def test_missing_lookup(self, files, capsys) -> None:
        input_path, output_path, lookup_path = files
        lookup_path.unlink()
        with pytest.raises(SystemExit) as exc:
            main([str(input_path), str(output_path), str(lookup_path)])
        assert exc.value.code == 1
        assert "Airport lookup not found" in capsys.readouterr().err

    def test_malformed_lookup(self, files, capsys) -> None:
        input_path, output_path, lookup_path = files
        lookup_path.write_text("iata_code,name,municipality\nJFK,Kennedy,New York\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(input_path), str(output_path), str(lookup_path)])
        assert exc.value.code == 1
        assert "Airport lookup malformed" in capsys.readouterr().err
        assert not output_path.exists()

    def test_stats_printed(self, files, capsys) -> None:
        input_path, output_path, lookup_path = files
        input_path.write_text("#JFK #QQQ\n", encoding="utf-8")
        main([str(input_path), str(output_path), str(lookup_path), "--stats"])
        out = capsys.readouterr().out
        assert "Resolved codes: 1" in out
        assert "QQQ" in out

    def test_help_exits_zero(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["-h"])
        assert exc.value.code == 0
        assert "itinerary-prettifier" in capsys.readouterr().out
