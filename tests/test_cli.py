"""
Tests for the envstruct command line.
"""

import json
import logging

import pytest

from envstruct import __version__
from envstruct.ast.parser import ASTParser
from envstruct.cli import EXIT_ERROR, EXIT_NOT_FOUND, EXIT_OK, main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("envstruct")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestInspectCommand:
    """Test `envstruct inspect`."""

    def test_prints_json(self, sample_go_file, capsys):
        assert main(["inspect", str(sample_go_file), "Config"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "Config"
        assert data["package"] == "settings"
        assert data["fields"][0]["env_tag"] == "HOST_NAME"
        assert data["fields"][1] == {
            "name": "Port",
            "type": "int",
            "env_tag": "PORT",
            "is_pointer": True,
            "is_array": False,
            "doc": "",
        }

    def test_compact_output(self, sample_go_file, capsys):
        assert main(["inspect", str(sample_go_file), "Base", "--indent", "0"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.count("\n") == 1
        assert json.loads(out)["fields"][0]["env_tag"] == "BASE_ID"

    def test_not_found_lists_available(self, sample_go_file, capsys):
        assert main(["inspect", str(sample_go_file), "Missing"]) == EXIT_NOT_FOUND
        err = capsys.readouterr().err
        assert "struct Missing not found" in err
        assert "Config, Base" in err

    def test_empty_struct_reported(self, write_go, capsys):
        path = write_go("package p\n\ntype Config struct{}\n")
        assert main(["inspect", str(path), "Config"]) == EXIT_NOT_FOUND
        assert "has no fields" in capsys.readouterr().err

    def test_missing_file(self, temp_dir, capsys):
        assert main(["inspect", str(temp_dir / "nope.go"), "Config"]) == EXIT_ERROR
        assert "cannot read" in capsys.readouterr().err

    def test_syntax_error(self, write_go, capsys):
        path = write_go("package p\n\ntype Config struct {\n")
        assert main(["inspect", str(path), "Config"]) == EXIT_ERROR
        assert "error:" in capsys.readouterr().err

    def test_not_found_parses_file_once(self, sample_go_file, monkeypatch, capsys):
        calls = []
        original = ASTParser.parse_file

        def counting_parse_file(self, path):
            calls.append(path)
            return original(self, path)

        monkeypatch.setattr(ASTParser, "parse_file", counting_parse_file)
        assert main(["inspect", str(sample_go_file), "Missing"]) == EXIT_NOT_FOUND
        assert len(calls) == 1
        assert "Config, Base" in capsys.readouterr().err

    def test_unsupported_extension(self, write_go, capsys):
        path = write_go("package p\n\ntype Config struct { A int }\n", name="config.txt")
        assert main(["inspect", str(path), "Config"]) == EXIT_ERROR
        assert "unsupported file type" in capsys.readouterr().err

    def test_invalid_config_file(self, sample_go_file, temp_dir, monkeypatch, capsys):
        config_path = temp_dir / "config.yaml"
        config_path.write_text("debug: [\n")
        monkeypatch.setenv("ENVSTRUCT_CONFIG", str(config_path))
        assert main(["inspect", str(sample_go_file), "Config"]) == EXIT_ERROR
        assert "Invalid YAML configuration" in capsys.readouterr().err

    def test_debug_flag(self, sample_go_file):
        assert main(["inspect", str(sample_go_file), "Config", "--debug"]) == EXIT_OK
        assert logging.getLogger("envstruct").level == logging.DEBUG


class TestArguments:
    """Test argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out
