"""Tests for ThemeGenerationService."""

from pathlib import Path

import pytest

from tokenpress.exceptions import (
    InvalidTokenJSONError,
    InvalidTokenStructureError,
    OutputExistsError,
    TokenFileNotFoundError,
)
from tokenpress.services.generation import GenerationResult, ThemeGenerationService


@pytest.fixture
def service(settings) -> ThemeGenerationService:
    return ThemeGenerationService(settings=settings)


class TestGenerate:
    def test_writes_preset_module(self, service, token_file: Path, tmp_path: Path):
        output = tmp_path / "out" / "theme-tokens.ts"

        result = service.generate(token_file, output)

        assert isinstance(result, GenerationResult)
        assert output.exists()
        content = output.read_text(encoding="utf-8")
        assert content == result.content
        assert content.startswith("// Generated from tokens.json\n")
        assert "transitionDuration: '0.2s'" in content
        assert "focusBorderColor: '{primary.color}'" in content
        assert result.bytes_written == len(content.encode("utf-8"))

    def test_creates_parent_directories(self, service, token_file: Path, tmp_path: Path):
        output = tmp_path / "nested" / "dirs" / "theme.ts"

        service.generate(token_file, output)

        assert output.exists()

    def test_refuses_to_overwrite_without_force(
        self, service, token_file: Path, tmp_path: Path
    ):
        output = tmp_path / "theme.ts"
        output.write_text("old", encoding="utf-8")

        with pytest.raises(OutputExistsError):
            service.generate(token_file, output)

        assert output.read_text(encoding="utf-8") == "old"

    def test_overwrites_with_force(self, service, token_file: Path, tmp_path: Path):
        output = tmp_path / "theme.ts"
        output.write_text("old", encoding="utf-8")

        result = service.generate(token_file, output, force=True)

        assert output.read_text(encoding="utf-8") == result.content

    def test_same_input_same_output(self, service, token_file: Path, tmp_path: Path):
        first = service.generate(token_file, tmp_path / "a.ts")
        second = service.generate(token_file, tmp_path / "b.ts")

        assert first.content == second.content

    def test_invalid_structure_is_not_written(
        self, service, invalid_token_file: Path, tmp_path: Path
    ):
        output = tmp_path / "theme.ts"

        with pytest.raises(InvalidTokenStructureError) as exc_info:
            service.generate(invalid_token_file, output)

        assert exc_info.value.path == ("aura/semantic", "padding", "x")
        assert not output.exists()

    def test_missing_input(self, service, tmp_path: Path):
        with pytest.raises(TokenFileNotFoundError):
            service.generate(tmp_path / "missing.json", tmp_path / "theme.ts")

    def test_invalid_json(self, service, tmp_path: Path):
        path = tmp_path / "tokens.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(InvalidTokenJSONError):
            service.generate(path, tmp_path / "theme.ts")


class TestValidateFile:
    def test_valid_document(self, service, token_file: Path):
        assert service.validate_file(token_file)

    def test_invalid_document(self, service, invalid_token_file: Path):
        result = service.validate_file(invalid_token_file)

        assert not result
        assert result.location == "aura/semantic.padding.x"


class TestBuildTheme:
    def test_builds_theme(self, service, token_file: Path):
        theme = service.build_theme(token_file)

        assert theme.primitive["borderRadius"] == {"md": "6px"}
        assert theme.color_scheme.dark == {"surface": {"0": "#09090b"}}
