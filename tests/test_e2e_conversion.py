"""
End-to-end conversion tests

Tests the full path: 8-bit WordStar bytes -> temporary 7-bit file ->
Converter -> UTF-8 output, for single files, directory trees and the
wsconvert command.
"""

import io
import sys
import tempfile
from pathlib import Path

import pytest

from wsconvert.__main__ import files_convert
from wsconvert.cli import main
from wsconvert.lib.files import ConversionError, directory_process, process, sources_glob
from wsconvert.lib.filters import Converter
from wsconvert.lib.mappings import bold_get
from wsconvert.models import ProgramState
from wsconvert.models.filters import EmphasisStyle


# ".he Report", bold word, deleted dot command, subscript with a high bit
# set on the digit, then ^Z and trailing garbage
DOCUMENT = b".he Report\r\nThe \x02bold\x02 word\r\n.op\r\nH\x16\xb2\x16O\r\n\x1agarbage\xff"

EXPECTED = "## Report\nThe " + "".join(bold_get(ch) for ch in "bold") + " word\nH" + chr(0x2082) + "O\n"


def unicode_converter() -> Converter:
    return Converter(style=EmphasisStyle.UNICODE, escape=True, reset_per_line=False)


class TestFileConversion:
    """Test single file conversion"""

    def test_document(self):
        """Complete document converts to the expected text"""
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "report.ws"
            target = Path(tmpdir) / "report.md"
            source.write_bytes(DOCUMENT)

            stats = process(str(source), str(target), unicode_converter())

            assert target.read_text(encoding="utf-8") == EXPECTED
            assert stats['lines_read'] == 4
            assert stats['lines_written'] == 3
            assert stats['bytes'] == DOCUMENT.index(b"\x1a")

    def test_existing_output_not_overwritten(self):
        """Output file must not exist already"""
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "in.ws"
            target = Path(tmpdir) / "out.md"
            source.write_bytes(b"text\r\n")
            target.write_text("keep me")

            with pytest.raises(ConversionError, match="already exists") as excinfo:
                process(str(source), str(target), unicode_converter())

            assert isinstance(excinfo.value.__cause__, FileExistsError)
            assert target.read_text() == "keep me"

    def test_missing_input(self):
        """Missing input fails before any output is created"""
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "out.md"

            with pytest.raises(ConversionError) as excinfo:
                process(str(Path(tmpdir) / "missing.ws"), str(target), unicode_converter())

            assert isinstance(excinfo.value.__cause__, OSError)
            assert not target.exists()

    def test_empty_input(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "empty.ws"
            target = Path(tmpdir) / "empty.md"
            source.write_bytes(b"")

            stats = process(str(source), str(target), unicode_converter())

            assert target.read_text() == ""
            assert stats['lines_written'] == 0

    def test_lf_output(self):
        """CR LF input lines are written with LF only"""
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "in.ws"
            target = Path(tmpdir) / "out.md"
            source.write_bytes(b"one\r\ntwo\r\n")

            process(str(source), str(target), unicode_converter())

            assert target.read_bytes() == b"one\ntwo\n"


class TestDirectoryConversion:
    """Test batch conversion of a directory tree"""

    def test_tree(self):
        """Matching files are converted with their relative paths kept"""
        with tempfile.TemporaryDirectory() as indir, tempfile.TemporaryDirectory() as outdir:
            inputdir, outputdir = Path(indir), Path(outdir)
            (inputdir / "sub").mkdir()
            (inputdir / "a.ws").write_bytes(b"\x02open bold\r\n")
            (inputdir / "sub" / "b.ws").write_bytes(b"plain\r\n")
            (inputdir / "notes.txt").write_bytes(b"ignored\r\n")

            results = directory_process(
                inputdir, outputdir, pattern="**/*.ws", suffix=".md",
                converter_factory=unicode_converter,
            )

            assert [Path(r['output']).relative_to(outputdir) for r in results] == [
                Path("a.md"),
                Path("sub/b.md"),
            ]
            assert not (outputdir / "notes.md").exists()
            # Emphasis left open in a.ws does not leak into b.ws
            assert (outputdir / "sub" / "b.md").read_text(encoding="utf-8") == "plain\n"

    def test_custom_suffix(self):
        with tempfile.TemporaryDirectory() as indir, tempfile.TemporaryDirectory() as outdir:
            (Path(indir) / "doc.ws").write_bytes(b"x\r\n")

            directory_process(Path(indir), Path(outdir), pattern="*.ws", suffix=".txt")

            assert (Path(outdir) / "doc.txt").read_text() == "x\n"

    def test_existing_output_fails(self):
        with tempfile.TemporaryDirectory() as indir, tempfile.TemporaryDirectory() as outdir:
            (Path(indir) / "doc.ws").write_bytes(b"x\r\n")
            (Path(outdir) / "doc.md").write_text("old")

            with pytest.raises(ConversionError):
                directory_process(Path(indir), Path(outdir), pattern="*.ws", suffix=".md")

    def test_given_sources_only(self):
        """Files found beforehand are converted without searching again"""
        with tempfile.TemporaryDirectory() as indir, tempfile.TemporaryDirectory() as outdir:
            inputdir, outputdir = Path(indir), Path(outdir)
            (inputdir / "a.ws").write_bytes(b"a\r\n")
            (inputdir / "b.ws").write_bytes(b"b\r\n")

            results = directory_process(
                inputdir, outputdir, pattern="*.ws", suffix=".md",
                sources=[inputdir / "a.ws"],
            )

            assert len(results) == 1
            assert (outputdir / "a.md").read_text() == "a\n"
            assert not (outputdir / "b.md").exists()

    def test_sources_glob(self):
        with tempfile.TemporaryDirectory() as indir:
            inputdir = Path(indir)
            (inputdir / "sub.ws").mkdir()
            (inputdir / "b.ws").write_bytes(b"")
            (inputdir / "a.ws").write_bytes(b"")

            assert sources_glob(inputdir, "*.ws") == [inputdir / "a.ws", inputdir / "b.ws"]

    def test_files_convert_uses_found_sources(self):
        """The batch stage converts exactly the files the search stage found"""
        with tempfile.TemporaryDirectory() as indir, tempfile.TemporaryDirectory() as outdir:
            inputdir, outputdir = Path(indir), Path(outdir)
            (inputdir / "a.ws").write_bytes(b"a\r\n")
            (inputdir / "b.ws").write_bytes(b"b\r\n")
            state = ProgramState(
                inputdir=inputdir,
                outputdir=outputdir,
                pattern="*.ws",
                outputSuffix=".md",
                sourceFiles=[inputdir / "b.ws"],
            )

            result = files_convert(state)

            assert [Path(r['output']).name for r in result.conversionResults] == ["b.md"]
            assert not (outputdir / "a.md").exists()


class TestCommand:
    """Test the wsconvert command"""

    def test_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "report.ws"
            target = Path(tmpdir) / "report.md"
            source.write_bytes(DOCUMENT)

            assert main(["-i", str(source), "-o", str(target), "--style", "unicode"]) == 0
            assert target.read_text(encoding="utf-8") == EXPECTED

    def test_stdout(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "in.ws"
            source.write_bytes(b"a\x02b\x02c\r\n")

            assert main(["-i", str(source), "--style", "markdown"]) == 0
            assert capsys.readouterr().out == "a**b**c\n"

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"x\x03y\n")))

        assert main([]) == 0
        assert capsys.readouterr().out == "x^Cy\n"

    def test_exclude_and_no_escape(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b".op\n\x03\n")))

        assert main(["-x", "dot-cmds", "--no-escape"]) == 0
        assert capsys.readouterr().out == ".op\n\x03\n"

    def test_missing_input_exit_code(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(SystemExit) as excinfo:
                main(["-i", str(Path(tmpdir) / "missing.ws"), "-o", str(Path(tmpdir) / "out.md")])

            assert excinfo.value.code == 1
            assert "Error:" in capsys.readouterr().err

    def test_unknown_stage_exit_code(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["-x", "bogus"])

        assert excinfo.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["-V"])

        assert excinfo.value.code == 0
        assert "wsconvert" in capsys.readouterr().out
