"""
File and stream plumbing for WordStar conversion

A conversion runs in two passes joined by an anonymous temporary file:

1. 8-bit input bytes -> 7-bit ASCII bytes (asciify)
2. 7-bit lines -> Unicode lines (Converter)

Input comes from a named file or stdin, output goes to a new named file or
stdout. An existing output file is never overwritten.
"""

import io
import sys
import tempfile
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO, Callable, Dict, Iterable, List, Optional, TextIO

from ..config import appsettings
from . import asciify
from .filters import Converter
from .log import LOG


class ConversionError(Exception):
    """Raised when input cannot be read or output cannot be written"""

    def __init__(self, path: str, message: Optional[str] = None, *, cause: Optional[Exception] = None):
        self.path = path
        if message is None:
            message = f"Conversion failed for {path}"
        super().__init__(message)
        self.__cause__ = cause


def reader_open(stack: ExitStack, infile: Optional[str]) -> BinaryIO:
    """Open the named input file, or stdin if infile is empty"""
    if not infile:
        return sys.stdin.buffer
    try:
        return stack.enter_context(open(infile, "rb"))
    except OSError as e:
        raise ConversionError(infile, f"Cannot read input file {infile}: {e}", cause=e)


def writer_open(stack: ExitStack, outfile: Optional[str]) -> TextIO:
    """
    Open the named output file for UTF-8 text, or stdout if outfile is empty

    Raises:
        ConversionError: If the output file already exists or cannot be created
    """
    if not outfile:
        writer = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", newline="\n", write_through=True)
        # detach instead of close so stdout stays usable
        stack.callback(writer.detach)
        return writer
    try:
        return stack.enter_context(open(outfile, "x", encoding="utf-8", newline="\n"))
    except FileExistsError as e:
        raise ConversionError(outfile, f"Output file already exists: {outfile}", cause=e)
    except OSError as e:
        raise ConversionError(outfile, f"Cannot create output file {outfile}: {e}", cause=e)


def process(
    infile: Optional[str],
    outfile: Optional[str],
    converter: Optional[Converter] = None,
    chunk_size: Optional[int] = None,
) -> Dict[str, int]:
    """
    Convert a WordStar file (or stdin) to a Unicode text file (or stdout)

    Args:
        infile: Path to input file, or "" / None for stdin
        outfile: Path to output file, or "" / None for stdout
        converter: Converter to use (default: new Converter())
        chunk_size: Bytes per read (default: AppSettings.chunk_size)

    Returns:
        dict with byte and line statistics:
            - bytes: 7-bit bytes produced by the first pass
            - lines_read / lines_written: line counts of the second pass

    Raises:
        ConversionError: On any I/O failure (missing input, existing output,
                         read or write error)
    """
    converter = converter or Converter()
    chunk_size = chunk_size or appsettings.chunk_size
    source = infile or "<stdin>"

    with ExitStack() as stack:
        reader = reader_open(stack, infile)
        writer = writer_open(stack, outfile)
        try:
            intermediate = stack.enter_context(tempfile.TemporaryFile())
            byte_count = asciify.file_convert(reader, intermediate, chunk_size)
            intermediate.seek(0)
            text = stack.enter_context(
                io.TextIOWrapper(intermediate, encoding="ascii", newline="\n")
            )
            converter.stream_transform(text, writer)
        except OSError as e:
            raise ConversionError(source, f"I/O error converting {source}: {e}", cause=e)

    LOG(f"{source}: {converter.lines_read} lines read, {converter.lines_written} written", level=2)
    return {
        'bytes': byte_count,
        'lines_read': converter.lines_read,
        'lines_written': converter.lines_written,
    }


def sources_glob(inputdir: Path, pattern: Optional[str] = None) -> List[Path]:
    """Sorted files under inputdir matching pattern (default: AppSettings.input_pattern)"""
    return sorted(
        path for path in inputdir.glob(pattern or appsettings.input_pattern) if path.is_file()
    )


def directory_process(
    inputdir: Path,
    outputdir: Path,
    pattern: Optional[str] = None,
    suffix: Optional[str] = None,
    converter_factory: Callable[[], Converter] = Converter,
    sources: Optional[Iterable[Path]] = None,
) -> List[Dict]:
    """
    Convert every matching file under inputdir into outputdir

    Relative paths are kept and suffixes replaced. Each file gets its own
    Converter, so wrapper state never leaks between files.

    Args:
        inputdir: Root of the input tree
        outputdir: Root of the output tree (created as needed)
        pattern: Glob relative to inputdir (default: AppSettings.input_pattern)
        suffix: Output file suffix (default: AppSettings.output_suffix)
        converter_factory: Callable returning a fresh Converter
        sources: Files already found under inputdir; pattern is not used
                 when given

    Returns:
        One dict per converted file: input, output and the process() stats

    Raises:
        ConversionError: On the first file that fails
    """
    if sources is None:
        sources = sources_glob(inputdir, pattern)

    results = []
    for source in sources:
        target = appsettings.outputPath_make(source, inputdir, outputdir, suffix)
        target.parent.mkdir(parents=True, exist_ok=True)
        LOG(f"Converting {source} -> {target}", level=2)

        converter = converter_factory()
        stats = process(str(source), str(target), converter)
        converter.summary_log(level=2)
        results.append({'input': str(source), 'output': str(target), **stats})
    return results
