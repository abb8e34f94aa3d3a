#!/usr/bin/env python3
"""
linemark - Line-prefix text to HTML converter

Reads a plain text file and writes the HTML produced by classifying each
line by its prefix:

    "# "   -> <h1>     "## "  -> <h2>     "### " -> <h3>
    "---"  -> <hr>     anything else -> <p>

As with other ChRIS plugins, the app takes an input directory and an output
directory; the file to convert is named relative to the input directory.

Usage:
    linemark inputdir/ outputdir/ --inputFile notes.txt

Examples:
    # Basic conversion, writes outputdir/notes.html
    linemark . output/ --inputFile notes.txt

    # Explicit output name, bracket-less legacy tags
    linemark . output/ --inputFile notes.txt --outputFile page.html --legacyTags

    # Debug output, per-line classification
    linemark . output/ --inputFile notes.txt -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter, BooleanOptionalAction

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Converter, text_split, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


# Define CLI arguments
parser = ArgumentParser(
    description="linemark - convert line-prefixed plain text to HTML",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input text file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help="Output HTML file (relative to outputdir). Defaults to the input name with the output suffix",
)

parser.add_argument(
    "--legacyTags",
    action=BooleanOptionalAction,
    default=None,
    help="Emit tags without the closing angle bracket ('<h1' instead of '<h1>'); unset defers to LINEMARK_LEGACY_TAGS",
)

parser.add_argument(
    "--seed",
    default=None,
    type=str,
    help="Text placed at the start of the output before any converted line",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (-v verbose, -vv debug with per-line classification)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the input text file
            - htmlOutputFile: Path of the HTML file to write
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    output_name = state.outputFile or (Path(state.inputFile).stem + appsettings.output_suffix)
    state.htmlOutputFile = state.outputdir / output_name
    state.htmlOutputFile.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.htmlOutputFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the input file and split it into lines.

    Args:
        inputstate: Program state with inputSourceFile set

    Returns:
        ProgramState with added field:
            - sourceLines: List of lines without terminators

    Exits:
        1 if the file cannot be read or decoded
    """
    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        source = state.inputSourceFile.read_text(encoding=appsettings.input_encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    state.sourceLines = text_split(source)
    LOG(f"Read {len(state.sourceLines)} lines from {state.inputSourceFile.name}", level=2)
    return state


def html_convert(inputstate: ProgramState) -> ProgramState:
    """
    Convert source lines to HTML and write the output file.

    Input with no lines is written as appsettings.empty_placeholder rather
    than an empty conversion.

    Args:
        inputstate: Program state with sourceLines populated

    Returns:
        ProgramState with added fields:
            - convertedHtml: The HTML written
            - convertResult: Dict containing:
                - status: bool (conversion success)
                - output_file: str (path to written HTML)
                - line_count: int (number of lines converted)

    Exits:
        1 if sourceLines is missing or the output cannot be written
    """
    state = inputstate.copy()

    LOG("Converting lines to HTML...", level=1)

    if state.sourceLines is None:
        print("Error: No source lines available", file=sys.stderr)
        sys.exit(1)

    if state.sourceLines:
        converter = Converter(seed=state.seed, legacy_tags=state.legacyTags)
        state.convertedHtml = converter.convert(state.sourceLines)
    else:
        LOG("Input is empty, writing placeholder", level=2)
        state.convertedHtml = appsettings.empty_placeholder

    try:
        state.htmlOutputFile.write_text(state.convertedHtml, encoding="utf-8")
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)

    state.convertResult = {
        'status': True,
        'output_file': str(state.htmlOutputFile),
        'line_count': len(state.sourceLines),
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display conversion results.

    Exits:
        1 if convertResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.convertResult:
        print("Error: Conversion failed", file=sys.stderr)
        sys.exit(1)

    LOG("✓ Conversion successful!", level=1)
    LOG(f"  Output: {state.convertResult['output_file']}", level=1)
    LOG(f"  Lines:  {state.convertResult['line_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="linemark - line-prefix text to HTML converter",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - convert one text file to HTML.

    Orchestrates the pipeline:
        1. env_check: Validate paths
        2. source_read: Read the text file into lines
        3. html_convert: Convert and write HTML
        4. results_report: Display results to user

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, source_read, html_convert, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
