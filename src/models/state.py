"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field
import dataclasses


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the conversion pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the conversion progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile,
                   legacyTags, seed
        - env_check: inputSourceFile, htmlOutputFile, envOK
        - source_read: sourceLines
        - html_convert: convertedHtml, convertResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the source text file
        outputdir: Directory for the converted HTML file
        verbosity: Logging verbosity level (1-3)
        inputFile: Input text filename (relative to inputdir)
        outputFile: Optional output filename (relative to outputdir)
        legacyTags: Emit bracket-less tags; None defers to settings
        seed: Output document seed; None defers to settings
        envOK: Environment validation passed
        inputSourceFile: Resolved path to input text file
        htmlOutputFile: Resolved path of the HTML file to write
        sourceLines: Lines read from the input file
        convertedHtml: HTML produced by the converter
        convertResult: Conversion results (output_file, line_count, status)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: Optional[str] = field(default=None)
    legacyTags: Optional[bool] = field(default=None)
    seed: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    htmlOutputFile: Path = field(default=Path("/"))
    sourceLines: Optional[List[str]] = field(default=None)
    convertedHtml: Optional[str] = field(default=None)
    convertResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Unknown Namespace attributes (e.g. those added by the plugin
        framework) are ignored.

        Args:
            options: Parsed CLI arguments (inputFile, outputFile, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for conversion output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        # Explicit directories win over anything in the namespace
        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_read,
            html_convert,
            results_report
        )

    This is equivalent to:
        results_report(html_convert(source_read(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
