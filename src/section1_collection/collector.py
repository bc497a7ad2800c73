"""
Collector: Produces Report objects from inxi or from saved files.

This module ties together the inxi invocation and the parsers and
provides a clean interface for fetching a report in a given mode.
"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional, Type

from .config import CollectorConfig
from .parsers.base_parser import BaseParser
from .parsers.inxi_parser import InxiTextParser
from .parsers.json_parser import JsonReportParser
from .schemas import Report, ReportFetchError, VerbosityMode

logger = logging.getLogger(__name__)

# (args, timeout_seconds) -> completed process with bytes stdout/stderr
CommandRunner = Callable[[list[str], int], subprocess.CompletedProcess]


def run_command(args: list[str], timeout: int) -> subprocess.CompletedProcess:
    """Run a command without a shell and capture its output."""
    return subprocess.run(args, capture_output=True, timeout=timeout, check=False)


class Collector:
    """
    Main entry point for obtaining system reports.

    Either runs inxi live (`fetch`) or loads a previously saved report
    (`load`). Only fixed argument lists derived from the verbosity mode
    are ever passed to the command.

    Args:
        binary: inxi executable name or path
        timeout_seconds: Maximum time to wait for inxi
        runner: Command runner, injectable for tests
        output_dir: Optional directory to save reports into
    """

    # Map file extensions to parser classes
    PARSER_MAP: dict[str, Type[BaseParser]] = {
        '.txt': InxiTextParser,
        '.log': InxiTextParser,
        '.inxi': InxiTextParser,
        '.json': JsonReportParser,
    }

    def __init__(
        self,
        binary: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
        runner: Optional[CommandRunner] = None,
        output_dir: Optional[str | Path] = None,
    ):
        self.binary = binary or CollectorConfig.INXI_BINARY
        self.timeout_seconds = timeout_seconds or CollectorConfig.COMMAND_TIMEOUT_SECONDS
        self.runner = runner or run_command
        self.output_dir = Path(output_dir) if output_dir else None
        if self.output_dir:
            self.output_dir.mkdir(parents=True, exist_ok=True)

    def get_parser(self, file_path: str | Path, mode: str = VerbosityMode.BASIC.value) -> BaseParser:
        """
        Get the appropriate parser for a saved report based on its extension.

        Raises:
            ValueError: If no parser is available for the file type
            FileNotFoundError: If the file does not exist
        """
        file_path = Path(file_path)
        extension = file_path.suffix.lower()

        if extension not in self.PARSER_MAP:
            supported = ', '.join(self.PARSER_MAP.keys())
            raise ValueError(
                f"No parser available for '{extension}' files. "
                f"Supported formats: {supported}"
            )

        parser_class = self.PARSER_MAP[extension]
        return parser_class.from_file(file_path, mode=mode)

    def fetch(self, mode: str | VerbosityMode = VerbosityMode.BASIC) -> Report:
        """
        Run inxi in the given mode and parse its output.

        Args:
            mode: Verbosity mode (validated against the known modes)

        Returns:
            Parsed Report

        Raises:
            InvalidModeError: If the mode is unknown
            ReportFetchError: If inxi is missing, times out, or exits non-zero
        """
        mode = VerbosityMode.parse(getattr(mode, "value", mode))
        args = [self.binary, *mode.inxi_args]
        logger.info("running inxi mode=%s args=%s", mode.value, mode.inxi_args)

        try:
            completed = self.runner(args, self.timeout_seconds)
        except FileNotFoundError as e:
            raise ReportFetchError(mode.value, f"required binary '{self.binary}' missing from PATH") from e
        except subprocess.TimeoutExpired as e:
            raise ReportFetchError(mode.value, f"timed out after {self.timeout_seconds}s") from e
        except OSError as e:
            raise ReportFetchError(mode.value, str(e)) from e

        if completed.returncode != 0:
            stderr = _decode(completed.stderr).strip() or f"exit status {completed.returncode}"
            logger.warning("inxi failed mode=%s: %s", mode.value, stderr)
            raise ReportFetchError(mode.value, stderr)

        parser = InxiTextParser(_decode(completed.stdout), source_name=self.binary, mode=mode.value)
        report = parser.run()
        logger.debug(
            "parsed inxi report: %d sections, %d entries", len(report.sections), report.entry_count
        )
        return report

    def load(self, file_path: str | Path, mode: Optional[str] = None) -> Report:
        """
        Load a saved report file.

        Args:
            file_path: Path to a .txt/.log/.inxi or .json report
            mode: Mode to record on the report (JSON files carry their own)

        Returns:
            Parsed Report
        """
        mode_value = getattr(mode, "value", mode) or CollectorConfig.DEFAULT_MODE
        parser = self.get_parser(file_path, mode=mode_value)
        report = parser.run()

        for warning in parser.warnings:
            logger.warning("%s: %s", Path(file_path).name, warning)
        for error in parser.errors:
            logger.error("%s: %s", Path(file_path).name, error)

        return report

    def save_report(self, report: Report, output_dir: Optional[str | Path] = None) -> Path:
        """
        Save a report as JSON.

        Raises:
            ValueError: If no output directory is configured or given
        """
        target_dir = Path(output_dir) if output_dir else self.output_dir
        if not target_dir:
            raise ValueError("No output directory configured. Pass output_dir to constructor.")
        target_dir.mkdir(parents=True, exist_ok=True)

        stamp = report.timestamp.strftime("%Y%m%d_%H%M%S")
        output_file = target_dir / f"{CollectorConfig.DOWNLOAD_FILENAME_PREFIX}-{report.mode}-{stamp}.json"

        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(report.model_dump_json(indent=2))

        return output_file


def _decode(data) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return str(data)


def fetch_report(mode: str | VerbosityMode = VerbosityMode.BASIC) -> Report:
    """
    Convenience function to fetch a live report.

    Example:
        >>> report = fetch_report("full")
        >>> print(report.section_titles())
    """
    return Collector().fetch(mode)


def load_report(file_path: str | Path, mode: Optional[str] = None) -> Report:
    """Convenience function to load a saved report file."""
    return Collector().load(file_path, mode=mode)
