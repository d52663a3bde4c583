"""
Hack Assembler - Configuration
==============================

Settings for the file-facing side of the assembler: which suffix a source
file must carry, which suffix the output file gets, and how chatty logging
is. Configuration can come from:
- Default values (defined here)
- Environment variables

The machine's own constants (word width, predefined symbols, first
variable address) are fixed by the architecture. They live in
``hackasm.cpu.hack`` and are not configurable.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class AssemblerConfig:
    """
    Configuration for the assembler's file handling and logging.

    Attributes:
        input_suffix: Suffix a source file must have (default: ".asm")
        output_suffix: Suffix of the generated machine-code file (default: ".hack")
        log_level: Logging level name used by the CLI (default: "WARNING")
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # FILE SUFFIXES
    # ═══════════════════════════════════════════════════════════════════════════

    input_suffix: str = ".asm"
    output_suffix: str = ".hack"

    # ═══════════════════════════════════════════════════════════════════════════
    # DIAGNOSTICS
    # ═══════════════════════════════════════════════════════════════════════════

    log_level: str = "WARNING"

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create AssemblerConfig from environment variables.

        Environment variables (all optional):
            HACKASM_INPUT_SUFFIX: Required source suffix (e.g., ".asm")
            HACKASM_OUTPUT_SUFFIX: Output suffix (e.g., ".hack")
            HACKASM_LOG_LEVEL: Logging level name (e.g., "DEBUG")

        Returns:
            AssemblerConfig with values from environment variables
        """
        config = cls()

        if input_suffix := os.environ.get("HACKASM_INPUT_SUFFIX"):
            config.input_suffix = input_suffix

        if output_suffix := os.environ.get("HACKASM_OUTPUT_SUFFIX"):
            config.output_suffix = output_suffix

        if log_level := os.environ.get("HACKASM_LOG_LEVEL"):
            # Ignore names the logging module does not know
            if isinstance(logging.getLevelName(log_level.upper()), int):
                config.log_level = log_level.upper()

        return config

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPER METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def has_input_suffix(self, path: str | Path) -> bool:
        """Check whether a path names an assembly source file."""
        return str(path).endswith(self.input_suffix)

    def derive_output_path(self, source: str | Path) -> Path:
        """
        Derive the output path for a source file.

        The input suffix is replaced by the output suffix, so
        ``prog/Max.asm`` becomes ``prog/Max.hack``. A path without the
        input suffix simply gets the output suffix appended.

        Args:
            source: Path of the assembly source

        Returns:
            Path of the machine-code file
        """
        text = str(source)
        if text.endswith(self.input_suffix):
            text = text[: len(text) - len(self.input_suffix)]
        return Path(text + self.output_suffix)

    @property
    def level(self) -> int:
        """Numeric logging level for ``log_level``."""
        return logging.getLevelName(self.log_level)
