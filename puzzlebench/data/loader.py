"""
Input loader for puzzle solutions.
Reads the input file of a specifier as a list of lines.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..config import Config
from ..errors import InputNotFound
from ..platforms import PlatformHandler, SolutionSpecifier, get_platform_handler

logger = logging.getLogger(__name__)


class InputLoader:
    """
    Load puzzle input for a solution specifier.

    The platform handler decides where the file lives; the loader only reads
    it. Lines are returned without their trailing newline.

    Example:
        loader = InputLoader()
        lines = loader.load(SolutionSpecifier(Platform.ADVENT_OF_CODE, "y2015d01p1", 1))
    """

    def __init__(self, input_dir: Optional[Path] = None):
        """
        Initialize input loader.

        Args:
            input_dir: Root input directory (default: Config.INPUT_DIR)
        """
        self.input_dir = Path(input_dir) if input_dir else Config.INPUT_DIR

    def path_for(
        self,
        specifier: SolutionSpecifier,
        handler: Optional[PlatformHandler] = None,
    ) -> Path:
        """Return the input file path for a specifier."""
        handler = handler or get_platform_handler(specifier.platform)
        return handler.input_path(specifier, self.input_dir)

    def load(
        self,
        specifier: SolutionSpecifier,
        handler: Optional[PlatformHandler] = None,
    ) -> List[str]:
        """
        Load input lines.

        Args:
            specifier: Solution and test index
            handler: Platform handler to locate the file with (optional)

        Returns:
            Input lines in file order

        Raises:
            InputNotFound: If the file is missing, unreadable or not valid UTF-8
        """
        path = self.path_for(specifier, handler)

        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise InputNotFound(f"Cannot read input for {specifier}: {path}") from e

        logger.info(f"Loaded {len(lines)} input lines from {path}")
        return lines
