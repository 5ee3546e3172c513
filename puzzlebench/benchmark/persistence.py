"""
CSV persistence for raw benchmark samples.
"""

import csv
import os
import logging
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from ..config import Config
from ..errors import PersistenceError

logger = logging.getLogger(__name__)

CSV_HEADER = "runtime_ns"

# Permissions of a new file before the umask applies
DEFAULT_FILE_MODE = 0o666


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


class ResultStore:
    """
    Store raw timing samples as CSV files.

    Files are named runtimes_<epoch-seconds>.csv and hold one nanosecond
    duration per row under a single header. A file is written to a temporary
    name first and moved into place, so a failed write leaves any earlier
    file of the same name untouched.

    Example:
        store = ResultStore(Path("results"))
        path = store.save_to_csv(sample, int(time.time()))
    """

    def __init__(self, results_dir: Optional[Path] = None):
        """
        Initialize result store.

        Args:
            results_dir: Directory for CSV files (default: Config.RESULTS_DIR)
        """
        self.results_dir = Path(results_dir) if results_dir else Config.RESULTS_DIR

    def path_for(self, timestamp: int) -> Path:
        return self.results_dir / f"runtimes_{int(timestamp)}.csv"

    def save_to_csv(self, sample: Sequence[int], timestamp: int) -> Path:
        """
        Write a sample to CSV.

        Args:
            sample: Durations in nanoseconds, in invocation order
            timestamp: Capture time in seconds since the epoch

        Returns:
            Path of the written file

        Raises:
            PersistenceError: If the file cannot be written
        """
        filepath = self.path_for(timestamp)
        tmp_name = None

        try:
            self.results_dir.mkdir(parents=True, exist_ok=True)

            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{filepath.name}.", suffix=".tmp", dir=self.results_dir
            )
            with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                writer.writerow([CSV_HEADER])
                for duration in sample:
                    writer.writerow([int(duration)])

            # mkstemp creates 0600 files
            os.chmod(tmp_name, DEFAULT_FILE_MODE & ~_current_umask())
            os.replace(tmp_name, filepath)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(f"Failed to write {filepath}: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.info(f"Saved {len(sample)} runtimes to {filepath}")
        return filepath


def load_from_csv(filepath: Path) -> List[int]:
    """
    Read a sample written by ResultStore.save_to_csv.

    Files without the header row are accepted too.

    Raises:
        PersistenceError: If the file cannot be read or holds a non-integer row
    """
    sample = []

    try:
        with open(filepath, "r", newline="", encoding="utf-8") as f:
            for row_idx, row in enumerate(csv.reader(f), start=1):
                if not row or (row_idx == 1 and row[0] == CSV_HEADER):
                    continue
                try:
                    sample.append(int(row[0]))
                except ValueError as e:
                    raise PersistenceError(f"{filepath}:{row_idx}: not an integer: {row[0]!r}") from e
    except OSError as e:
        raise PersistenceError(f"Failed to read {filepath}: {e}") from e

    return sample
