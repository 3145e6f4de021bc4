"""Sample report loading utilities."""

import json
import logging
from pathlib import Path
from typing import List

import aiofiles

from .models import NewReport


class SampleLoader:
    """Loads sample report payloads for submission load tests."""

    def __init__(self, samples_dir: str):
        self.samples_dir = Path(samples_dir)
        self.sample_reports: List[NewReport] = []
        self.logger = logging.getLogger(__name__)

    async def load(self) -> List[NewReport]:
        """
        Load all ``*.json`` sample reports into memory.

        Each file holds either one report object or a list of them.

        Returns:
            List of NewReport payloads

        Raises:
            FileNotFoundError: If no sample files are found
            ValueError: If a file is not valid report JSON
        """
        sample_files = sorted(self.samples_dir.glob("*.json"))

        if not sample_files:
            raise FileNotFoundError(f"No sample reports found in {self.samples_dir}")

        self.logger.info(f"Loading {len(sample_files)} sample report files")

        self.sample_reports = []
        for file_path in sample_files:
            async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
                content = await f.read()
            try:
                data = json.loads(content)
                items = data if isinstance(data, list) else [data]
                self.sample_reports.extend(NewReport.from_dict(item) for item in items)
            except (json.JSONDecodeError, KeyError, TypeError) as e:
                raise ValueError(f"Invalid sample report {file_path.name}: {e}") from e

        self.logger.info(f"Loaded {len(self.sample_reports)} sample reports")
        return self.sample_reports

    def get_report(self, index: int) -> NewReport:
        """
        Get a sample report by index, cycling if necessary.

        Args:
            index: The index to get (will wrap around if larger than report count)

        Returns:
            NewReport payload
        """
        if not self.sample_reports:
            raise RuntimeError("Sample reports not loaded. Call load() first.")
        return self.sample_reports[index % len(self.sample_reports)]

    def __len__(self) -> int:
        return len(self.sample_reports)
