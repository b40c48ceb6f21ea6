"""Boundary exceptions for loading classification datasets."""

from pathlib import Path

from ssic.utils.exceptions import SsicError


class DatasetLoadError(SsicError):
    """Raised when a classification dataset cannot be read.

    Individual malformed entries are skipped by the loader; this error is
    reserved for datasets that cannot be used at all.

    Attributes:
        path: Location of the dataset that failed to load
        reason: Short description of the failure
    """

    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Cannot load dataset {path}: {reason}")
        self.path = Path(path)
        self.reason = reason

    def __str__(self) -> str:
        return f"DatasetLoadError: {self.args[0]}"
