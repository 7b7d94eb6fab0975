from __future__ import annotations
import logging
import os
from importlib import resources

from .config import DATASET_NAME, DATASET_PACKAGE, DATASET_RESOURCE
from .errors import ReadFailure

logger = logging.getLogger(__name__)


# ------------------------
# Dataset sources
# ------------------------


class DatasetSource:
    """Somewhere the raw dataset bytes can be read from."""

    name: str = DATASET_NAME

    def read(self) -> bytes:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.name


class BundledSource(DatasetSource):
    """Dataset shipped as package data inside `verbi`."""

    def __init__(self, package: str = DATASET_PACKAGE, resource: str = DATASET_RESOURCE):
        self.package = package
        self.resource = resource
        self.name = os.path.basename(resource)

    def read(self) -> bytes:
        logger.debug("Reading bundled resource %s/%s", self.package, self.resource)
        try:
            return resources.files(self.package).joinpath(self.resource).read_bytes()
        except (OSError, ModuleNotFoundError) as e:
            raise ReadFailure(self.resource, e) from e


class FileSource(DatasetSource):
    """Dataset read from an explicit filesystem path."""

    def __init__(self, path: str | os.PathLike):
        self.path = os.fspath(path)
        self.name = os.path.basename(self.path) or self.path

    def read(self) -> bytes:
        logger.debug("Reading dataset file %s", self.path)
        try:
            with open(self.path, "rb") as fh:
                return fh.read()
        except OSError as e:
            raise ReadFailure(self.path, e) from e


def select_source(path: str | None = None) -> DatasetSource:
    """File path if one is given, the bundled resource otherwise."""
    if path:
        return FileSource(path)
    return BundledSource()
