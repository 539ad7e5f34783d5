"""Pytest configuration and shared fixtures.

No sys.path hacks - tests import from the installed wsdl2xsd package.
"""

import logging
import shutil
import zipfile
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"
WSDL_FIXTURES = FIXTURES / "wsdl"


@pytest.fixture
def wsdl_dir(tmp_path):
    """A fresh WSDL directory holding copies of the fixture WSDLs."""
    directory = tmp_path / "wsdl"
    directory.mkdir()
    for name in ("valid.wsdl", "multiple-schemas.wsdl", "no-schema.wsdl"):
        shutil.copy(WSDL_FIXTURES / name, directory / name)
    return directory


@pytest.fixture
def make_archive(tmp_path):
    """Build a jar-style zip archive: make_archive("lib.jar", {"entry": bytes_or_path})."""
    def _make(name, entries):
        archive_path = tmp_path / name
        with zipfile.ZipFile(archive_path, "w") as archive:
            for entry, content in entries.items():
                if isinstance(content, Path):
                    content = content.read_bytes()
                archive.writestr(entry, content)
        return archive_path
    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI installs so they don't leak between tests."""
    yield
    logger = logging.getLogger("wsdl2xsd")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
