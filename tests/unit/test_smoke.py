"""
Smoke tests to verify all critical dependencies are installed correctly.

These tests confirm that:
1. Python 3.11+ is installed
2. All core dependencies are importable
3. Project version is accessible

Run with: pytest tests/unit/test_smoke.py -v
"""

import sys


class TestPythonVersion:
    """Verify Python version requirements."""

    def test_python_311_or_higher(self) -> None:
        assert sys.version_info >= (3, 11), (
            f"Python 3.11+ required, "
            f"got {sys.version_info.major}.{sys.version_info.minor}"
        )


class TestStructuredLogging:
    """Verify structured logging for ledger operations."""

    def test_structlog_import(self) -> None:
        """structlog must be importable."""
        import structlog

        logger = structlog.get_logger()
        assert logger is not None

    def test_structlog_configuration(self) -> None:
        """structlog can be bound with context."""
        import structlog

        logger = structlog.get_logger()
        bound_logger = logger.bind(applicant_id="applicant-1", operation="test")
        assert bound_logger is not None


class TestHashing:
    """Verify BLAKE3 for id document hashing."""

    def test_blake3_digest_size(self) -> None:
        import blake3

        assert len(blake3.blake3(b"smoke").digest()) == 32


class TestConfiguration:
    """Verify python-dotenv for .env loading."""

    def test_dotenv_import(self) -> None:
        from dotenv import load_dotenv

        assert load_dotenv is not None


class TestProjectVersion:
    """Verify project metadata is accessible."""

    def test_version_accessible(self, project_version: str) -> None:
        """Project version must be accessible from src package."""
        assert isinstance(project_version, str)
        assert len(project_version) > 0

    def test_version_format(self, project_version: str) -> None:
        """Version must be in semver format."""
        parts = project_version.split(".")
        assert len(parts) >= 2, f"Version must be semver format, got {project_version}"
