"""
Import validation tests.

These tests ensure all modules can be imported successfully, catching
issues like missing dependencies or circular imports BEFORE deployment.

Run with: pytest tests/unit/test_imports.py -v
"""

import importlib
from pathlib import Path

import pytest


SRC_PATH = Path(__file__).parent.parent.parent / "src"


class TestHandlerImports:
    """Verify all handler modules can be imported without errors."""

    @pytest.mark.parametrize("module_name", [
        "handlers.main",
        "handlers.health_check",
        "handlers.vehicle_entry",
        "handlers.vehicle_exit",
        "handlers.plate_lookup",
    ])
    def test_handler_import(self, module_name: str):
        """Each handler module should import without errors."""
        try:
            module = importlib.import_module(module_name)
            assert hasattr(module, "lambda_handler"), f"{module_name} missing lambda_handler"
        except ImportError as e:
            pytest.fail(f"Failed to import {module_name}: {e}")


class TestCoreImports:
    """Verify services, repositories, models and utils can be imported."""

    @pytest.mark.parametrize("module_name", [
        "services.fee_calculator",
        "services.parking_service",
        "repositories.ticket_store",
        "repositories.dynamodb_repo",
        "models.ticket",
        "models.response",
        "utils.logging_config",
        "utils.error_handling",
        "utils.validators",
        "utils.settings",
        "utils.clock",
    ])
    def test_module_import(self, module_name: str):
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            pytest.fail(f"Failed to import {module_name}: {e}")


class TestNoSrcPrefix:
    """Ensure no modules use 'from src.' imports (breaks in Lambda)."""

    @pytest.mark.parametrize("package", ["handlers", "services", "repositories", "models", "utils"])
    def test_no_src_prefix(self, package: str):
        for py_file in (SRC_PATH / package).glob("*.py"):
            content = py_file.read_text()
            assert "from src." not in content, f"{py_file.name} contains 'from src.' import"
            assert "import src." not in content, f"{py_file.name} contains 'import src.' import"
