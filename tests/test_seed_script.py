"""Tests for the seed_database command-line flags."""

import argparse
import importlib.util
import os
from pathlib import Path
from unittest.mock import patch

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "seed_database.py"


@pytest.fixture(scope="module")
def seed_script():
    """Load scripts/seed_database.py as a module."""
    spec = importlib.util.spec_from_file_location("seed_database", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def make_args(**overrides: object) -> argparse.Namespace:
    values = dict(
        backend=None,
        postgres_url=None,
        synthetic=None,
        seed=None,
        workers=None,
        log_level=None,
        log_format=None,
        truncate=False,
        dump_json=None,
    )
    values.update(overrides)
    return argparse.Namespace(**values)


class TestBuildConfig:
    """Tests for build_config."""

    def test_postgres_url_selects_postgres_backend(self, seed_script) -> None:
        args = make_args(postgres_url="postgresql://u:p@db:5432/psa")
        with patch.dict(os.environ, {}, clear=True):
            config = seed_script.build_config(args)

        assert config.storage_backend == "postgres"

    def test_explicit_backend_wins(self, seed_script) -> None:
        args = make_args(backend="memory", postgres_url="postgresql://u:p@db:5432/psa")
        with patch.dict(os.environ, {}, clear=True):
            config = seed_script.build_config(args)

        assert config.storage_backend == "memory"

    def test_defaults_to_environment(self, seed_script) -> None:
        with patch.dict(os.environ, {"STORAGE_BACKEND": "postgres"}, clear=True):
            config = seed_script.build_config(make_args())

        assert config.storage_backend == "postgres"

    def test_flags_override_seed_settings(self, seed_script) -> None:
        args = make_args(synthetic=12, seed=3, workers=2)
        with patch.dict(os.environ, {"SEED_ENABLED": "true"}, clear=True):
            config = seed_script.build_config(args)

        assert config.seed.synthetic_occurrences == 12
        assert config.seed.seed == 3
        assert config.executor.max_workers == 2
        assert config.seed.enabled is False
