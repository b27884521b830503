import json
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from arbiter.cli.main import app
from arbiter.config import Config
from arbiter.domain import ArbitrationMethod, IdType
from arbiter.storage.json_arbitrator_store import JsonArbitratorStore
from conftest import FakeKeyProvider, build_record

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"arbiter_dir": str(tmp_path / ".arbiter")}), encoding="utf-8"
    )
    return path


@pytest.fixture
def config(config_file: Path) -> Config:
    return Config.load(config_file)


@pytest.fixture(autouse=True)
def fake_key_provider():
    with patch("arbiter.cli.main.EcKeyProvider", FakeKeyProvider):
        yield


def _invoke(config_file: Path, args: List[str]):
    return runner.invoke(app, ["--config", str(config_file), *args])


def _stored(config: Config):
    return JsonArbitratorStore(config.get_store_path()).load_persisted()


def test_init_creates_profile(config: Config, config_file: Path) -> None:
    result = _invoke(config_file, ["init"])

    assert result.exit_code == 0
    assert "Initialized arbitrator profile" in result.stdout
    assert _stored(config).id == "Manfred Karrer"


def test_init_reports_existing_profile(config: Config, config_file: Path) -> None:
    JsonArbitratorStore(config.get_store_path()).persist(build_record())

    result = _invoke(config_file, ["init"])

    assert result.exit_code == 0
    assert "already exists" in result.stdout
    assert _stored(config) == build_record()


def test_init_reports_corrupt_store(config: Config, config_file: Path) -> None:
    path = config.get_store_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("not json", encoding="utf-8")

    result = _invoke(config_file, ["init"])

    assert result.exit_code == 1
    assert "Error" in result.stdout


def test_show_prints_fields(config: Config, config_file: Path) -> None:
    JsonArbitratorStore(config.get_store_path()).persist(build_record())

    result = _invoke(config_file, ["show"])

    assert result.exit_code == 0
    assert "Alice" in result.stdout
    assert "0.05 BTC" in result.stdout
    assert "NICKNAME" in result.stdout


def test_update_writes_changed_fields(config: Config, config_file: Path) -> None:
    JsonArbitratorStore(config.get_store_path()).persist(build_record())

    result = _invoke(
        config_file,
        [
            "update",
            "--id-type",
            "COMPANY",
            "--fee",
            "0.2",
            "--method",
            "TLS_NOTARY",
            "--method",
            "OTHER",
            "--language",
            "fr",
            "--description",
            "New text",
        ],
    )

    assert result.exit_code == 0
    assert "Updated" in result.stdout
    stored = _stored(config)
    assert stored.id_type == IdType.COMPANY
    assert stored.fee == 20_000_000
    assert stored.arbitration_methods == [
        ArbitrationMethod.TLS_NOTARY,
        ArbitrationMethod.OTHER,
    ]
    assert stored.languages == ["fr"]
    assert stored.description == "New text"
    assert stored.web_url == "https://alice.example"


def test_update_without_options(config: Config, config_file: Path) -> None:
    JsonArbitratorStore(config.get_store_path()).persist(build_record())

    result = _invoke(config_file, ["update"])

    assert result.exit_code == 0
    assert "Nothing to update" in result.stdout


def test_update_rejects_invalid_fee(config: Config, config_file: Path) -> None:
    JsonArbitratorStore(config.get_store_path()).persist(build_record())

    result = _invoke(config_file, ["update", "--fee", "lots"])

    assert result.exit_code == 1
    assert _stored(config).fee == 5_000_000


def test_save_skipped_when_disabled(config_file: Path) -> None:
    result = _invoke(config_file, ["save"])

    assert result.exit_code == 0
    assert "Save skipped" in result.stdout


def test_save_writes_when_enabled(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps(
            {"arbiter_dir": str(tmp_path / ".arbiter"), "save_on_every_update": True}
        ),
        encoding="utf-8",
    )

    result = _invoke(config_file, ["save"])

    assert result.exit_code == 0
    assert "Arbitrator profile saved" in result.stdout


def test_init_reports_undecodable_store(config: Config, config_file: Path) -> None:
    """A store file that is not UTF-8 is reported, not raised as a traceback."""
    path = config.get_store_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"\xff\xfe{garbage")

    result = _invoke(config_file, ["init"])

    assert result.exit_code == 1
    assert "Error" in result.stdout


def test_missing_config_file_is_reported(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.json"), "init"])

    assert result.exit_code == 1
    assert "Config file not found" in result.stdout


def test_invalid_config_file_is_reported(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text('{"unknown": "value"}', encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_file), "show"])

    assert result.exit_code == 1
    assert "Error" in result.stdout
