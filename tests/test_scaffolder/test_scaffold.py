"""Tests for the scaffolding driver (makefeature.scaffolder.scaffolder).

Uses the in-memory ``RecordingFileSystem`` from conftest so the exact
sequence of existence checks, directory creations and writes can be asserted.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from makefeature.config import Config
from makefeature.errors import FeatureExistsError, TemplateNotFound
from makefeature.scaffolder.planner import ArtifactPlanner
from makefeature.scaffolder.scaffolder import Scaffolder
from makefeature.scaffolder.templates import TemplateRenderer
from makefeature.scaffolder.variants import ControllerVariant

pytestmark = pytest.mark.unit


@pytest.fixture
def scaffolder(config, fake_fs, planner, quiet_console) -> Scaffolder:
    return Scaffolder(config, fake_fs, planner, quiet_console)


class TestExistingFeature:
    def test_raises_and_writes_nothing(self, config, fake_fs, planner, quiet_console):
        fake_fs.existing.add(config.feature_root("Order"))
        scaffolder = Scaffolder(config, fake_fs, planner, quiet_console)

        with pytest.raises(FeatureExistsError) as exc_info:
            scaffolder.scaffold("Order", ControllerVariant.API)

        assert exc_info.value.feature_name == "Order"
        assert exc_info.value.path == config.feature_root("Order")
        assert str(exc_info.value) == "Feature Order already exists!"
        assert fake_fs.writes == []

    def test_does_not_plan(self, config, fake_fs, quiet_console):
        fake_fs.existing.add(config.feature_root("Order"))
        planner = MagicMock(spec=ArtifactPlanner)
        with pytest.raises(FeatureExistsError):
            Scaffolder(config, fake_fs, planner, quiet_console).scaffold(
                "Order", ControllerVariant.API
            )
        planner.plan.assert_not_called()

    def test_other_feature_unaffected(self, config, fake_fs, planner, quiet_console):
        fake_fs.existing.add(config.feature_root("Order"))
        result = Scaffolder(config, fake_fs, planner, quiet_console).scaffold(
            "Cart", ControllerVariant.API
        )
        assert result.feature_name == "Cart"


class TestScaffold:
    def test_checks_existence_first(self, scaffolder, fake_fs, config):
        scaffolder.scaffold("Order", ControllerVariant.API)
        assert fake_fs.calls[0] == ("exists", config.feature_root("Order"))

    def test_creates_directory_set(self, scaffolder, fake_fs, config):
        scaffolder.scaffold("Order", ControllerVariant.API)
        root = config.feature_root("Order")
        assert fake_fs.directories == [
            root / "Controllers",
            root / "Requests",
            root / "Services",
            root / "Repositories",
            root / "Models",
            root / "Tests",
        ]

    def test_directories_before_files(self, scaffolder, fake_fs):
        scaffolder.scaffold("Order", ControllerVariant.API)
        ops = [op for op, _ in fake_fs.writes]
        assert ops == ["make_directory"] * 6 + ["write_file"] * 11

    def test_writes_every_artifact_under_app_path(self, scaffolder, fake_fs, config):
        result = scaffolder.scaffold("Order", ControllerVariant.API)
        features = config.app_path / "Features" / "Order"
        assert set(fake_fs.files) == {
            features / "Controllers" / "OrderController.php",
            features / "Models" / "Order.php",
            features / "Repositories" / "OrderRepository.php",
            features / "Repositories" / "OrderRepositoryInterface.php",
            features / "Services" / "OrderService.php",
            features / "Services" / "OrderServiceInterface.php",
            features / "Requests" / "OrderStoreRequest.php",
            features / "Requests" / "OrderUpdateRequest.php",
            features / "Tests" / "OrderTest.php",
            features / "Tests" / "OrderControllerTest.php",
            features / "Tests" / "OrderModelTest.php",
        }
        assert result.files == list(fake_fs.files)

    def test_result(self, scaffolder, config):
        result = scaffolder.scaffold("Order", ControllerVariant.RESOURCE)
        assert result.variant is ControllerVariant.RESOURCE
        assert result.feature_root == config.feature_root("Order")
        assert len(result.directories) == 6

    def test_reports_progress(self, scaffolder, quiet_console):
        scaffolder.scaffold("Order", ControllerVariant.API)
        output = quiet_console.file.getvalue()
        assert "Creating directories for feature Order..." in output
        assert "Creating controller file:" in output
        assert "Creating model test file:" in output
        assert "Feature Order created successfully!" in output

    def test_write_failure_propagates_without_rollback(self, scaffolder, fake_fs, config):
        failing = config.app_path / "Features" / "Order" / "Services" / "OrderService.php"
        fake_fs.fail_on = failing

        with pytest.raises(PermissionError):
            scaffolder.scaffold("Order", ControllerVariant.API)

        # Files written before the failure stay in place.
        assert config.app_path / "Features" / "Order" / "Models" / "Order.php" in fake_fs.files
        assert failing not in fake_fs.files
        assert fake_fs.calls[-1] == ("write_file", failing)

    def test_missing_stub_creates_nothing(self, config, fake_fs, quiet_console, tmp_path: Path):
        planner = ArtifactPlanner(TemplateRenderer([tmp_path / "nowhere"]), config)
        scaffolder = Scaffolder(config, fake_fs, planner, quiet_console)
        with pytest.raises(TemplateNotFound):
            scaffolder.scaffold("Order", ControllerVariant.EMPTY)
        assert fake_fs.writes == []


class TestPreview:
    def test_preview_does_not_touch_filesystem(self, scaffolder, fake_fs):
        artifacts = scaffolder.preview("Order", ControllerVariant.API)
        assert len(artifacts) == 11
        assert fake_fs.calls == []


class TestDefaults:
    def test_default_planner_prefers_published_stubs(self, config: Config, fake_fs, quiet_console):
        config.stub_path.mkdir(parents=True)
        (config.stub_path / "controller.plain.stub").write_text("published {{ class }}\n", encoding="utf-8")

        scaffolder = Scaffolder(config, fake_fs, console=quiet_console)
        scaffolder.scaffold("Order", ControllerVariant.EMPTY)

        controller = config.app_path / "Features" / "Order" / "Controllers" / "OrderController.php"
        assert fake_fs.files[controller] == "published OrderController\n"

    def test_published_stub_with_foreign_braces(self, config: Config, fake_fs, quiet_console):
        config.stub_path.mkdir(parents=True)
        (config.stub_path / "controller.api.stub").write_text(
            "{# keep #}\nclass {{ class }}\n{\n    // {{ $request->id }} {{ config.key }}\n}\n",
            encoding="utf-8",
        )

        Scaffolder(config, fake_fs, console=quiet_console).scaffold("Order", ControllerVariant.API)

        controller = config.app_path / "Features" / "Order" / "Controllers" / "OrderController.php"
        assert fake_fs.files[controller] == (
            "{# keep #}\nclass OrderController\n{\n    // {{ $request->id }} {{ config.key }}\n}\n"
        )
