"""Tests for the loader and driver modules."""

from pathlib import Path

import pytest

from flugen.config import GeneratorConfig
from flugen.driver import UnitStatus, process_unit, run
from flugen.errors import PatternError
from flugen.loader import discover_sources


def _config(tmp_path: Path, **kwargs) -> GeneratorConfig:
    return GeneratorConfig(pattern=str(tmp_path / "lib" / "**" / "*.dart"), **kwargs)


class TestDiscoverSources:

    def test_recursive_sorted_and_filtered(self, tmp_path, write_dart, user_source, plain_source):
        write_dart("b.dart", plain_source)
        write_dart("models/a.dart", user_source)
        write_dart("models/a.flu.dart", "")
        write_dart("models/a.g.dart", "")
        write_dart("models/a.freezed.dart", "")
        paths = discover_sources(str(tmp_path / "lib" / "**" / "*.dart"))
        assert [Path(p).relative_to(tmp_path).as_posix() for p in paths] == [
            "lib/b.dart",
            "lib/models/a.dart",
        ]

    def test_empty_pattern(self):
        with pytest.raises(PatternError):
            discover_sources("")

    def test_no_matches(self, tmp_path):
        assert discover_sources(str(tmp_path / "*.dart")) == []


class TestProcessUnit:

    def test_generates_companion(self, write_dart, user_source):
        path = write_dart("user.dart", user_source)
        result = process_unit(str(path))
        assert result.status is UnitStatus.GENERATED
        assert result.class_count == 1
        generated = path.with_name("user.flu.dart")
        assert result.output_path == str(generated)
        text = generated.read_text(encoding="utf-8")
        assert text.startswith("// dart format off\n")
        assert "part of 'user.dart';" in text

    def test_overwrites_previous_output(self, write_dart, user_source):
        path = write_dart("user.dart", user_source)
        generated = path.with_name("user.flu.dart")
        generated.write_text("stale", encoding="utf-8")
        process_unit(str(path))
        assert "stale" not in generated.read_text(encoding="utf-8")

    def test_no_classes_writes_nothing(self, write_dart, plain_source):
        path = write_dart("plain.dart", plain_source)
        result = process_unit(str(path))
        assert result.status is UnitStatus.SKIPPED
        assert not path.with_name("plain.flu.dart").exists()

    def test_missing_file_fails_softly(self, tmp_path):
        result = process_unit(str(tmp_path / "gone.dart"))
        assert result.status is UnitStatus.FAILED
        assert result.error

    def test_undecodable_file_fails_softly(self, tmp_path):
        path = tmp_path / "bad.dart"
        path.write_bytes(b"\xff\xfe\xfa")
        assert process_unit(str(path)).status is UnitStatus.FAILED

    def test_dry_run(self, write_dart, user_source):
        path = write_dart("user.dart", user_source)
        result = process_unit(str(path), dry_run=True)
        assert result.status is UnitStatus.GENERATED
        assert not path.with_name("user.flu.dart").exists()


class TestRun:

    def test_mixed_units(self, tmp_path, write_dart, user_source, plain_source):
        write_dart("user.dart", user_source)
        write_dart("plain.dart", plain_source)
        bad = tmp_path / "lib" / "bad.dart"
        bad.write_bytes(b"\xff\xfe\xfa")

        report = run(_config(tmp_path, workers=2))
        assert report.generated == 1
        assert report.skipped == 1
        assert report.failed == 1
        assert (tmp_path / "lib" / "user.flu.dart").exists()

    def test_results_in_input_order(self, tmp_path, write_dart, user_source):
        for name in ("c.dart", "a.dart", "b.dart"):
            write_dart(name, user_source)
        report = run(_config(tmp_path, workers=3))
        assert [Path(r.path).name for r in report.results] == ["a.dart", "b.dart", "c.dart"]

    def test_generated_files_not_reprocessed(self, tmp_path, write_dart, user_source):
        write_dart("user.dart", user_source)
        run(_config(tmp_path))
        report = run(_config(tmp_path))
        assert len(report.results) == 1

    def test_identical_output_across_runs(self, tmp_path, write_dart, user_source):
        write_dart("user.dart", user_source)
        generated = tmp_path / "lib" / "user.flu.dart"
        run(_config(tmp_path))
        first = generated.read_bytes()
        run(_config(tmp_path, workers=1))
        assert generated.read_bytes() == first

    def test_nothing_matched(self, tmp_path):
        report = run(_config(tmp_path))
        assert report.results == []
