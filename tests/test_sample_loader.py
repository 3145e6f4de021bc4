import json

import pytest

from leakbench.reports.classifier import Severity
from leakbench.reports.sample_loader import SampleLoader


@pytest.fixture
def samples_dir(tmp_path):
    (tmp_path / "a_single.json").write_text(
        json.dumps({"title": "Burst main", "severity": "critical"})
    )
    (tmp_path / "b_many.json").write_text(
        json.dumps(
            [
                {"title": "Dripping tap", "severity": "low"},
                {"title": "Wet wall", "severity": "medium"},
            ]
        )
    )
    (tmp_path / "notes.txt").write_text("ignored")
    return tmp_path


async def test_loads_objects_and_lists(samples_dir) -> None:
    loader = SampleLoader(str(samples_dir))

    reports = await loader.load()

    assert [r.title for r in reports] == ["Burst main", "Dripping tap", "Wet wall"]
    assert reports[0].severity is Severity.CRITICAL
    assert len(loader) == 3


async def test_get_report_cycles(samples_dir) -> None:
    loader = SampleLoader(str(samples_dir))
    await loader.load()

    assert loader.get_report(3).title == "Burst main"
    assert loader.get_report(5).title == "Wet wall"


def test_get_report_before_load_raises(samples_dir) -> None:
    with pytest.raises(RuntimeError):
        SampleLoader(str(samples_dir)).get_report(0)


async def test_empty_directory_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        await SampleLoader(str(tmp_path)).load()


async def test_invalid_report_raises_value_error(tmp_path) -> None:
    (tmp_path / "bad.json").write_text(json.dumps({"severity": "low"}))

    with pytest.raises(ValueError, match="bad.json"):
        await SampleLoader(str(tmp_path)).load()
