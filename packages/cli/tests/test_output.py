"""Tests for the output sink."""

import json
import os
from unittest.mock import patch

import pytest

from local_details_cli.output import display_path, emit, render, write_details
from local_details_common import OutputWriteError, PromptCancelled
from local_details_contracts import Details, Status

pytestmark = pytest.mark.unit


@pytest.fixture
def details():
    return Details(
        title="Frieren",
        author="Kanehito Yamada",
        artist="Tsukasa Abe",
        description="...",
        genre=["Fantasy", "Drama"],
        status=Status.ONGOING,
    )


class TestRender:
    def test_render_matches_to_json(self, details):
        assert render(details) == details.to_json()


class TestWriteDetails:
    """Tests for write_details."""

    def test_creates_file(self, tmp_path, details):
        path = write_details(render(details), tmp_path / "details.json")

        assert path.read_text(encoding="utf-8") == render(details)

    def test_overwrites_existing_file(self, tmp_path, details):
        target = tmp_path / "details.json"
        target.write_text("old content that is longer than the new document" * 10)

        write_details(render(details), target)

        assert json.loads(target.read_text(encoding="utf-8"))["title"] == "Frieren"

    def test_unwritable_path_raises(self, tmp_path, details):
        target = tmp_path / "details.json"
        target.mkdir()

        with pytest.raises(OutputWriteError, match="Could not write"):
            write_details(render(details), target)

    def test_missing_directory_raises(self, tmp_path, details):
        with pytest.raises(OutputWriteError):
            write_details(render(details), tmp_path / "missing" / "details.json")


class TestEmit:
    """Tests for emit."""

    def test_declined_writes_nothing(self, tmp_path, details, capsys):
        with patch("local_details_cli.prompts.confirm", return_value=False):
            written = emit(details, directory=tmp_path)

        assert written is False
        assert os.listdir(tmp_path) == []
        assert capsys.readouterr().out == render(details) + "\n"

    def test_confirm_cancelled_counts_as_no(self, tmp_path, details, capsys):
        with patch(
            "local_details_cli.prompts.confirm",
            side_effect=PromptCancelled("Write to file?"),
        ):
            written = emit(details, directory=tmp_path)

        assert written is False
        assert not (tmp_path / "details.json").exists()
        assert render(details) in capsys.readouterr().out

    def test_accepted_writes_and_echoes(self, tmp_path, details, capsys):
        with patch("local_details_cli.prompts.confirm", return_value=True):
            written = emit(details, directory=tmp_path)

        out = capsys.readouterr().out
        file_text = (tmp_path / "details.json").read_text(encoding="utf-8")

        assert written is True
        assert out == f"Written to ./details.json\n{file_text}\n"
        assert file_text == render(details)

    def test_confirm_label_and_default(self, tmp_path, details):
        with patch("local_details_cli.prompts.confirm", return_value=False) as confirm_mock:
            emit(details, directory=tmp_path)

        assert confirm_mock.call_args.args[0] == "Write to file? [./details.json]"
        assert confirm_mock.call_args.kwargs["default"] is False

    def test_custom_filename(self, tmp_path, details, capsys):
        with patch("local_details_cli.prompts.confirm", return_value=True):
            emit(details, filename="series.json", directory=tmp_path)

        assert (tmp_path / "series.json").exists()
        assert "Written to ./series.json" in capsys.readouterr().out

    def test_defaults_to_working_directory(self, isolated_workdir, details):
        with patch("local_details_cli.prompts.confirm", return_value=True):
            emit(details)

        assert (isolated_workdir / "details.json").exists()

    def test_write_failure_propagates_without_echo(self, tmp_path, details, capsys):
        (tmp_path / "details.json").mkdir()

        with patch("local_details_cli.prompts.confirm", return_value=True):
            with pytest.raises(OutputWriteError):
                emit(details, directory=tmp_path)

        assert capsys.readouterr().out == ""


class TestDisplayPath:
    """Tests for display_path."""

    def test_file_in_working_directory(self, isolated_workdir):
        assert display_path(isolated_workdir / "details.json") == "./details.json"

    def test_nested_file(self, isolated_workdir):
        assert display_path(isolated_workdir / "out" / "x.json") == "./out/x.json"

    def test_outside_working_directory(self, tmp_path_factory):
        target = tmp_path_factory.mktemp("elsewhere") / "x.json"

        assert display_path(target) == str(target)

    def test_absolute_filename_in_emit(self, details, capsys, tmp_path_factory):
        target = tmp_path_factory.mktemp("elsewhere") / "x.json"

        with patch("local_details_cli.prompts.confirm", return_value=True):
            emit(details, filename=str(target))

        out = capsys.readouterr().out
        assert target.exists()
        assert out.startswith(f"Written to {target}\n")
