"""
Tests for the browse loop: transitions, inline errors and rendering
"""

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from file_explorer.core.directory_lister import DirectoryLister
from file_explorer.models.navigation_state import NavigationState
from file_explorer.operations.browse_operation import BrowseOperation
from file_explorer.ui.console import ConsoleUI


def make_operation(start: Path, console: ConsoleUI) -> BrowseOperation:
    return BrowseOperation(console=console, state=NavigationState(current_directory=start))


def output_of(console: ConsoleUI) -> str:
    return console.stdout.getvalue()


@pytest.fixture
def five_entries(tmp_path) -> Path:
    root = tmp_path / "five"
    root.mkdir()
    for name in ["d1", "d2"]:
        (root / name).mkdir()
    for name in ["f1.txt", "f2.txt", "f3.txt"]:
        (root / name).write_text(f"{name}\n")
    return root


class TestOpenAndView:
    """Index-based commands"""

    def test_open_directory_by_index(self, sample_tree, make_console):
        """Test that menu 1 with a directory index enters it"""
        console = make_console("1", "1", "0")
        operation = make_operation(sample_tree, console)

        assert operation.execute() is True
        assert operation.current_directory == sample_tree / "Alpha"
        assert "inner.txt" in output_of(console)

    def test_open_out_of_range_index(self, five_entries, make_console):
        """Test that index 999 reports and keeps the directory"""
        console = make_console("1", "999", "", "0")
        operation = make_operation(five_entries, console)

        operation.execute()

        output = output_of(console)
        assert "Invalid directory selection." in output
        assert operation.current_directory == five_entries
        assert output.count("Current directory:") == 2
        assert output.count("f3.txt") == 2

    def test_open_file_index_is_rejected(self, sample_tree, make_console):
        console = make_console("1", "3", "", "0")
        operation = make_operation(sample_tree, console)

        operation.execute()

        assert "Invalid directory selection." in output_of(console)
        assert operation.current_directory == sample_tree

    def test_view_file_by_index(self, sample_tree, make_console):
        """Test that menu 2 previews the file and keeps the directory"""
        console = make_console("2", "3", "", "0")
        operation = make_operation(sample_tree, console)

        operation.execute()

        output = output_of(console)
        assert "----- File: Apple.md -----" in output
        assert "# apple" in output
        assert "----- End of preview -----" in output
        assert "Press Enter to continue..." in output
        assert operation.current_directory == sample_tree

    def test_view_binary_file(self, sample_tree, make_console):
        console = make_console("2", "4", "", "0")
        operation = make_operation(sample_tree, console)

        operation.execute()

        assert "(Binary file preview suppressed)" in output_of(console)

    def test_view_directory_index_is_rejected(self, sample_tree, make_console):
        console = make_console("2", "1", "", "0")
        operation = make_operation(sample_tree, console)

        operation.execute()

        assert "Invalid file selection." in output_of(console)
        assert "----- File:" not in output_of(console)

    def test_view_vanished_file_reports_open_failure(self, sample_tree, make_console):
        """Test that a file deleted after listing is reported, not raised"""
        console = make_console("")
        operation = make_operation(sample_tree, console)
        operation.listing = DirectoryLister().list(sample_tree)
        (sample_tree / "zeta.txt").unlink()

        result = operation.view_entry(5)

        assert result.shown is False
        assert f"Could not open file: {sample_tree / 'zeta.txt'}" in output_of(console)

    def test_view_uses_configured_previewer(self, sample_tree, make_console):
        previewer = MagicMock()
        previewer.preview.return_value.ok = True
        console = make_console("")
        operation = BrowseOperation(
            console=console,
            previewer=previewer,
            state=NavigationState(current_directory=sample_tree)
        )
        operation.listing = DirectoryLister().list(sample_tree)

        operation.view_entry(5)

        previewer.preview.assert_called_once_with(sample_tree / "zeta.txt")

    def test_preview_cap_from_context(self, tmp_path, make_console):
        (tmp_path / "many.txt").write_text("".join(f"{i}\n" for i in range(10)))
        context = MagicMock(preview_max_lines=3, binary_probe_bytes=4096)
        console = make_console("2", "1", "", "0")
        operation = BrowseOperation(
            context=context,
            console=console,
            state=NavigationState(current_directory=tmp_path)
        )

        operation.execute()

        assert "... (truncated after 3 lines)" in output_of(console)


class TestGoUp:
    """Parent navigation"""

    def test_up_moves_to_parent(self, sample_tree, make_console):
        console = make_console("3", "0")
        operation = make_operation(sample_tree / "Alpha", console)

        operation.execute()

        assert operation.current_directory == sample_tree

    def test_up_at_root_is_noop(self, make_console):
        root = Path(Path.cwd().anchor)
        operation = make_operation(root, make_console())

        assert operation.go_up() is False
        assert operation.current_directory == root

    def test_up_then_reopen_returns_to_same_directory(self, sample_tree, make_console):
        """Test that leaving a child and reopening it restores the path"""
        start = sample_tree / "beta"
        console = make_console("3", "1", "2", "0")
        operation = make_operation(start, console)

        operation.execute()

        assert operation.current_directory == start


class TestChangeDirectory:
    """Typed path navigation"""

    def test_absolute_path(self, sample_tree, tmp_path, make_console):
        console = make_console("4", str(sample_tree / "beta"), "0")
        operation = make_operation(tmp_path, console)

        operation.execute()

        assert operation.current_directory == (sample_tree / "beta").resolve()

    def test_relative_path_from_working_directory(self, sample_tree, tmp_path, make_console, monkeypatch):
        """Test that relative paths ignore the browsed directory"""
        monkeypatch.chdir(sample_tree / "Alpha")
        operation = make_operation(tmp_path, make_console())

        assert operation.change_directory("../beta") is True
        assert operation.current_directory == (sample_tree / "beta").resolve()

    def test_name_relative_to_browsed_directory_only_is_rejected(
        self, sample_tree, tmp_path, make_console, monkeypatch
    ):
        monkeypatch.chdir(tmp_path)
        console = make_console("")
        operation = make_operation(sample_tree / "Alpha", console)

        assert operation.change_directory("../beta") is False
        assert "Not a directory: ../beta" in output_of(console)
        assert operation.current_directory == sample_tree / "Alpha"

    def test_path_is_canonicalized(self, sample_tree, make_console):
        operation = make_operation(sample_tree, make_console())

        operation.change_directory(str(sample_tree / "Alpha" / ".." / "beta"))

        assert operation.current_directory == (sample_tree / "beta").resolve()
        assert ".." not in operation.current_directory.parts

    def test_home_is_expanded(self, tmp_path, make_console, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("USERPROFILE", str(tmp_path))
        operation = make_operation(Path.cwd(), make_console())

        assert operation.change_directory("~") is True
        assert operation.current_directory == tmp_path.resolve()

    @pytest.mark.parametrize("typed", ["does-not-exist", "zeta.txt", ""])
    def test_invalid_target_keeps_directory(self, sample_tree, make_console, monkeypatch, typed):
        """Test missing paths, files and blank input"""
        monkeypatch.chdir(sample_tree)
        console = make_console("4", typed, "", "0")
        operation = make_operation(sample_tree, console)

        operation.execute()

        assert f"Not a directory: {typed}" in output_of(console)
        assert operation.current_directory == sample_tree

    def test_canonicalization_failure_falls_back(self, sample_tree, make_console, monkeypatch):
        """Test that a resolve error silently keeps the unresolved absolute path"""
        monkeypatch.chdir(sample_tree)
        console = make_console()
        operation = make_operation(sample_tree, console)

        with patch.object(Path, "resolve", side_effect=OSError("resolve failed")):
            assert operation.change_directory("beta") is True
        assert operation.current_directory.is_absolute()
        assert operation.current_directory == (sample_tree / "beta").resolve()
        assert output_of(console) == ""


class TestMenuInput:
    """Bad input never ends the loop"""

    def test_non_numeric_menu_choice(self, sample_tree, make_console):
        console = make_console("abc", "", "0")
        operation = make_operation(sample_tree, console)

        assert operation.execute() is True
        assert "Invalid input: please enter a number." in output_of(console)
        assert output_of(console).count("Current directory:") == 2

    def test_non_numeric_index(self, sample_tree, make_console):
        console = make_console("1", "first", "", "0")
        operation = make_operation(sample_tree, console)

        operation.execute()

        assert "Invalid input: please enter a number." in output_of(console)
        assert operation.current_directory == sample_tree

    @pytest.mark.parametrize("typed", ["1_0", "+1", "\u0661"])
    def test_non_decimal_menu_choice(self, sample_tree, make_console, typed):
        """Test that underscores, signs and non-ASCII digits are not numbers"""
        console = make_console(typed, "", "0")
        operation = make_operation(sample_tree, console)

        operation.execute()

        assert "Invalid input: please enter a number." in output_of(console)
        assert operation.current_directory == sample_tree

    def test_unknown_choice(self, sample_tree, make_console):
        console = make_console("9", "", "0")
        operation = make_operation(sample_tree, console)

        operation.execute()

        assert "Unknown choice." in output_of(console)

    def test_end_of_input_exits(self, sample_tree, make_console):
        """Test that an exhausted input stream ends the loop cleanly"""
        console = make_console("1")
        operation = make_operation(sample_tree, console)

        assert operation.execute() is True

    def test_one_command_per_cycle(self, sample_tree, make_console):
        console = make_console("5", "5", "0")
        operation = make_operation(sample_tree, console)

        operation.execute()

        assert output_of(console).count("File Explorer Menu:") == 3


class TestRendering:
    """What each cycle prints"""

    def test_refresh_renders_identically(self, sample_tree, make_console):
        """Test that repeated refreshes produce byte-identical listings"""
        console = make_console("5", "5", "0")
        operation = make_operation(sample_tree, console)

        operation.execute()

        cycles = output_of(console).split("File Explorer Menu:")
        renders = [chunk.split("> ")[-1] for chunk in cycles[:-1]]
        assert renders[0] == renders[1] == renders[2]
        assert operation.current_directory == sample_tree

    def test_empty_directory_marker(self, empty_dir, make_console):
        """Test that an empty directory shows (empty) and rejects index 1"""
        console = make_console("1", "1", "", "2", "1", "", "0")
        operation = make_operation(empty_dir, console)

        operation.execute()

        output = output_of(console)
        assert "(empty)" in output
        assert "Invalid directory selection." in output
        assert "Invalid file selection." in output
        assert operation.current_directory == empty_dir

    def test_listing_failure_is_rendered(self, tmp_path, make_console):
        """Test that an unreadable directory is shown as an error, not raised"""
        missing = tmp_path / "missing"
        console = make_console("5", "0")
        operation = make_operation(missing, console)

        assert operation.execute() is True
        output = output_of(console)
        assert "Error listing directory:" in output
        assert output.count("(empty)") == 2

    def test_start_dir_argument(self, sample_tree, make_console):
        console = make_console("0")
        operation = BrowseOperation(console=console)

        operation.execute(start_dir=sample_tree)

        assert operation.current_directory == sample_tree
        assert f"  {sample_tree}" in output_of(console)

    def test_relative_start_dir_is_made_absolute(self, sample_tree, make_console, monkeypatch):
        """Test that starting from "." can still go up"""
        monkeypatch.chdir(sample_tree / "Alpha")
        console = make_console("3", "0")
        operation = BrowseOperation(console=console)

        operation.execute(start_dir=".")

        assert operation.current_directory.is_absolute()
        assert operation.current_directory.resolve() == sample_tree.resolve()

    def test_default_state_is_working_directory(self, make_console):
        operation = BrowseOperation(console=make_console())

        assert operation.current_directory == Path.cwd()


class TestRunOnce:
    """Single-cycle API"""

    def test_exit_stops(self, sample_tree):
        console = ConsoleUI(stdin=io.StringIO("0\n"), stdout=io.StringIO())
        operation = make_operation(sample_tree, console)

        assert operation.run_once() is False

    def test_refresh_continues(self, sample_tree):
        console = ConsoleUI(stdin=io.StringIO("5\n"), stdout=io.StringIO())
        operation = make_operation(sample_tree, console)

        assert operation.run_once() is True
        assert len(operation.listing) == 5
