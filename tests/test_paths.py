"""Tests for path generation (paths module)."""

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from pydantic import ValidationError

import tempy
from tempy import (
    DirectoryOptions,
    FileOptions,
    InvalidOptionsError,
    config,
    temporary_directory,
    temporary_file,
)
from tempy.paths import format_extension, get_path


class TestGetPath:
    """Tests for get_path."""

    def test_get_path_is_under_root(self, temp_root):
        """Test that generated paths live directly under the root."""
        path = get_path()

        assert os.path.dirname(path) == str(temp_root)

    def test_get_path_random_part_is_128_hex_chars(self):
        """Test the random suffix length and alphabet."""
        name = os.path.basename(get_path())

        assert len(name) == 128
        assert set(name) <= set("0123456789abcdef")

    def test_get_path_with_prefix(self):
        """Test that the prefix comes before the random part."""
        name = os.path.basename(get_path("cache_"))

        assert name.startswith("cache_")
        assert len(name) == len("cache_") + 128

    def test_get_path_with_explicit_root(self, tmp_path):
        """Test that an explicit root overrides the configured one."""
        path = get_path(root=str(tmp_path))

        assert os.path.dirname(path) == str(tmp_path)

    def test_get_path_creates_nothing(self):
        """Test that only a path string is computed."""
        assert not os.path.exists(get_path())


class TestFormatExtension:
    """Tests for extension normalization."""

    @pytest.mark.parametrize(
        ("extension", "expected"),
        [
            (None, ""),
            ("png", ".png"),
            (".png", ".png"),
            ("tar.gz", ".tar.gz"),
            ("", "."),
        ],
    )
    def test_format_extension(self, extension, expected):
        """Test that a single leading dot is normalized."""
        assert format_extension(extension) == expected

    def test_format_extension_double_dot_quirk(self):
        """Test that only one leading dot is stripped from '..png'.

        Kept for compatibility: the result has two dots.
        """
        assert format_extension("..png") == "..png"


class TestTemporaryFile:
    """Tests for temporary_file."""

    def test_default_is_under_root(self):
        """Test the default path is inside the root temporary directory."""
        path = temporary_file()

        assert path.startswith(config.root_temporary_directory + os.sep)

    def test_default_has_no_extension(self):
        """Test that no suffix is added by default."""
        path = temporary_file()

        assert "." not in os.path.basename(path)
        assert not path.endswith(".png")

    @pytest.mark.parametrize("options", [{"extension": None}, {}])
    def test_no_extension_variants(self, options):
        """Test that a None extension adds no dot."""
        assert not temporary_file(**options).endswith(".")

    @pytest.mark.parametrize("extension", ["png", ".png"])
    def test_extension(self, extension):
        """Test that extension with or without dot ends in '.png'."""
        path = temporary_file(extension=extension)

        assert path.endswith(".png")
        assert not path.endswith("..png")

    def test_extension_double_dot(self):
        """Test the double leading dot is preserved as one extra dot."""
        assert temporary_file(extension="..png").endswith("..png")

    def test_extension_does_not_touch_disk(self):
        """Test that a file path with extension is not created."""
        assert not os.path.exists(temporary_file(extension="txt"))

    def test_name(self):
        """Test that the name is used verbatim inside a new directory."""
        path = temporary_file(name="custom-name.md")

        assert path.endswith("custom-name.md")
        assert os.path.basename(path) == "custom-name.md"
        assert os.path.isdir(os.path.dirname(path))
        assert not os.path.exists(path)

    def test_name_directory_is_under_root(self):
        """Test that the holding directory is a child of the root."""
        path = Path(temporary_file(name="custom-name.md"))

        assert str(path.parent.parent) == config.root_temporary_directory

    def test_name_with_extension_raises(self):
        """Test that name and extension are mutually exclusive."""
        with pytest.raises(InvalidOptionsError, match="mutually exclusive"):
            temporary_file(name="custom-name.md", extension=".ext")

    def test_name_with_empty_extension_raises(self):
        """Test that an empty extension still counts as supplied."""
        with pytest.raises(InvalidOptionsError):
            temporary_file(name="custom-name.md", extension="")

    def test_name_with_none_extension(self):
        """Test that a None extension is allowed alongside a name."""
        path = temporary_file(name="custom-name.md", extension=None)

        assert path.endswith("custom-name.md")

    def test_name_with_extension_creates_nothing(self, temp_root):
        """Test that validation fails before any directory is created."""
        with pytest.raises(InvalidOptionsError):
            temporary_file(name="custom-name.md", extension="md")

        assert list(temp_root.iterdir()) == []

    def test_invalid_option_type_raises(self):
        """Test that non-string options are rejected."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            temporary_file(extension=123)

        assert exc_info.value.options == {"name": None, "extension": 123}

    def test_options_model(self):
        """Test passing a pre-built FileOptions."""
        path = temporary_file(options=FileOptions(extension="json"))

        assert path.endswith(".json")

    def test_options_model_and_keywords_raises(self):
        """Test that options and keywords cannot be combined."""
        with pytest.raises(InvalidOptionsError):
            temporary_file(options=FileOptions(extension="json"), name="a.json")

    def test_paths_are_unique_under_concurrency(self):
        """Test that 1000 concurrently generated paths never collide."""
        with ThreadPoolExecutor(max_workers=16) as executor:
            paths = list(executor.map(lambda _: temporary_file(), range(1000)))

        assert len(set(paths)) == 1000


class TestTemporaryDirectory:
    """Tests for temporary_directory."""

    def test_directory_exists(self):
        """Test that the directory is created under the root."""
        directory = temporary_directory()

        assert os.path.isdir(directory)
        assert directory.startswith(config.root_temporary_directory)

    def test_directory_prefix(self):
        """Test that the basename starts with the prefix."""
        directory = temporary_directory(prefix="name_")

        assert os.path.basename(directory).startswith("name_")
        assert os.path.isdir(directory)

    def test_directory_options_model(self):
        """Test passing a pre-built DirectoryOptions."""
        directory = temporary_directory(options=DirectoryOptions(prefix="p_"))

        assert os.path.basename(directory).startswith("p_")

    def test_directory_invalid_prefix(self):
        """Test that a non-string prefix is rejected."""
        with pytest.raises(InvalidOptionsError):
            temporary_directory(prefix=1)

    def test_directory_missing_root_raises(self, monkeypatch, tmp_path):
        """Test that creation is not recursive."""
        monkeypatch.setattr(config, "root_temporary_directory", str(tmp_path / "missing"))

        with pytest.raises(FileNotFoundError):
            temporary_directory()

    def test_directories_are_unique_under_concurrency(self):
        """Test that concurrently created directories never collide."""
        with ThreadPoolExecutor(max_workers=16) as executor:
            directories = list(executor.map(lambda _: temporary_directory(), range(1000)))

        assert len(set(directories)) == 1000


class TestFileOptions:
    """Tests for the option models."""

    def test_file_options_are_frozen(self):
        """Test that options cannot be mutated after validation."""
        options = FileOptions(extension="png")

        with pytest.raises(ValidationError):
            options.extension = "jpg"

    def test_file_options_reject_both(self):
        """Test that the model itself enforces mutual exclusivity."""
        with pytest.raises(ValueError, match="mutually exclusive"):
            FileOptions(name="a", extension="b")

    def test_empty_name_allows_extension(self):
        """Test that an empty name does not count as a name."""
        assert temporary_file(options=FileOptions(name="", extension="png")).endswith(".png")


class TestRootTemporaryDirectory:
    """Tests for the exported root directory."""

    def test_root_is_absolute_and_non_empty(self):
        """Test the exported constant."""
        assert len(tempy.root_temporary_directory) > 0
        assert os.path.isabs(tempy.root_temporary_directory)
