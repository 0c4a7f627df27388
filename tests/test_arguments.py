import pytest

from cubscene.arguments import check_file, check_file_name, parse_args
from cubscene.errors import CubError


@pytest.mark.parametrize("name", ["map.cub", "maps/level.cub", "a.b.cub"])
def test_check_file_name_accepts_cub(name):
    assert check_file_name(name) == name


def test_check_file_name_reports_actual_extension():
    with pytest.raises(CubError) as info:
        check_file_name("map.txt")
    assert "Actual extension: .txt" in str(info.value)
    assert "hidden file" not in str(info.value)


def test_check_file_name_hidden_file():
    with pytest.raises(CubError) as info:
        check_file_name("maps/.cub")
    assert "(hidden file)" in str(info.value)


@pytest.mark.parametrize("name", ["", "noext", "map.CUB", "map.cub.bak", ".cub"])
def test_check_file_name_rejects(name):
    with pytest.raises(CubError) as info:
        check_file_name(name)
    assert "is not ending with .cub" in str(info.value)


def test_check_file_existing(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text("NO a.xpm\n")
    assert check_file(str(scene)) == str(scene)


def test_check_file_directory(tmp_path):
    with pytest.raises(CubError) as info:
        check_file(str(tmp_path))
    assert "is a directory" in str(info.value)


def test_check_file_missing(tmp_path):
    with pytest.raises(CubError) as info:
        check_file(str(tmp_path / "absent.cub"))
    assert "file" in str(info.value)


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_parse_args_wrong_count(argv):
    with pytest.raises(CubError) as info:
        parse_args(argv)
    assert "Incorrect number of arguments" in str(info.value)


def test_parse_args_valid(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text("")
    assert parse_args([str(scene)]) == str(scene)


def test_parse_args_bad_extension_before_file_check(tmp_path):
    with pytest.raises(CubError) as info:
        parse_args([str(tmp_path / "missing.map")])
    assert "Actual extension: .map" in str(info.value)


def test_parse_args_directory_named_cub(tmp_path):
    folder = tmp_path / "level.cub"
    folder.mkdir()
    with pytest.raises(CubError) as info:
        parse_args([str(folder)])
    assert "is a directory" in str(info.value)