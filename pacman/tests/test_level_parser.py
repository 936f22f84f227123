"""Tests for the ASCII level parser."""

import os

import pytest

from coordinate import Coordinate
from level_errors import (
    ArgumentError,
    LevelCharacterError,
    LevelFormatError,
    NoPacmanSpawnPointError,
)
from level_parser import (
    ParserConfig,
    level_name_from_path,
    list_level_files,
    load_level,
    parse_level,
)
from tiles import Tile

LEVELS_DIR = os.path.normpath(os.path.join(os.path.dirname(__file__), "..", "..", "data", "levels"))


def test_parse_simple_level():
    text = "#####\n#P.G#\n#####\n"
    level = parse_level(text)
    assert level.width == 5
    assert level.height == 3
    assert level.pacman_spawns == [Coordinate(1, 1)]
    assert level.ghost_spawns == [Coordinate(3, 1)]
    assert level.get_field(2, 1).tile is Tile.DOT


def test_parse_all_tile_types():
    text = "#_ .oPG#"
    level = parse_level(text)
    tiles = [level.get_field(x, 0).tile for x in range(level.width)]
    assert tiles == [
        Tile.WALL,
        Tile.BACKGROUND,
        Tile.SPACE,
        Tile.DOT,
        Tile.POWERUP,
        Tile.PLAYER_SPAWN,
        Tile.GHOST_SPAWN,
        Tile.WALL,
    ]


def test_fields_carry_their_coordinates():
    level = parse_level("#P#\n#.#")
    for y in range(level.height):
        for x in range(level.width):
            assert level.get_field(x, y).coordinate == Coordinate(x, y)


def test_spawns_registered_in_scan_order():
    text = "G.P\nP.G\n.G."
    level = parse_level(text)
    assert level.pacman_spawns == [Coordinate(2, 0), Coordinate(0, 1)]
    assert level.ghost_spawns == [Coordinate(0, 0), Coordinate(2, 1), Coordinate(1, 2)]


def test_spawn_glyph_stays_in_grid():
    level = parse_level("#P#")
    assert level.get_field(1, 0).tile is Tile.PLAYER_SPAWN


def test_crlf_line_endings_accepted():
    level = parse_level("###\r\n#P#\r\n###\r\n")
    assert level.height == 3
    assert level.width == 3


def test_trailing_spaces_are_cells():
    level = parse_level("P. \n.. ")
    assert level.width == 3
    assert level.get_field(2, 1).tile is Tile.SPACE


def test_placeholder_name():
    assert parse_level("#P#").name == "Unnamed Level"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def test_missing_pacman_spawn_raises():
    text = "###\n#.#\n###\n"
    with pytest.raises(NoPacmanSpawnPointError, match="No pacman spawn"):
        parse_level(text)


def test_test_mode_allows_missing_spawn():
    level = parse_level("###\n#.#\n###\n", ParserConfig(test_mode=True))
    assert level.pacman_spawns == []


def test_ragged_rows_raises():
    text = "####\n###\n"
    with pytest.raises(LevelFormatError, match="ragged"):
        parse_level(text)


def test_ragged_rows_raises_before_missing_spawn():
    with pytest.raises(LevelFormatError):
        parse_level("#.#\n#.")


def test_unknown_character_raises():
    text = "#P#\n#?#"
    with pytest.raises(LevelCharacterError, match=r"'\?'") as exc_info:
        parse_level(text)
    assert exc_info.value.char == "?"
    assert (exc_info.value.x, exc_info.value.y) == (1, 1)


def test_empty_text_raises():
    with pytest.raises(LevelFormatError, match="Empty"):
        parse_level("")
    with pytest.raises(LevelFormatError):
        parse_level("\n\n")


def test_none_text_raises():
    with pytest.raises(ArgumentError):
        parse_level(None)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_level("#?#")


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------


def test_to_string_round_trip():
    text = "\n".join(["#######", "#P.o.G#", "#_# #.#", "#######"])
    level = parse_level(text)
    again = parse_level(str(level))
    assert (again.width, again.height) == (level.width, level.height)
    for y in range(level.height):
        for x in range(level.width):
            assert again.get_field(x, y).tile is level.get_field(x, y).tile


def test_to_string_uses_platform_line_separator():
    level = parse_level("#P#\n#.#")
    assert str(level) == os.linesep.join(["#P#", "#.#"])


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "path, expected",
    [
        ("levels/my_cool_level.txt", "my cool level"),
        ("C:\\games\\pacman\\big_maze.txt", "big maze"),
        ("mixed/dir\\deep_one.lvl", "deep one"),
        ("plain", "plain"),
        ("archive.v2.txt", "archive.v2"),
    ],
)
def test_level_name_from_path(path, expected):
    assert level_name_from_path(path) == expected


def test_level_name_from_empty_path_raises():
    with pytest.raises(ArgumentError):
        level_name_from_path("")


def test_load_level_names_level_after_file(tmp_path):
    path = tmp_path / "tiny_maze.txt"
    path.write_text("#####\n#P.G#\n#####\n")
    level = load_level(str(path))
    assert level.name == "tiny maze"
    assert level.width == 5


def test_load_level_none_path_raises():
    with pytest.raises(ArgumentError):
        load_level(None)


def test_load_level_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_level(str(tmp_path / "nope.txt"))


def test_list_level_files_sorted(tmp_path):
    for name in ("b.txt", "a.txt", "notes.md"):
        (tmp_path / name).write_text("#P#")
    paths = list_level_files(str(tmp_path))
    assert [os.path.basename(p) for p in paths] == ["a.txt", "b.txt"]


def test_load_all_existing_levels():
    txt_files = list_level_files(LEVELS_DIR)
    assert len(txt_files) >= 4, f"Expected at least 4 level files, found {len(txt_files)}"
    for path in txt_files:
        level = load_level(path)
        assert level.width > 0
        assert level.height > 0
        assert len(level.fields) == level.width * level.height
        assert level.pacman_spawns
        level.validate()
