import pytest

from hillclimb.core.heightmap import elevation_of, load_heightmap, parse_heightmap
from hillclimb.core.types import HeightmapError

from conftest import EXAMPLE, MAPS_DIR


def test_parse_example_values(example_grid):
    assert example_grid.cells == (
        (0, 0, 1, 16, 15, 14, 13, 12),
        (0, 1, 2, 17, 24, 23, 23, 11),
        (0, 2, 2, 18, 25, 25, 23, 10),
        (0, 2, 2, 19, 20, 21, 22, 9),
        (0, 1, 3, 4, 5, 6, 7, 8),
    )
    assert (example_grid.width, example_grid.height) == (8, 5)


def test_parse_locates_marks(example_grid):
    assert example_grid.start == (0, 0)
    assert example_grid.goal == (5, 2)


def test_parse_tolerates_surrounding_whitespace():
    grid = parse_heightmap("\n" + EXAMPLE + "\n\n")
    assert grid.height == 5


def test_elevation_of_marks():
    assert elevation_of("S") == 0
    assert elevation_of("E") == 25
    assert elevation_of("a") == 0
    assert elevation_of("z") == 25


@pytest.mark.parametrize("text, fragment", [
    ("", "empty"),
    ("Sab\nabcE", "row 1"),
    ("Sab\nab1\nabE", "row 1, col 2"),
    ("abc\nabE", "missing start"),
    ("Sbc\nabc", "missing goal"),
    ("SbS\nabE", "second start"),
    ("SbE\nabE", "second goal"),
])
def test_parse_rejects_malformed(text, fragment):
    with pytest.raises(HeightmapError, match=fragment):
        parse_heightmap(text)


def test_heightmap_error_is_value_error():
    assert issubclass(HeightmapError, ValueError)


@pytest.mark.parametrize("name", ["01_example.txt", "02_plateau.txt", "03_walled.txt"])
def test_bundled_maps_load(name):
    grid = load_heightmap(MAPS_DIR / name)
    assert grid.in_bounds(grid.start) and grid.in_bounds(grid.goal)


def test_load_rejects_non_utf8(tmp_path):
    bad = tmp_path / "latin.txt"
    bad.write_bytes(b"Sab\xff\nabE\n")
    with pytest.raises(HeightmapError, match="not UTF-8"):
        load_heightmap(bad)
