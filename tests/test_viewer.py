"""Headless smoke test of the pygame viewer."""

import os
from pathlib import Path

import pytest

pygame = pytest.importorskip("pygame")

from hillclimb.app import viewer as viewer_module
from hillclimb.core.heightmap import load_heightmap


@pytest.fixture
def viewer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    grid = load_heightmap(viewer_module.MAP_FILES["01_example"])
    v = viewer_module.Viewer(grid, "01_example")
    yield v
    pygame.quit()


def test_elevation_color_endpoints():
    assert viewer_module.elevation_color(0) == viewer_module.VALLEY
    assert viewer_module.elevation_color(25) == viewer_module.SUMMIT


def test_cell_size_is_clamped():
    small = load_heightmap(viewer_module.MAP_FILES["03_walled"])
    assert viewer_module.cell_px_for(small) == viewer_module.CELL_PX_RANGE[1]


def test_astar_run_draws_path(viewer):
    assert viewer.run_to_end() == "done"
    assert len(viewer.path) == 31
    assert viewer.metrics["path_len"] == 31
    viewer.draw()


def test_dijkstra_and_restart(viewer):
    viewer.use_algorithm("Dijkstra")
    assert viewer.algo.name == "Dijkstra"
    assert viewer.run_to_end() == "done"
    assert len(viewer.path) == 31
    viewer.restart()
    assert viewer.path == [] and viewer.status == "idle"


def test_best_low_point_replay(viewer):
    viewer.start_from_best_low_point()
    assert viewer.start != viewer.grid.start
    assert viewer.run_to_end() == "done"
    assert len(viewer.path) == 29
    viewer.draw()


def test_walled_map_reports_no_path(viewer):
    viewer.open_map("03_walled")
    assert viewer.map_key == "03_walled"
    assert viewer.run_to_end() == "no_path"
    viewer.start_from_best_low_point()
    assert viewer.status == "no_path"
    viewer.draw()


def test_finished_search_ignores_further_steps(viewer):
    viewer.run_to_end()
    popped = viewer.metrics["popped"]
    viewer.step()
    viewer.toggle_run()
    assert viewer.metrics["popped"] == popped
    assert not viewer.running


def test_map_key_for_relative_path(monkeypatch):
    bundled = viewer_module.MAP_FILES["02_plateau"]
    monkeypatch.chdir(bundled.parent.parent)
    assert viewer_module.map_key_for(Path("maps") / "02_plateau.txt") == "02_plateau"
    assert viewer_module.map_key_for(os.path.join("maps", "..", "maps", "02_plateau.txt")) == "02_plateau"
    assert viewer_module.map_key_for(Path("elsewhere.txt")) == "custom"
