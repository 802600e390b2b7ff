"""Shared fixtures for catch movement tests."""

import pytest

from catch_movement.core.parser import Fruit


@pytest.fixture
def make_fruit():
    """Build a fruit, optionally flagged as a hyperdash towards a dummy target."""
    def _make(x, start_time, hyper_dash=False):
        fruit = Fruit(x, start_time)
        if hyper_dash:
            fruit.hyper_dash_target = Fruit(x, start_time)
        return fruit
    return _make


@pytest.fixture
def beatmap_file(tmp_path):
    """Write a small osu!catch beatmap and return its path."""
    content = "\n".join([
        "osu file format v14",
        "",
        "[General]",
        "AudioFilename: audio.mp3",
        "Mode: 2",
        "",
        "[Metadata]",
        "Title:Test Song",
        "Version:Salad",
        "",
        "[Difficulty]",
        "HPDrainRate:5",
        "CircleSize:5",
        "OverallDifficulty:5",
        "ApproachRate:8",
        "",
        "// comment line",
        "[HitObjects]",
        "256,192,1000,1,0,0:0:0:0:",
        "0,192,1100,5,0,0:0:0:0:",
        "512,192,1200,1,0,0:0:0:0:",
        "500,192,3000,2,0,L|400:192,1,100",
        "256,192,4000,12,0,5000,0:0:0:0:",
        "300,192,6000,1,0,0:0:0:0:",
    ])
    path = tmp_path / "test.osu"
    path.write_text(content, encoding="utf-8")
    return path
