from dino_runner.theme import (
    DAY_COLORS, NIGHT_COLORS, cloud_x, lerp_color, run_frame, theme_colors
)


def test_lerp_color_endpoints_and_midpoint():
    assert lerp_color("#000000", "#ffffff", 0.0) == "#000000"
    assert lerp_color("#000000", "#ffffff", 1.0) == "#ffffff"
    assert lerp_color("#000000", "#ff0000", 0.5) == "#800000"


def test_theme_colors_follow_night_progress():
    assert theme_colors(0.0) == DAY_COLORS
    assert theme_colors(1.0) == NIGHT_COLORS


def test_run_frame_alternates():
    assert run_frame(0.0, 360.0) == 0
    assert run_frame(90.0, 360.0) == 1
    assert run_frame(180.0, 360.0) == 0
    # Fast runs are capped at 60ms per frame
    assert run_frame(60.0, 6000.0) == 1


def test_cloud_drifts_and_wraps():
    assert cloud_x(0.0, 800) == -100
    assert cloud_x(1000.0, 800) == -70
    # One full lap is (800 + 100) px at 30 px/s
    assert cloud_x(30000.0, 800) == -100
