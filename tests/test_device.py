"""Tests for the input snapshot and drawing surface."""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.device import RED, WHITE, Button, DrawText, FillRect, Frame, InputSnapshot


class TestInputSnapshot:
    """Tests for per-tick edge detection."""

    def test_just_pressed_lasts_one_tick(self):
        snapshot = InputSnapshot()
        snapshot.event(Button.ACTION_A, True)

        assert snapshot.pressed(Button.ACTION_A)
        assert snapshot.just_pressed(Button.ACTION_A)
        assert snapshot.just_changed(Button.ACTION_A)

        snapshot.update()

        assert snapshot.pressed(Button.ACTION_A)
        assert not snapshot.just_pressed(Button.ACTION_A)
        assert not snapshot.just_changed(Button.ACTION_A)

    def test_just_released(self):
        snapshot = InputSnapshot()
        snapshot.event(Button.POV_UP, True)
        snapshot.update()
        snapshot.event(Button.POV_UP, False)

        assert snapshot.just_released(Button.POV_UP)
        assert not snapshot.pressed(Button.POV_UP)

        snapshot.update()
        assert not snapshot.just_released(Button.POV_UP)

    def test_set_held(self):
        """Held buttons are pressed; everything else is released."""
        snapshot = InputSnapshot.pressing(Button.ACTION_B)
        snapshot.update()
        snapshot.set_held([Button.ACTION_A])

        assert snapshot.just_pressed(Button.ACTION_A)
        assert snapshot.just_released(Button.ACTION_B)
        assert not snapshot.pressed(Button.MENU_R)

    def test_pressing(self):
        snapshot = InputSnapshot.pressing(Button.MENU_L, Button.MENU_R)
        assert snapshot.just_pressed(Button.MENU_L)
        assert snapshot.just_pressed(Button.MENU_R)
        assert not snapshot.just_pressed(Button.ACTION_A)


class TestFrame:
    """Tests for recording draw calls."""

    def test_records_in_order(self):
        frame = Frame(320, 240)
        frame.fill_rect(0, 0, 320, 240, WHITE)
        frame.text(10, 20, 18.0, RED, "hello")

        assert frame.calls == [
            FillRect(x=0, y=0, width=320, height=240, color=WHITE),
            DrawText(x=10, y=20, size=18.0, color=RED, text="hello"),
        ]
        assert frame.texts() == ["hello"]

    def test_serializes_with_kind(self):
        frame = Frame()
        frame.text(1, 2, 12.0, WHITE, "x")

        data = frame.calls[0].model_dump()
        assert data["kind"] == "text"
        assert data["color"] == (255, 255, 255)
