import logging
import math

import pytest

import hypcanvas.canvas as canvas_module
from hypcanvas import (
    IDENTITY,
    ONE,
    ZERO,
    Complex,
    FrameStatus,
    HypCanvas,
    MobiusTransform,
    PolygonGeometry,
    RecordingSurface,
    ScreenXY,
    SingularTransform,
    pan_view,
    regular_tiling_map,
)


def _canvas(**kwargs) -> HypCanvas:
    kwargs.setdefault("frame_status", FrameStatus(period=1e9))
    return HypCanvas(500, **kwargs)


@pytest.mark.parametrize("theta", [0.0, 0.5, math.pi, -2.0])
def test_polar_zero_is_origin(theta: float) -> None:
    assert HypCanvas.polar(0.0, theta) == ZERO


def test_curvature_and_metrics() -> None:
    canvas = _canvas()
    p = HypCanvas.polar(1.25, 0.3)

    assert canvas.K == -1
    assert HypCanvas.origin_metric(p) == pytest.approx(1.25)
    assert HypCanvas.metric(ZERO, p) == pytest.approx(1.25)


def test_screen_conversions() -> None:
    canvas = _canvas()

    assert canvas.xy_to_complex(ScreenXY(250, 250)).isclose(ZERO)
    assert canvas.xy_to_complex(ScreenXY(250, 0)).isclose(Complex(0.0, 1.0))
    assert canvas.complex_to_xy(ONE) == ScreenXY(500.0, 250.0)


def test_pan_view_drags_start_onto_end() -> None:
    start = Complex(0.1, -0.2)
    end = Complex(-0.3, 0.4)

    view = pan_view(IDENTITY, start, end)

    assert view.xform(start).isclose(end, 1e-9)


def test_pan_view_clamps_both_points() -> None:
    view = pan_view(IDENTITY, ZERO, Complex(3.0, 0.0), radius_limit=0.5)

    assert view.xform(ZERO).isclose(Complex(0.5, 0.0))


def test_screen_move_updates_view() -> None:
    canvas = _canvas()

    moved = canvas.screen_move(ScreenXY(250, 250), ScreenXY(300, 250))

    assert moved is True
    assert canvas.view.xform(ZERO).isclose(Complex(0.2, 0.0), 1e-9)


def test_screen_move_from_corner_is_clamped() -> None:
    canvas = _canvas()

    assert canvas.screen_move(ScreenXY(0, 0), ScreenXY(250, 250))
    assert canvas.view.b.magnitude() < 1.0


def test_singular_gesture_is_discarded(monkeypatch, caplog) -> None:
    canvas = _canvas()
    before = MobiusTransform.rotate(0.4)
    canvas.view = before

    def _raise(*args, **kwargs):
        raise SingularTransform("degenerate drag")

    monkeypatch.setattr(canvas_module, "pan_view", _raise)
    with caplog.at_level(logging.WARNING, logger="hypcanvas.canvas"):
        moved = canvas.screen_move(ScreenXY(10, 10), ScreenXY(20, 20))

    assert moved is False
    assert canvas.view is before
    assert "Discarding pan gesture" in caplog.text


def test_post_redraw_coalesces_requests() -> None:
    scheduled = []
    canvas = _canvas(scheduler=scheduled.append)

    canvas.add_draw_func(lambda drawer: None)
    canvas.add_draw_func(lambda drawer: None)
    canvas.screen_move(ScreenXY(250, 250), ScreenXY(260, 250))

    assert len(scheduled) == 1
    assert canvas.pending_redraw

    scheduled[0]()
    assert not canvas.pending_redraw

    canvas.post_redraw()
    assert len(scheduled) == 2


def test_draw_runs_draw_funcs_on_cleared_surface() -> None:
    canvas = _canvas()
    calls = []
    canvas.add_draw_func(lambda drawer: calls.append("first"))
    canvas.add_draw_func(lambda drawer: drawer.draw_line(Complex(0.1, 0.1), Complex(-0.1, -0.1)))
    surface = RecordingSurface()

    result = canvas.draw(surface)

    assert result is None
    assert calls == ["first"]
    assert surface.ops[0] == ("clear_rect", 0, 0, 500, 500)
    assert surface.kinds()[-1] == "stroke"
    assert canvas.frame_status.pending == 1


def test_draw_without_surface_only_clears_pending_flag() -> None:
    canvas = _canvas(scheduler=lambda callback: None)
    canvas.post_redraw()

    assert canvas.draw() is None
    assert not canvas.pending_redraw


def test_attach_schedules_redraw_on_surface() -> None:
    scheduled = []
    canvas = _canvas(scheduler=scheduled.append)
    surface = canvas.attach(RecordingSurface())

    scheduled[0]()

    assert surface.ops


def test_clear_and_reset() -> None:
    canvas = _canvas()
    canvas.add_draw_func(lambda drawer: None)
    canvas.view = MobiusTransform.rotate(1.0)

    canvas.clear()
    assert canvas.view != IDENTITY
    surface = RecordingSurface()
    canvas.draw(surface)
    assert surface.kinds()[-1] == "fill_style"

    canvas.reset()
    assert canvas.view is IDENTITY


def test_set_map_rejects_unknown_anchor() -> None:
    canvas = _canvas()

    with pytest.raises(KeyError):
        canvas.set_map({}, "missing")


def test_draw_with_world_recentres_after_pan() -> None:
    canvas = _canvas()
    canvas.set_map(regular_tiling_map(PolygonGeometry(4, 5)), "tile")

    first = canvas.draw(RecordingSurface())
    assert first is not None
    assert len(first.drawn) > 20
    assert canvas.view.isclose(IDENTITY)

    for _ in range(6):
        canvas.screen_move(ScreenXY(250, 250), ScreenXY(330, 250))
        canvas.draw(RecordingSurface())
        # the focused tile always ends up near the disk origin
        assert canvas.view.xform(ZERO).magnitude() < 0.5

    surface = RecordingSurface()
    result = canvas.draw(surface)
    assert surface.kinds().count("fill") == len(result.drawn) + 1


def test_mouse_move_requires_a_button() -> None:
    canvas = _canvas()

    assert canvas.mouse_move(ScreenXY(300, 250), ScreenXY(50, 0), buttons=0) is False
    assert canvas.view is IDENTITY

    assert canvas.mouse_move(ScreenXY(300, 250), ScreenXY(50, 0), buttons=1) is True
    assert canvas.view.xform(ZERO).isclose(Complex(0.2, 0.0), 1e-9)


def test_touch_tracks_a_single_touch() -> None:
    canvas = _canvas()
    canvas.touch_start(1, ScreenXY(250, 250))
    canvas.touch_start(2, ScreenXY(0, 0))

    assert canvas.touch_move(2, ScreenXY(10, 10)) is False
    assert canvas.touch_move(1, ScreenXY(300, 250)) is True
    assert canvas.view.xform(ZERO).isclose(Complex(0.2, 0.0), 1e-9)

    canvas.touch_end(1)
    assert canvas.touch_move(1, ScreenXY(350, 250)) is False


def _marker_ops(surface: RecordingSurface):
    return [op for op in surface.ops if op[0] == "draw_image"]


def test_draw_funcs_stay_put_when_focus_is_rebased() -> None:
    canvas = _canvas()
    canvas.add_draw_func(lambda drawer: drawer.draw_image(ZERO, "marker"))
    canvas.set_map(regular_tiling_map(PolygonGeometry(4, 5)), "tile")
    canvas.screen_move(ScreenXY(250, 250), ScreenXY(400, 250))
    panned = canvas.view

    first = RecordingSurface()
    canvas.draw(first)
    # the pan pushed the start tile off center, so the focus was re-based
    assert not canvas.view.isclose(panned)

    second = RecordingSurface()
    canvas.draw(second)

    (op1,) = _marker_ops(first)
    (op2,) = _marker_ops(second)
    assert op1[2:4] == pytest.approx((385.0, 235.0))
    assert op2[2:4] == pytest.approx(op1[2:4])


def test_set_map_and_reset_drop_world_frame() -> None:
    canvas = _canvas()
    canvas.set_map(regular_tiling_map(PolygonGeometry(4, 5)), "tile")
    canvas.screen_move(ScreenXY(250, 250), ScreenXY(400, 250))
    canvas.draw(RecordingSurface())
    assert not canvas.world_frame.isclose(IDENTITY)

    canvas.reset()
    assert canvas.world_frame is IDENTITY

    canvas.set_map(regular_tiling_map(PolygonGeometry(4, 5)), "tile")
    canvas.screen_move(ScreenXY(250, 250), ScreenXY(400, 250))
    canvas.draw(RecordingSurface())
    canvas.set_map(regular_tiling_map(PolygonGeometry(5, 4)), "tile")
    assert canvas.world_frame is IDENTITY
