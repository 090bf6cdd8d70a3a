import math

import pytest

from hypcanvas import (
    IDENTITY,
    ZERO,
    Anchor,
    Complex,
    DiskRenderingContext,
    DiskTurtle,
    Drawer,
    FrameTransition,
    MobiusTransform,
    Neighbor,
    PolygonGeometry,
    RecordingSurface,
    TraversalConfig,
    distance,
    regular_tiling_map,
    traverse,
)


def _drawer(view: MobiusTransform = IDENTITY):
    surface = RecordingSurface(500, 500)
    return surface, Drawer(DiskRenderingContext(surface, view))


def _marker(drawer: Drawer) -> None:
    drawer.draw_image(ZERO, "marker")


def _square_world():
    return regular_tiling_map(PolygonGeometry(4, 5))


def test_self_looping_anchor_terminates_after_one_draw() -> None:
    calls = []
    world = {
        "a": Anchor("a", [Neighbor("a", FrameTransition())], draw=lambda drawer: calls.append(drawer)),
    }
    _, drawer = _drawer()

    result = traverse(world, "a", drawer=drawer)

    assert [anchor_id for anchor_id, _ in result.drawn] == ["a"]
    assert len(calls) == 1
    assert result.visited == 2
    assert result.anchor_id == "a"
    assert result.view.isclose(IDENTITY)


def test_start_anchor_is_drawn_even_when_invisible() -> None:
    world = {"a": Anchor("a", draw=_marker)}
    far_view = MobiusTransform.origin_to_point(Complex(0.99, 0.0))
    surface, drawer = _drawer(far_view)

    result = traverse(world, "a", far_view, drawer=drawer)

    assert len(result.drawn) == 1
    assert surface.kinds() == ["draw_image"]


def test_unknown_neighbor_raises_key_error() -> None:
    world = {"a": Anchor("a", [Neighbor("missing", FrameTransition(offset=0.5))])}

    with pytest.raises(KeyError, match="missing"):
        traverse(world, "a")


def test_unknown_start_raises_key_error() -> None:
    with pytest.raises(KeyError, match="nowhere"):
        traverse({}, "nowhere")


def test_neighbors_beyond_visibility_are_pruned() -> None:
    world = {
        "a": Anchor("a", [Neighbor("b", FrameTransition(offset=10.0))], draw=_marker),
        "b": Anchor("b", [Neighbor("a", FrameTransition())], draw=_marker),
    }

    result = traverse(world, "a")

    assert [anchor_id for anchor_id, _ in result.drawn] == ["a"]
    assert result.visited == 2


def test_two_anchor_strip_is_deduplicated() -> None:
    there = FrameTransition(offset=0.5)
    back = FrameTransition(bearing=math.pi, offset=0.5, orientation=math.pi)
    world = {
        "a": Anchor("a", [Neighbor("b", there)], draw=_marker),
        "b": Anchor("b", [Neighbor("a", back), Neighbor("a", there)], draw=_marker),
    }

    result = traverse(world, "a")
    ids = [anchor_id for anchor_id, _ in result.drawn]

    assert ids[:3] == ["a", "b", "a"]
    positions = [turtle.position() for _, turtle in result.drawn]
    assert distance(positions[0], positions[1]) == pytest.approx(0.5)
    assert distance(positions[0], positions[2]) == pytest.approx(1.0)
    # the walk back to the start is recognised as a duplicate
    assert len({round(p.a, 6) for p in positions}) == len(positions)
    assert all(abs(p.b) < 1e-9 for p in positions)


def test_regular_tiling_draws_each_visible_tile_once() -> None:
    surface, drawer = _drawer()
    config = TraversalConfig()

    result = traverse(_square_world(), "tile", drawer=drawer, config=config)

    positions = [turtle.position() for _, turtle in result.drawn]
    assert len(positions) > 20
    assert surface.kinds().count("fill") == len(positions)
    for i, p in enumerate(positions):
        if i:
            assert p.magnitude() < config.visibility_radius
        for q in positions[:i]:
            assert distance(p, q) >= config.search_radius


def test_first_ring_of_tiles_is_complete() -> None:
    geometry = PolygonGeometry(4, 5)

    result = traverse(regular_tiling_map(geometry), "tile")

    positions = [turtle.position() for _, turtle in result.drawn]
    for edge in range(geometry.sides):
        turtle = DiskTurtle()
        turtle.apply(geometry.neighbor_transition(edge))
        assert any(turtle.position().isclose(p, 1e-9) for p in positions)


def test_smaller_visibility_radius_draws_fewer_tiles() -> None:
    world = _square_world()

    wide = traverse(world, "tile")
    narrow = traverse(world, "tile", config=TraversalConfig(visibility_radius=0.6))

    assert 1 < len(narrow.drawn) < len(wide.drawn)


def test_traversal_is_deterministic() -> None:
    world = _square_world()
    view = MobiusTransform.origin_to_point(Complex(0.1, 0.25))
    first_surface, first_drawer = _drawer(view)
    second_surface, second_drawer = _drawer(view)

    traverse(world, "tile", view, drawer=first_drawer)
    traverse(world, "tile", view, drawer=second_drawer)

    assert first_surface.ops
    assert first_surface.ops == second_surface.ops


def test_view_is_recentred_on_closest_anchor() -> None:
    geometry = PolygonGeometry(4, 5)
    world = regular_tiling_map(geometry)
    neighbor = DiskTurtle()
    neighbor.apply(geometry.neighbor_transition(0))
    view = MobiusTransform.point_to_origin(neighbor.position())

    result = traverse(world, "tile", view)

    assert result.turtle.position().isclose(neighbor.position(), 1e-9)
    assert result.view.xform(ZERO).isclose(ZERO, 1e-9)
    viewed = [view.xform(turtle.position()).magnitude() for _, turtle in result.drawn]
    assert view.xform(result.turtle.position()).magnitude() == pytest.approx(min(viewed))

    again = traverse(world, "tile", result.view)
    assert again.turtle.position() == ZERO
    assert again.view.isclose(result.view, 1e-9)


def test_identity_view_stays_on_start_anchor() -> None:
    result = traverse(_square_world(), "tile")

    assert result.anchor_id == "tile"
    assert result.turtle.xform is IDENTITY
    assert result.view.isclose(IDENTITY)
