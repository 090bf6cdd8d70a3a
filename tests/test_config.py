import hypcanvas.config as config
from hypcanvas import (
    HypCanvas,
    PanConfig,
    RenderConfig,
    TraversalConfig,
    get_pan_config,
    get_render_config,
    get_traversal_config,
    set_pan_config,
    set_render_config,
    set_traversal_config,
)


def test_defaults() -> None:
    render = get_render_config()
    traversal = get_traversal_config()

    assert render.ideal_boundary_magsq == 0.999999
    assert render.collinear_epsilon == 1e-5
    assert render.marker_size == 30.0
    assert traversal.visibility_radius == 0.95
    assert traversal.search_radius == 0.2
    assert get_pan_config().radius_limit == 0.9


def test_getters_return_copies() -> None:
    first = get_render_config()
    first.marker_size = 99.0

    assert get_render_config().marker_size == 30.0


def test_setters_replace_module_defaults(monkeypatch) -> None:
    monkeypatch.setattr(config, "_RENDER_CONFIG", RenderConfig())
    monkeypatch.setattr(config, "_TRAVERSAL_CONFIG", TraversalConfig())
    monkeypatch.setattr(config, "_PAN_CONFIG", PanConfig())

    traversal = TraversalConfig(visibility_radius=0.5)
    set_traversal_config(traversal)
    traversal.visibility_radius = 0.1
    set_render_config(RenderConfig(marker_size=12.0))
    set_pan_config(PanConfig(radius_limit=0.7))

    assert get_traversal_config().visibility_radius == 0.5
    assert get_render_config().marker_size == 12.0

    canvas = HypCanvas()
    assert canvas.traversal_config.visibility_radius == 0.5
    assert canvas.pan_config.radius_limit == 0.7
