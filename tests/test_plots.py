from gd_models.plots import plot_training_curve


def test_plot_single_history(tmp_path):
    out = plot_training_curve([(0, 3.0), (100, 1.0), (200, 0.5)], tmp_path / "curve.png")
    assert out.exists() and out.stat().st_size > 0


def test_plot_multiple_histories(tmp_path):
    curves = {"a": [(0, 1.0), (100, 0.5)], "b": [(0, 0.7), (100, 0.6)], "empty": []}
    out = plot_training_curve(curves, tmp_path / "nested" / "curves.png", metric_name="mse")
    assert out.exists()


def test_import_keeps_callers_backend():
    import importlib

    import matplotlib

    import gd_models.plots

    previous = matplotlib.get_backend()
    matplotlib.use("pdf")
    try:
        importlib.reload(gd_models.plots)
        assert matplotlib.get_backend().lower() == "pdf"
    finally:
        matplotlib.use(previous)
