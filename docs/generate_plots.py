import sys
import os
from pathlib import Path

# Add parent directory to sys.path
sys.path.append(os.path.abspath(".."))

from gd_models import (
    LinearRegressionGD,
    LogisticRegressionGD,
    PerColumnEnsemble,
    load_dataset,
)
from gd_models import constants as C
from gd_models.plots import plot_training_curve

# Configuration
DATA_DIR = Path("../data")
OUT_DIR = Path("figures")


def run_toy_models():
    print("Generating plots for the toy linear/logistic examples...")
    linear = LinearRegressionGD(normalize=None).fit(C.LINEAR_TOY_X, C.LINEAR_TOY_Y)
    plot_training_curve(
        linear.history_, OUT_DIR / "linear_mse.png", metric_name="mse", title="y = 2x"
    )

    logistic = LogisticRegressionGD(normalize=None).fit(C.LOGISTIC_TOY_X, C.LOGISTIC_TOY_Y)
    plot_training_curve(
        logistic.history_,
        OUT_DIR / "logistic_loss.png",
        metric_name="log_loss",
        title="Toy classifier",
    )


def run_housing():
    print("Generating plots for the housing regression...")
    X, y, _ = load_dataset(DATA_DIR / "housing.csv")
    curves = {}
    for method in ("zscore", "minmax"):
        lr, epochs = C.MULTI_DEFAULTS
        model = LinearRegressionGD(lr=lr, epochs=epochs, normalize=method).fit(X, y)
        curves[method] = model.history_
    plot_training_curve(
        curves, OUT_DIR / "housing_mse.png", metric_name="mse", title="Housing: scaling methods"
    )


def run_pipeline():
    print("Generating plots for the per-column ensemble...")
    X, y, meta = load_dataset(DATA_DIR / "pipeline.csv")
    ensemble = PerColumnEnsemble(C.PIPELINE_BINARY_COLUMNS).fit(X, y)
    curves = {meta["feature_names"][j]: h for j, h in ensemble.history_.items()}
    plot_training_curve(
        curves, OUT_DIR / "pipeline_columns.png", metric_name="metric", title="Per-column sub-models"
    )


if __name__ == "__main__":
    run_toy_models()
    run_housing()
    run_pipeline()
    print(f"Done. Figures written to {OUT_DIR}/")
