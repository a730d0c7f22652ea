from __future__ import annotations

"""
CLI entrypoint for the gradient-descent examples. Pick one via --experiment:
linear (y = 2x toy data), logistic (toy classifier), multi (housing CSV with
z-score scaling), unified (CSV, regression or classification with min-max
scaling) and pipeline (per-column ensemble).
"""

import argparse
import sys
from pathlib import Path

import pandas as pd

from gd_models import (
    LinearRegressionGD,
    LogisticRegressionGD,
    PerColumnEnsemble,
    compute_classification_metrics,
    compute_regression_metrics,
    load_dataset,
    make_train_test_split,
    parse_feature_vector,
    summarize_coefficients,
)
from gd_models import constants as C
from gd_models.metrics import majority_baseline, mean_baseline
from gd_models.plots import plot_training_curve

DEFAULT_CSV = {
    "multi": Path("data/housing.csv"),
    "unified": Path("data/income_data.csv"),
    "pipeline": Path("data/pipeline.csv"),
}


def describe_dataset(meta: dict):
    """Print a short summary of dataset size and columns."""
    print(f"Samples: {meta['num_samples']}, features: {meta['feature_count']}")
    print(f"Features: {meta['feature_names']} -> label: {meta['label_name']}")


def print_regression_metrics(label: str, metrics: dict):
    print(
        f"[{label}] MSE {metrics['mse']:.4f} | MAE {metrics['mae']:.4f} | R2 {metrics['r2']:.3f}"
    )


def print_classification_metrics(label: str, metrics: dict):
    """Nicely format the metric dict produced by compute_classification_metrics."""
    cm = metrics["confusion_matrix"]
    print(
        f"[{label}] Acc {metrics['accuracy']:.3f} | "
        f"Prec {metrics['precision']:.3f} | Rec {metrics['recall']:.3f} | "
        f"F1 {metrics['f1']:.3f} | ROC-AUC {metrics['roc_auc']:.3f} | "
        f"LogLoss {metrics['log_loss']:.4f}"
    )
    print(f"    Confusion matrix [[TN, FP], [FN, TP]]: {cm.tolist()}")


def build_arg_parser():
    """CLI parser with knobs for data, hyperparameters and experiment choice."""
    parser = argparse.ArgumentParser(
        description="Linear/logistic regression with batch gradient descent."
    )
    parser.add_argument(
        "--experiment",
        choices=["linear", "logistic", "multi", "unified", "pipeline"],
        default="linear",
    )
    parser.add_argument(
        "--csv-path",
        type=Path,
        default=None,
        help="Numeric CSV, last column is the label. Defaults to the sample under data/.",
    )
    parser.add_argument("--no-header", action="store_true", help="CSV has no header row.")
    parser.add_argument(
        "--mode",
        choices=["regression", "classification"],
        default="regression",
        help="Model used by the unified experiment.",
    )
    parser.add_argument(
        "--binary-columns",
        type=str,
        default=None,
        help="Comma-separated 0/1 per column for the pipeline experiment (1 = logistic).",
    )
    parser.add_argument(
        "--predict", type=str, default=None, help="Comma-separated raw feature values to score."
    )
    parser.add_argument("--lr", type=float, default=None, help="Override the learning rate.")
    parser.add_argument("--epochs", type=int, default=None, help="Override the epoch count.")
    parser.add_argument(
        "--test-size",
        type=float,
        default=0.0,
        help="Hold out this fraction for evaluation (0 trains on everything).",
    )
    parser.add_argument("--random-state", type=int, default=42)
    parser.add_argument("--plot", type=Path, default=None, help="Save the training curve here.")
    parser.add_argument("--quiet", action="store_true", help="Hide per-epoch progress.")
    return parser


def _hyperparams(args: argparse.Namespace, defaults: tuple[float, int]) -> tuple[float, int]:
    lr = args.lr if args.lr is not None else defaults[0]
    epochs = args.epochs if args.epochs is not None else defaults[1]
    return lr, epochs


def _query(args: argparse.Namespace, default):
    return parse_feature_vector(args.predict) if args.predict else default


def _load(args: argparse.Namespace):
    csv_path = args.csv_path or DEFAULT_CSV[args.experiment]
    try:
        X, y, meta = load_dataset(csv_path, header=not args.no_header)
    except FileNotFoundError:
        print(f"File not found: {csv_path}", file=sys.stderr)
        raise SystemExit(1)
    except ValueError as exc:
        print(f"Error reading {csv_path}: {exc}", file=sys.stderr)
        raise SystemExit(1)
    describe_dataset(meta)
    return X, y, meta


def _split(args: argparse.Namespace, X: pd.DataFrame, y: pd.Series, stratify: bool = False):
    """Return (X_train, y_train, X_test, y_test); the test half is None without --test-size."""
    if not args.test_size:
        return X, y, None, None
    train_ids, test_ids = make_train_test_split(
        X, y, test_size=args.test_size, random_state=args.random_state, stratify=stratify
    )
    print(f"Train size: {len(train_ids)}, Test size: {len(test_ids)}")
    return X.iloc[train_ids], y.iloc[train_ids], X.iloc[test_ids], y.iloc[test_ids]


def _maybe_plot(args: argparse.Namespace, history, metric_name: str):
    if args.plot:
        path = plot_training_curve(
            history, args.plot, metric_name=metric_name, title=f"{args.experiment} training"
        )
        print(f"Saved training curve to {path}")


def run_linear(args: argparse.Namespace):
    """Single-feature regression on y = 2x."""
    lr, epochs = _hyperparams(args, C.LINEAR_DEFAULTS)
    model = LinearRegressionGD(lr=lr, epochs=epochs, normalize=None, verbose=not args.quiet)
    model.fit(C.LINEAR_TOY_X, C.LINEAR_TOY_Y)

    queries = _query(args, [C.LINEAR_TOY_QUERY])
    print(f"Learned bias: {model.intercept_:.6f}")
    print(f"Learned weight: {model.coef_[0]:.6f}")
    for x in queries:
        print(f"Prediction for {x:g}: {model.predict([x]):.4f}")
    _maybe_plot(args, model.history_, "mse")
    return model


def run_logistic(args: argparse.Namespace):
    """Single-feature classifier whose class flips between 3 and 4."""
    lr, epochs = _hyperparams(args, C.LOGISTIC_DEFAULTS)
    model = LogisticRegressionGD(lr=lr, epochs=epochs, normalize=None, verbose=not args.quiet)
    model.fit(C.LOGISTIC_TOY_X, C.LOGISTIC_TOY_Y)

    queries = _query(args, list(C.LOGISTIC_TOY_QUERIES))
    for x in queries:
        print(f"Prediction probability for {x:g}: {model.predict_proba([x]):.4f}")
        print(f"Prediction class for {x:g}: {model.predict([x])}")
    _maybe_plot(args, model.history_, "log_loss")
    return model


def run_multi(args: argparse.Namespace):
    """Multi-feature regression on the housing CSV with z-score scaling."""
    lr, epochs = _hyperparams(args, C.MULTI_DEFAULTS)
    X, y, meta = _load(args)
    X_train, y_train, X_test, y_test = _split(args, X, y)

    model = LinearRegressionGD(lr=lr, epochs=epochs, normalize="zscore", verbose=not args.quiet)
    model.fit(X_train, y_train)

    if X_test is not None:
        print_regression_metrics("Mean baseline", mean_baseline(y_train, y_test))
        print_regression_metrics("GD linear", compute_regression_metrics(y_test, model.predict(X_test)))

    query = _query(args, C.HOUSING_QUERY)
    print(f"Predicted value for {query}: {model.predict(query):.2f}")

    weights = summarize_coefficients(model.coef_, meta["feature_names"], top_k=meta["feature_count"])
    print(f"Bias (standardized space): {model.intercept_:.4f}")
    print("Weights (standardized space):")
    print(weights["positive"])
    _maybe_plot(args, model.history_, "mse")
    return model


def run_unified(args: argparse.Namespace):
    """Regression or classification on min-max scaled features, random init."""
    lr, epochs = _hyperparams(args, C.UNIFIED_DEFAULTS)
    X, y, meta = _load(args)
    classify = args.mode == "classification"
    X_train, y_train, X_test, y_test = _split(args, X, y, stratify=classify)

    model_cls = LogisticRegressionGD if classify else LinearRegressionGD
    model = model_cls(
        lr=lr,
        epochs=epochs,
        normalize="minmax",
        random_state=args.random_state,
        verbose=not args.quiet,
    )
    model.fit(X_train, y_train)

    if X_test is not None:
        if classify:
            print_classification_metrics("Majority baseline", majority_baseline(y_train, y_test))
            print_classification_metrics(
                "GD logistic", compute_classification_metrics(y_test, model.predict_proba(X_test))
            )
        else:
            print_regression_metrics("Mean baseline", mean_baseline(y_train, y_test))
            print_regression_metrics(
                "GD linear", compute_regression_metrics(y_test, model.predict(X_test))
            )

    query = _query(args, C.INCOME_QUERY)
    score = model.predict_proba(query) if classify else model.predict(query)
    print(f"Prediction for input {query} = {score:.4f}")
    print(f"Weights: bias={model.intercept_:.4f}, {model.coef_.tolist()}")
    _maybe_plot(args, model.history_, model.link.metric_name)
    return model


def run_pipeline(args: argparse.Namespace):
    """Per-column ensemble: one sub-model per feature, predictions averaged."""
    lr, epochs = _hyperparams(args, C.PIPELINE_DEFAULTS)
    X, y, meta = _load(args)
    is_binary = (
        [bool(int(v)) for v in parse_feature_vector(args.binary_columns)]
        if args.binary_columns
        else C.PIPELINE_BINARY_COLUMNS
    )
    X_train, y_train, X_test, y_test = _split(args, X, y)

    ensemble = PerColumnEnsemble(
        is_binary, lr=lr, epochs=epochs, verbose=not args.quiet
    )
    ensemble.fit(X_train, y_train)

    if X_test is not None:
        print_regression_metrics("Mean baseline", mean_baseline(y_train, y_test))
        print_regression_metrics(
            "Per-column ensemble", compute_regression_metrics(y_test, ensemble.predict_many(X_test))
        )

    for name, sub_model in zip(meta["feature_names"], ensemble.models_):
        print(f"  {name}: {sub_model}")
    query = _query(args, C.PIPELINE_QUERY)
    print(f"Prediction: {ensemble.predict(query):.4f}")
    _maybe_plot(
        args,
        {meta["feature_names"][j]: h for j, h in ensemble.history_.items()},
        "metric",
    )
    return ensemble


EXPERIMENTS = {
    "linear": run_linear,
    "logistic": run_logistic,
    "multi": run_multi,
    "unified": run_unified,
    "pipeline": run_pipeline,
}


def main(args: argparse.Namespace | None = None):
    """Dispatch to the selected experiment."""
    args = args or build_arg_parser().parse_args()
    return EXPERIMENTS[args.experiment](args)


if __name__ == "__main__":
    main()
