"""Command line interface for the Π stability dashboard."""

from __future__ import annotations

import json
import logging
import math
import subprocess
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

import typer

from pi_stability.config import AppConfig, build_config, merge_config
from pi_stability.data.loaders import Failed, load_dataset
from pi_stability.data.models import Dataset
from pi_stability.metrics.derived import summarize_dataset
from pi_stability.metrics.filtering import TIME_RANGES, filter_series
from pi_stability.viz.zone_chart import plot_zone_chart, window_snapshot
from pi_stability.zones import classify

app = typer.Typer(help="Π Stability Index dashboard toolkit")
LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    if quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_config(config_path: str | None) -> AppConfig:
    return build_config(config_path=config_path) if config_path else AppConfig()


def _load_or_exit(cfg: AppConfig, data_file: str | None) -> tuple[Dataset, str | None]:
    state = load_dataset(url=cfg.data.url, path=data_file or cfg.data.path, timeout=cfg.data.timeout_seconds)
    if isinstance(state, Failed):
        typer.echo(f"Error: {state.message}", err=True)
        raise typer.Exit(code=1)
    return state.dataset, state.last_updated


def _emit(payload: Any, out_format: str) -> None:
    if out_format == "json":
        typer.echo(json.dumps(payload, indent=2))
    else:
        if isinstance(payload, dict):
            for key, value in payload.items():
                typer.echo(f"{key}: {value}")
        else:
            typer.echo(str(payload))


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


@app.command("summary")
def summary(
    data_url: str | None = typer.Option(None, help="Dataset URL (defaults to config)."),
    data_file: str | None = typer.Option(None, help="Local dataset JSON; takes precedence over the URL."),
    timeout: float | None = typer.Option(None, help="HTTP timeout in seconds (default: none)."),
    out_format: str = typer.Option("text", "--format", help="text|json"),
    config: str | None = typer.Option(None, help="Path to YAML config."),
    verbose: bool = typer.Option(False, "--verbose"),
    quiet: bool = typer.Option(False, "--quiet"),
) -> None:
    """Print the average Π, system status and per-asset card values."""
    _configure_logging(verbose, quiet)
    cfg = merge_config(_load_config(config), {"data": {"url": data_url, "timeout_seconds": timeout}})
    dataset, updated = _load_or_exit(cfg, data_file)

    result = summarize_dataset(
        dataset,
        lookback=cfg.display.change_lookback,
        price_threshold=cfg.display.card_price_threshold,
        last_updated=updated,
    )
    if out_format == "json":
        payload = {
            "avg_pi": round(result.avg_pi, 4),
            "status": result.status.status.value,
            "message": result.status.message,
            "last_updated": result.last_updated,
            "assets": [
                {**asdict(asset), "change_pct": _finite_or_none(asset.change_pct)} for asset in result.assets
            ],
        }
        _emit(payload, out_format)
        return

    typer.echo(f"Avg Π: {result.avg_pi:.2f} [{result.status.status.value}]")
    typer.echo(f"✦ {result.status.message}")
    for asset in result.assets:
        typer.echo(
            f"{asset.name} ({asset.ticker}): {asset.latest_pi:.2f} {asset.change_display} "
            f"{asset.status} {asset.price_display}"
        )
    if result.last_updated:
        typer.echo(f"Last updated: {result.last_updated}")


@app.command("classify")
def classify_value(
    value: float = typer.Argument(..., help="Π value to classify."),
    out_format: str = typer.Option("text", "--format", help="text|json"),
) -> None:
    """Classify a Π value into its risk zone."""
    status = classify(value)
    _emit({"value": value, "status": status.status.value, "message": status.message}, out_format)


@app.command("chart")
def chart(
    asset: str = typer.Argument(..., help="Asset key, e.g. BTC."),
    time_range: str | None = typer.Option(None, "--range", help="1D|1W|1M|1Y|MAX (default from config)."),
    output: str = typer.Option(..., help="Output path (.html or image suffix)."),
    backend: str = typer.Option("plotly", help="plotly|matplotlib"),
    data_url: str | None = typer.Option(None, help="Dataset URL (defaults to config)."),
    data_file: str | None = typer.Option(None, help="Local dataset JSON; takes precedence over the URL."),
    timeout: float | None = typer.Option(None, help="HTTP timeout in seconds (default: none)."),
    config: str | None = typer.Option(None, help="Path to YAML config."),
    verbose: bool = typer.Option(False, "--verbose"),
    quiet: bool = typer.Option(False, "--quiet"),
) -> None:
    """Render one asset's zone chart for a time range to a file."""
    _configure_logging(verbose, quiet)
    cfg = merge_config(_load_config(config), {"data": {"url": data_url, "timeout_seconds": timeout}})
    selected = time_range or cfg.display.default_time_range
    if selected not in TIME_RANGES:
        raise typer.BadParameter(f"--range must be one of: {', '.join(TIME_RANGES)}")
    if backend not in {"plotly", "matplotlib"}:
        raise typer.BadParameter("--backend must be plotly or matplotlib.")

    dataset, _ = _load_or_exit(cfg, data_file)
    if asset not in dataset:
        raise typer.BadParameter(f"Unknown asset '{asset}'. Available: {', '.join(dataset)}")

    window = filter_series(dataset[asset], selected)
    out_path = Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plot_zone_chart(
        window,
        time_range=selected,
        title=f"{asset} Π Index ({selected})",
        show=False,
        save_path=str(out_path),
        backend=backend,
    )
    snap = window_snapshot(window, cfg.display.tooltip_price_threshold)
    LOGGER.info("Rendered %d samples for %s", len(window), asset)
    typer.echo(f"{snap.date}  price {snap.price}  Π {snap.pi}")
    typer.echo(f"Saved chart: {out_path}")


@app.command("ui")
def launch_ui(
    port: int = typer.Option(8501, help="Port for Streamlit app."),
    server_headless: str = typer.Option(
        "true",
        help="Run Streamlit in headless mode (true|false).",
    ),
    streamlit_args: list[str] | None = typer.Argument(
        None,
        help="Additional args forwarded to Streamlit (e.g. --browser.gatherUsageStats false).",
    ),
) -> None:
    """Launch the Streamlit dashboard."""
    if server_headless.lower() not in {"true", "false"}:
        raise typer.BadParameter("--server-headless must be true or false.")
    repo_root = Path(__file__).resolve().parents[2]
    app_path = repo_root / "ui" / "streamlit_app.py"
    if not app_path.exists():
        raise typer.BadParameter(f"Streamlit app not found at: {app_path}")

    cmd = [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        str(app_path),
        "--server.port",
        str(port),
        "--server.headless",
        server_headless.lower(),
    ]
    cmd.extend(streamlit_args or [])
    raise typer.Exit(subprocess.call(cmd))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
