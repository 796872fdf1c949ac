"""Minimal Π dashboard pipeline example."""

from pi_stability.config import AppConfig
from pi_stability.data.loaders import Failed, load_dataset
from pi_stability.metrics.derived import summarize_dataset
from pi_stability.metrics.filtering import filter_series


def main() -> None:
    cfg = AppConfig()
    state = load_dataset(url=cfg.data.url)
    if isinstance(state, Failed):
        print("Error:", state.message)
        return

    summary = summarize_dataset(state.dataset, last_updated=state.last_updated)
    print("avg pi:", round(summary.avg_pi, 2), summary.status.status.value)
    for asset in summary.assets:
        window = filter_series(state.dataset[asset.key], "1W")
        print(asset.name, asset.change_display, asset.price_display, "1W samples:", len(window))


if __name__ == "__main__":
    main()
