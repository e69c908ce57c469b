from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from ..config import DEFAULT_OUTPUT_DIR
from ..data.preprocess import MONTH_LABELS
from ..data.scan import count_by
from ..utils.io import ensure_dirs

FIGSIZE: Tuple[float, float] = (10, 6)
DPI = 300
YEAR_SPAN = "2010-2017"

BOROUGH_BASENAME = "rat_sightings_by_borough"
LOCATION_BASENAME = "rat_sightings_by_loc"
SEASONAL_BASENAME = "rat_sightings_by_sea"

MONTH_POSITION = {label: i for i, label in enumerate(MONTH_LABELS)}

# Right edge of the axes area when the legend sits outside the plot.
OUTSIDE_LEGEND_RECT = (0, 0, 0.78, 1)

THEME_RC = {
    "axes.titlesize": 14,
    "axes.titleweight": "bold",
    "axes.titlelocation": "left",
    "axes.labelsize": 12,
    "axes.labelweight": "bold",
    "xtick.labelsize": 10,
    "ytick.labelsize": 10,
    "legend.title_fontsize": 11,
    "legend.fontsize": 9,
    "axes.spines.top": False,
    "axes.spines.right": False,
}


def apply_theme():
    """Minimal white-grid look shared by every chart.

    Returns an rc context; global rcParams are restored when it exits.
    """
    return plt.rc_context({**sns.axes_style("whitegrid"), **THEME_RC})


def _savefig(
    fig: Figure,
    output_dir: Path,
    basename: str,
    dpi: int = DPI,
) -> Tuple[Path, Path]:
    ensure_dirs(output_dir)
    png = output_dir / f"{basename}.png"
    pdf = output_dir / f"{basename}.pdf"
    fig.savefig(png, dpi=dpi)
    fig.savefig(pdf)
    return png, pdf


def _no_data(ax: Axes) -> None:
    ax.text(0.5, 0.5, "No data", ha="center", va="center", transform=ax.transAxes, color="gray")


def _finish(
    fig: Figure,
    save_plot: bool,
    output_dir: str | os.PathLike,
    basename: str,
    label: str,
    dpi: int,
    rect: Tuple[float, float, float, float] = (0, 0, 1, 1),
) -> Figure:
    fig.tight_layout(rect=rect)
    if save_plot:
        _savefig(fig, Path(output_dir), basename, dpi=dpi)
        print(f"{label} plot saved to: {output_dir}")
    plt.close(fig)
    return fig


def borough_year_counts(df: pd.DataFrame) -> pd.DataFrame:
    return count_by(df, ["Borough", "sighting_year"], name="sightings_count")


def location_year_counts(df: pd.DataFrame) -> pd.DataFrame:
    return count_by(df, ["Location Type", "sighting_year"], name="sightings_count")


def month_year_counts(df: pd.DataFrame) -> pd.DataFrame:
    return count_by(df, ["sighting_month", "sighting_year"], name="sightings_count")


def _draw_borough(ax: Axes, summary: pd.DataFrame) -> None:
    if summary.empty:
        _no_data(ax)
    else:
        boroughs = sorted(summary["Borough"].unique())
        colors = dict(zip(boroughs, sns.color_palette("Set1", n_colors=max(len(boroughs), 3))))
        for borough, grp in summary.groupby("Borough", sort=True):
            grp = grp.sort_values("sighting_year")
            ax.plot(
                grp["sighting_year"].astype(int),
                grp["sightings_count"],
                marker="o",
                markersize=6,
                linewidth=1.8,
                color=colors[borough],
                label=borough,
            )
        ax.legend(title="Borough")
        ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.set_title(f"Rat Sightings in NYC by Borough ({YEAR_SPAN})")
    ax.set_xlabel("Year")
    ax.set_ylabel("Number of Sightings")


def _draw_location(ax: Axes, summary: pd.DataFrame) -> None:
    if summary.empty:
        _no_data(ax)
    else:
        summary = summary.assign(**{"Location Type": summary["Location Type"].fillna("(missing)")})
        wide = summary.pivot_table(
            index="sighting_year",
            columns="Location Type",
            values="sightings_count",
            aggfunc="sum",
            fill_value=0,
        ).sort_index()
        wide.index = wide.index.astype(int)
        palette = sns.color_palette("husl", n_colors=wide.shape[1])
        wide.plot(kind="bar", stacked=True, ax=ax, color=palette, width=0.85, rot=0)
        ax.legend(title="Location Type", fontsize=8, bbox_to_anchor=(1.02, 1), loc="upper left")
    ax.set_title(f"Rat Sightings by Location Type in NYC ({YEAR_SPAN})")
    ax.set_xlabel("Year")
    ax.set_ylabel("Number of Sightings")


def _draw_seasonal(ax: Axes, summary: pd.DataFrame) -> None:
    if summary.empty:
        _no_data(ax)
    else:
        years = sorted(summary["sighting_year"].astype(int).unique())
        palette = sns.color_palette("Blues", n_colors=len(years) + 2)[2:]
        for color, year in zip(palette, years):
            grp = summary[summary["sighting_year"] == year].assign(
                position=lambda d: d["sighting_month"].astype(str).map(MONTH_POSITION)
            )
            grp = grp.dropna(subset=["position"]).sort_values("position")
            ax.plot(
                grp["position"].astype(int),
                grp["sightings_count"],
                marker="o",
                markersize=6,
                linewidth=1.8,
                color=color,
                label=str(year),
            )
        ax.set_xticks(range(len(MONTH_LABELS)))
        ax.set_xticklabels(MONTH_LABELS)
        ax.legend(title="Year")
    ax.set_title(f"Seasonal Distribution of Rat Sightings in NYC ({YEAR_SPAN})")
    ax.set_xlabel("Month")
    ax.set_ylabel("Number of Sightings")


def plot_sightings_by_borough(
    df: pd.DataFrame,
    save_plot: bool = True,
    output_dir: str | os.PathLike = DEFAULT_OUTPUT_DIR,
    figsize: Tuple[float, float] = FIGSIZE,
    dpi: int = DPI,
) -> Figure:
    summary = borough_year_counts(df)
    with apply_theme():
        fig, ax = plt.subplots(figsize=figsize)
        _draw_borough(ax, summary)
        return _finish(fig, save_plot, output_dir, BOROUGH_BASENAME, "Borough", dpi)


def plot_sightings_by_location(
    df: pd.DataFrame,
    save_plot: bool = True,
    output_dir: str | os.PathLike = DEFAULT_OUTPUT_DIR,
    figsize: Tuple[float, float] = FIGSIZE,
    dpi: int = DPI,
) -> Figure:
    summary = location_year_counts(df)
    with apply_theme():
        fig, ax = plt.subplots(figsize=figsize)
        _draw_location(ax, summary)
        return _finish(
            fig, save_plot, output_dir, LOCATION_BASENAME, "Location", dpi, rect=OUTSIDE_LEGEND_RECT
        )


def plot_seasonal_distribution(
    df: pd.DataFrame,
    save_plot: bool = True,
    output_dir: str | os.PathLike = DEFAULT_OUTPUT_DIR,
    figsize: Tuple[float, float] = FIGSIZE,
    dpi: int = DPI,
) -> Figure:
    summary = month_year_counts(df)
    with apply_theme():
        fig, ax = plt.subplots(figsize=figsize)
        _draw_seasonal(ax, summary)
        return _finish(fig, save_plot, output_dir, SEASONAL_BASENAME, "Seasonal", dpi)


def generate_all_plots(
    df: pd.DataFrame,
    output_dir: str | os.PathLike = DEFAULT_OUTPUT_DIR,
    plot_cfg: Optional[Dict] = None,
) -> Dict[str, Figure]:
    plot_cfg = plot_cfg or {}
    figsize = (float(plot_cfg.get("width", FIGSIZE[0])), float(plot_cfg.get("height", FIGSIZE[1])))
    dpi = int(plot_cfg.get("dpi", DPI))
    out_dir = Path(output_dir)

    print("\n========================================")
    print("GENERATING ALL VISUALIZATIONS")
    print("========================================\n")
    if not out_dir.exists():
        ensure_dirs(out_dir)
        print(f"Created output directory: {out_dir}\n")

    figs: Dict[str, Figure] = {}
    print("1. Creating borough plot...")
    figs["borough"] = plot_sightings_by_borough(df, output_dir=out_dir, figsize=figsize, dpi=dpi)
    print("\n2. Creating location plot...")
    figs["location"] = plot_sightings_by_location(df, output_dir=out_dir, figsize=figsize, dpi=dpi)
    print("\n3. Creating seasonal plot...")
    figs["seasonal"] = plot_seasonal_distribution(df, output_dir=out_dir, figsize=figsize, dpi=dpi)

    print("\n========================================")
    print("ALL VISUALIZATIONS COMPLETE!")
    print(f"Plots saved to: {out_dir}")
    print("========================================\n")
    return figs


__all__ = [
    "apply_theme",
    "borough_year_counts",
    "location_year_counts",
    "month_year_counts",
    "plot_sightings_by_borough",
    "plot_sightings_by_location",
    "plot_seasonal_distribution",
    "generate_all_plots",
]
