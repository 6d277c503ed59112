"""
Configuration for report files, trajectory logs and plot output.
"""

from dataclasses import dataclass


@dataclass
class LoggingConfig:
    # Logging
    report_filename: str = "bm21_range_report.txt"
    log_filename: str = "trajectory_log.txt"
    plot_chart: bool = True
    animate_chart: bool = False
    show_plots: bool = False  # keep False for headless runs
