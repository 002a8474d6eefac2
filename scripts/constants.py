"""Constants for the project."""

from pathlib import Path
from typing import Dict

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Configuration files
# ============================================================================
CONFIG_FOLDER = PROJECT_ROOT / "config"
PALETTE_YAML = CONFIG_FOLDER / "palette.yaml"

# ============================================================================
# Results directories
# ============================================================================
RESULTS_FOLDER = PROJECT_ROOT / "results"

# Standalone HTML pages (from render_html.py)
HTML_FOLDER = RESULTS_FOLDER / "html"

# Per-offset difference tables (from report_diff.py)
REPORTS_FOLDER = RESULTS_FOLDER / "reports"

# Classification grid figures (from plot_diff.py)
FIGURES_FOLDER = RESULTS_FOLDER / "figures"

# ============================================================================
# Grid layout and test data
# ============================================================================
ROW_WIDTH = 16
RANDOM_BLOB_SIZE = 1000
RANDOM_SEED = 42

# ============================================================================
# Plot styling
# ============================================================================
DIFF_PLOT_COLORS: Dict[str, str] = {
    "same": "#f5f5f5",
    "different": "#d62728",
    "no_other": "#8c8c8c",
    "empty": "#ffffff",
}
PLOT_DPI = 300
PLOT_TITLE_FONTSIZE = 14
