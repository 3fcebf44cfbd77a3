"""
Global configuration for the logistic map spectrum service.

Holds the numeric constants of the pipeline plus the few
environment-driven settings (listen address, log level).
Values can be overridden in a .env file next to this module.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Paths ──
PROJECT_ROOT = Path(__file__).parent
TEMPLATES_DIR = PROJECT_ROOT / "templates"
TEMPLATE_NAME = "chart.html"

# ── Server ──
HOST = os.getenv("LOGMAP_HOST", "0.0.0.0")
PORT = int(os.getenv("LOGMAP_PORT", "3030"))

# ── Logistic Map ──
ITERATIONS = 100
START = 0.1
DEFAULT_RATE = "3.5"

# ── Charts ──
TIME_SPAN = 1.0       # time axis covers [0, 1)
FREQUENCY_SPAN = 0.5  # frequency axis covers [0, 0.5)
CHART_WIDTH = 400     # pixels
CHART_HEIGHT = 300
CHART_DPI = 100
RATE_FORMAT = "%.2f"
TICK_FORMAT = "%.2f"

# ── Logging ──
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
