"""Radix calculator settings."""
import os

HOST = os.getenv("RADIX_CALC_HOST", "0.0.0.0")
PORT = int(os.getenv("RADIX_CALC_PORT", "8080"))
DEBUG = os.getenv("RADIX_CALC_DEBUG", "0").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("RADIX_CALC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# "pie" or "bar"
CHART_KIND = os.getenv("RADIX_CALC_CHART_KIND", "pie")
