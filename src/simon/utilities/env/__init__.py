"""Environment configuration helpers."""

from simon.utilities.env.config import Configuration as Configuration
