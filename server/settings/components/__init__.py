"""Shared helpers for settings components."""

from pathlib import Path

from decouple import AutoConfig

# Project root: the directory holding manage.py
BASE_DIR = Path(__file__).parent.parent.parent.parent

# Values are read from config/.env first, then from the environment
config = AutoConfig(search_path=BASE_DIR.joinpath('config'))
