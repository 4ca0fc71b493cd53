"""Configuration for locale_key_diff."""

from .loader import get_input, input_env_name, load_inputs
from .settings import ActionInputs

__all__ = ["ActionInputs", "get_input", "input_env_name", "load_inputs"]
