"""Configuration for rivercross searches."""

from rivercross.config.settings import DEFAULT_INITIAL_STATE, SearchConfig, load_config

__all__ = ["DEFAULT_INITIAL_STATE", "SearchConfig", "load_config"]
