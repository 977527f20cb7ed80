"""Configuration settings and loading."""

from tuplesmith.config.settings import TuplesmithConfig, load_config

__all__ = ["TuplesmithConfig", "load_config"]
