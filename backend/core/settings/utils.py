"""
Utility functions for Django settings configuration.

Environment-specific values live in per-environment .env files at the
repository root and are read through python-decouple.
"""

from pathlib import Path

from decouple import Config, RepositoryEnv
from decouple import config as default_config

ENV_FILES = {
    "development": ".env.dev",
    "production": ".env.production",
}

REPOSITORY_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def load_environment_config(environment):
    """
    Return a decouple config callable bound to the environment's .env file.

    Args:
        environment (str): 'development' or 'production'

    Returns:
        callable: config(key, default=..., cast=...) reading the matching .env
        file, or decouple's default (process environment + .env) when the
        file does not exist.
    """
    env_file_name = ENV_FILES.get(environment, ".env")
    env_file_path = REPOSITORY_ROOT / env_file_name

    if env_file_path.exists():
        print(f"✓ Loading environment: {environment} from {env_file_name}")
        return Config(RepositoryEnv(env_file_path))

    print(f"✗ Warning: {env_file_name} not found, using default config")
    return default_config
