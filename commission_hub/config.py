"""
Configuration for the application
"""

import os

import yaml

from commission_hub.utils.logger import app_logger

APP_NAME = "commission_hub_api"
APP_VERSION = "0.1.0"

# number of ranked rows in the management overview
TOP_PERFORMER_LIMIT = 5

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'conf', 'config.yml')


def load_config(config_path: str = None) -> dict:
    """Load the YAML configuration, an external file named by APP_CONFIG wins over the packaged one"""
    config_path = config_path or os.getenv("APP_CONFIG")
    if config_path and os.path.exists(config_path):
        app_logger.info(f"Loading external config from: {config_path}")
    else:
        if config_path:
            app_logger.warning(f"Config file {config_path} not found, falling back to the packaged config")
        config_path = DEFAULT_CONFIG_PATH
        app_logger.info(f"Loading internal config from: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def get_env_config(config: dict) -> dict:
    """Return the settings block of the active environment (APP_ENV overrides current_env)"""
    current_env = os.getenv("APP_ENV", config['current_env'])
    if current_env not in config['environments']:
        raise KeyError(f"Unknown environment '{current_env}' in config")
    env_config = dict(config['environments'][current_env])
    env_config['name'] = current_env
    return env_config


def build_database_url(db_config: dict) -> str:
    """DATABASE_URL wins, then an explicit url, then the url assembled from its parts"""
    url = os.getenv("DATABASE_URL") or db_config.get('url')
    if url:
        return url
    return (f"{db_config.get('driver', 'mysql+aiomysql')}://{db_config['username']}:{db_config['password']}"
            f"@{db_config['host']}:{db_config['port']}/{db_config['name']}")


config = load_config()
env_config = get_env_config(config)
