#!/usr/bin/env python
"""
Configuration Check Script
Load settings from environment / .env and print the effective purchase rules

Usage:
    python -m script.check_config
"""

from pydantic import ValidationError

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io import Logger


def render_settings(settings: Settings) -> list[str]:
    summary = settings.to_summary()
    width = max(len(key) for key in summary) + 2
    return [f'{key + ":":<{width}}{value}' for key, value in summary.items()]


def main():
    """Main function"""
    try:
        settings = Settings()
    except ValidationError as e:
        Logger.base.error(f'💥 Invalid configuration: {e}')
        raise SystemExit(1) from e

    Logger.base.info('🎬 Cinema Tickets Configuration')
    Logger.base.info('─' * 50)
    for line in render_settings(settings):
        Logger.base.info(line)
    Logger.base.info('─' * 50)
    Logger.base.info('✅ Config loaded successfully!')


if __name__ == '__main__':
    main()
