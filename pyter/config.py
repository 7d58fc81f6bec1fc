"""
runtime settings, read from the environment on request. importing pyter never
touches the environment or the logging configuration.
"""
import logging
import os
from dataclasses import dataclass, asdict
from typing import Optional, Union, Dict, Any

LOG_LEVEL_ENV = 'PYTER_LOG_LEVEL'
SEED_ENV = 'PYTER_SEED'


@dataclass(frozen=True)
class Settings:
    log_level: str = 'WARNING'
    # seed for the convenience default random state; None means ambient randomness
    default_seed: Optional[Union[int, float, str]] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse_seed(raw: Optional[str]) -> Optional[Union[int, float, str]]:
    """int if it parses as one, then float, otherwise the raw string"""
    if raw is None or raw == '':
        return None
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            continue
    return raw


def load_settings(environ: Optional[Dict[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        log_level=env.get(LOG_LEVEL_ENV, 'WARNING').upper(),
        default_seed=_parse_seed(env.get(SEED_ENV)),
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    """install a basic handler at the configured level; meant for applications and test runs"""
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(name)s - %(message)s')
