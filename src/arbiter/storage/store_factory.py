from arbiter.config import Config
from arbiter.storage.arbitrator_store import ArbitratorStore
from arbiter.storage.json_arbitrator_store import JsonArbitratorStore


def build_store(config: Config) -> ArbitratorStore:
    """Create the JSON store described by the configuration.

    Args:
        config: Loaded application configuration.
    Returns:
        A store writing to the configured path with the configured retry budget.
    """

    return JsonArbitratorStore(
        config.get_store_path(), max_attempts=config.store_write_attempts
    )
