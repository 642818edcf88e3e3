import os

SUBSTRATE_RPC_URL = os.environ.get('SUBSTRATE_RPC_URL', 'ws://substrate-node:9944/')
TYPE_REGISTRY = os.environ.get('TYPE_REGISTRY', 'polkadot')
SUBSTRATE_ADDRESS_TYPE = int(os.environ.get('SUBSTRATE_ADDRESS_TYPE', 0))

DOGPILE_CACHE_SETTINGS = {
    'backend': os.environ.get('DOGPILE_CACHE_BACKEND', 'dogpile.cache.redis'),
    'default_detail_cache_expiration_time': 3600,
    'host': os.environ.get('DOGPILE_CACHE_HOST', 'redis'),
    'port': int(os.environ.get('DOGPILE_CACHE_PORT', 6379)),
    'db': int(os.environ.get('DOGPILE_CACHE_DB', 10)),
    'redis_expiration_time': 60 * 60 * 2,  # 2 hours
}

SCHEDULER_JOBSTORE_URL = os.environ.get('SCHEDULER_JOBSTORE_URL', 'sqlite:///jobs.sqlite')

# minutes
INFLATION_TASK_INTERVAL = int(os.environ.get('INFLATION_TASK_INTERVAL', 30))
