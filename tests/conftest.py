import os

os.environ.setdefault('DOGPILE_CACHE_BACKEND', 'dogpile.cache.memory')

import pytest  # noqa: E402

from app.cache import create_cache_region  # noqa: E402
from app.constants import KUSAMA_GENESIS  # noqa: E402

FINALISED_HEAD = '0x5a1e3ba5a1e3ba5a1e3ba5a1e3ba5a1e3ba5a1e3ba5a1e3ba5a1e3ba5a1e3ba5'


class ScaleValue:

    def __init__(self, value):
        self.value = value


class FakeSubstrate:
    """Stands in for SubstrateInterface, serving storage from a dict keyed by (pallet, storage)."""

    def __init__(self, genesis_hash=KUSAMA_GENESIS, storage=None):
        self.genesis_hash = genesis_hash
        self.storage = storage if storage is not None else {}
        self.queries = []
        self.closed = False

    def get_chain_finalised_head(self):
        return FINALISED_HEAD

    def get_block_hash(self, block_id=None):
        assert block_id == 0
        return self.genesis_hash

    def get_metadata_storage_function(self, module_name, storage_name, block_hash=None):
        if (module_name, storage_name) in self.storage:
            return object()
        return None

    def query(self, module, storage_function, params=None, block_hash=None):
        self.queries.append((module, storage_function, params, block_hash))
        value = self.storage[(module, storage_function)]
        if callable(value):
            value = value(*params)
        return ScaleValue(value)

    def close(self):
        self.closed = True


def kusama_storage():
    return {
        ('Balances', 'TotalIssuance'): 1005143929452533053703,
        ('Staking', 'ActiveEra'): {'index': 2840, 'start': 1634000000000},
        ('Staking', 'ErasTotalStake'): lambda era: 31506535424833259436 if era == 2840 else 0,
    }


@pytest.fixture
def substrate():
    return FakeSubstrate(storage=kusama_storage())


@pytest.fixture
def cache_region():
    return create_cache_region('dogpile.cache.memory')
