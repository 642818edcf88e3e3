from types import MappingProxyType
from typing import NamedTuple

from app.constants import KUSAMA_GENESIS, POLKADOT_GENESIS


class InflationParams(NamedTuple):
    auction_adjust: float
    auction_max: float
    falloff: float
    max_inflation: float
    min_inflation: float
    stake_target: float

    def serialize(self):
        return self._asdict()


class Inflation(NamedTuple):
    ideal_stake: float
    ideal_interest: float
    inflation: float
    staked_fraction: float
    staked_return: float

    def serialize(self):
        return self._asdict()


DEFAULT_PARAMS = InflationParams(
    auction_adjust=0.0,
    auction_max=0.0,
    # 5% for falloff, as per the defaults, see
    # https://github.com/paritytech/polkadot/blob/816cb64ea16102c6c79f6be2a917d832d98df757/runtime/kusama/src/lib.rs#L534
    falloff=0.05,
    # 10% max, 2.5% min (upstream comment says 0.25%, the runtime constant is 0.025), see
    # https://github.com/paritytech/polkadot/blob/816cb64ea16102c6c79f6be2a917d832d98df757/runtime/kusama/src/lib.rs#L523
    max_inflation=0.1,
    min_inflation=0.025,
    stake_target=0.5
)

# Only the fields that differ from DEFAULT_PARAMS. New networks are added here.
PARAM_OVERRIDES = {
    KUSAMA_GENESIS: {'stake_target': 0.75},
    POLKADOT_GENESIS: {'stake_target': 0.75},
}

# _replace raises ValueError on an unknown field name, so a typo fails at import
KNOWN_PARAMS = MappingProxyType({
    genesis: DEFAULT_PARAMS._replace(**override) for genesis, override in PARAM_OVERRIDES.items()
})


def genesis_hash_key(genesis_hash) -> str:
    """
    Render a genesis hash in the form used as KNOWN_PARAMS key: 0x-prefixed lowercase hex
    for raw bytes, str() for anything else. Strings are not case folded.
    """
    if isinstance(genesis_hash, (bytes, bytearray)):
        return '0x{}'.format(genesis_hash.hex())
    return str(genesis_hash)


def get_inflation_params(genesis_hash) -> InflationParams:
    """
    Inflation curve parameters for the chain with the given genesis hash.

    Unknown chains, including empty or malformed hashes, get DEFAULT_PARAMS.
    """
    return KNOWN_PARAMS.get(genesis_hash_key(genesis_hash), DEFAULT_PARAMS)
