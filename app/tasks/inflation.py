import logging

from substrateinterface import SubstrateInterface

from app import utils
from app.resources.base import create_substrate
from app.staking.curve import calculate_inflation
from app.staking.inflation import get_inflation_params
from app.tasks.base import BaseTask


class InflationTask(BaseTask):
    substrate: 'SubstrateInterface' = None

    def before(self):
        logging.info("InflationTask BEFORE")
        self.substrate = create_substrate()

    def after(self):
        if self.substrate:
            self.substrate.close()
        self.substrate = None

    def post(self):
        substrate = self.substrate
        block_hash = substrate.get_chain_finalised_head()
        genesis_hash = utils.genesis_hash(substrate)

        total_issuance = utils.storage_value(
            utils.query_storage(pallet_name='Balances', storage_name='TotalIssuance',
                                substrate=substrate, block_hash=block_hash))

        active_era = utils.storage_value(
            utils.query_storage(pallet_name='Staking', storage_name='ActiveEra',
                                substrate=substrate, block_hash=block_hash), default=None)

        total_stake = 0
        if active_era is not None:
            total_stake = utils.storage_value(
                utils.query_storage(pallet_name='Staking', storage_name='ErasTotalStake',
                                    substrate=substrate, block_hash=block_hash, params=[active_era['index']]))

        # chains without the Auctions pallet have no auction effect
        num_auctions = utils.storage_value(
            utils.query_storage(pallet_name='Auctions', storage_name='AuctionCounter',
                                substrate=substrate, block_hash=block_hash))

        params = get_inflation_params(genesis_hash)
        inflation = calculate_inflation(params, total_stake, total_issuance, num_auctions)
        logging.info("genesis %s, era %s, staked %s of %s, inflation %.4f%%", genesis_hash,
                     active_era['index'] if active_era else None, total_stake, total_issuance, inflation.inflation)

        resp = {
            'genesis_hash': genesis_hash,
            'block_hash': block_hash,
            'total_issuance': str(total_issuance),
            'total_stake': str(total_stake),
            'num_auctions': num_auctions,
            'params': params.serialize(),
            'inflation': inflation.serialize(),
        }
        self.cache_region().set("inflation", resp)
        return resp
