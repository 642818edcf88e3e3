from dogpile.cache.api import NO_VALUE

from app.resources.base import JSONAPIDetailResource, make_response
from app.staking.inflation import get_inflation_params, genesis_hash_key


class InflationResource(JSONAPIDetailResource):
    cache_expiration_time = 0

    def get_item(self, item_id):
        inflation = self.cache_region.get("inflation")
        if inflation is NO_VALUE:
            return None
        return inflation


class InflationParamsResource(JSONAPIDetailResource):

    def get_item_url_name(self):
        return 'genesis_hash'

    def process_get_response(self, req, resp, **kwargs):
        # resource instances are shared between requests, so no per-request state on self
        genesis_hash = genesis_hash_key(kwargs.get(self.get_item_url_name()))
        return make_response(self, self.get_item(genesis_hash), req, meta={'genesis_hash': genesis_hash})

    def get_item(self, item_id):
        return get_inflation_params(item_id)
