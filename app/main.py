import logging

import falcon

from app.cache import cache_region as default_cache_region
from app.resources.inflation import InflationResource, InflationParamsResource

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


class CacheRegionMiddleware(object):

    def __init__(self, cache_region):
        self.cache_region = cache_region

    def process_resource(self, req, resp, resource, params):
        if resource is not None:
            resource.cache_region = self.cache_region


def create_app(cache_region=None):
    app = falcon.App(middleware=[CacheRegionMiddleware(cache_region or default_cache_region)])

    app.add_route('/inflation', InflationResource())
    app.add_route('/inflation/params/{genesis_hash}', InflationParamsResource())

    return app


app = create_app()
