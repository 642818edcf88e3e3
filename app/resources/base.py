#  Polkascan PRE Explorer API
#
#  Copyright 2018-2020 openAware BV (NL).
#  This file is part of Polkascan.
#
#  Polkascan is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  Polkascan is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with Polkascan. If not, see <http://www.gnu.org/licenses/>.
#
#  base.py
from abc import ABC, abstractmethod

import falcon
from dogpile.cache import CacheRegion
from dogpile.cache.api import NO_VALUE
from substrateinterface import SubstrateInterface

from app import settings
from app.cache import cache_region
from app.settings import DOGPILE_CACHE_SETTINGS


class BaseResource(object):
    cache_region: CacheRegion


class JSONAPIResource(BaseResource):
    cache_expiration_time = None

    def get_meta(self):
        return {}

    def serialize_item(self, item):
        if hasattr(item, 'serialize'):
            return item.serialize()
        else:
            return item

    def process_get_response(self, req, resp, **kwargs):
        return {
            'status': falcon.HTTP_200,
            'media': self.get_jsonapi_response(data=None),
            'cacheable': False
        }

    def get_jsonapi_response(self, data, meta=None, errors=None, links=None):

        result = {
            'meta': {
                "authors": [
                    "POLKASCAN",
                    "openAware BV"
                ]
            },
            'errors': [],
            "data": data,
            "links": {}
        }

        if meta:
            result['meta'].update(meta)

        if errors:
            result['errors'] = errors

        if links:
            result['links'] = links

        return result

    def on_get(self, req, resp, **kwargs):

        cache_key = '{}-{}'.format(req.method, req.url)

        if self.cache_expiration_time:
            # Try to retrieve request from cache
            cache_response = self.cache_region.get(cache_key, self.cache_expiration_time)

            if cache_response is not NO_VALUE:
                resp.set_header('X-Cache', 'HIT')

            else:
                # Process request
                cache_response = self.process_get_response(req, resp, **kwargs)

                if cache_response.get('cacheable'):
                    # Store result in cache
                    self.cache_region.set(cache_key, cache_response)
                    resp.set_header('X-Cache', 'MISS')
        else:
            cache_response = self.process_get_response(req, resp, **kwargs)

        resp.status = cache_response.get('status')
        resp.media = cache_response.get('media')


def make_response(resource, item, req, meta=None):
    if not item:
        response = {
            'status': falcon.HTTP_404,
            'media': None,
            'cacheable': False
        }
    else:
        response = {
            'status': falcon.HTTP_200,
            'media': resource.get_jsonapi_response(
                data=resource.serialize_item(item),
                meta=resource.get_meta() if meta is None else meta
            ),
            'cacheable': True
        }
    return response


class JSONAPIDetailResource(JSONAPIResource, ABC):
    cache_expiration_time = DOGPILE_CACHE_SETTINGS['default_detail_cache_expiration_time']

    def get_item_url_name(self):
        return 'item_id'

    @abstractmethod
    def get_item(self, item_id):
        raise NotImplementedError()

    def process_get_response(self, req, resp, **kwargs):
        item = self.get_item(kwargs.get(self.get_item_url_name()))
        return make_response(self, item, req)


def create_substrate() -> SubstrateInterface:
    # runtime metadata is shared between connections through the cache region
    return SubstrateInterface(url=settings.SUBSTRATE_RPC_URL, type_registry_preset=settings.TYPE_REGISTRY,
                              ss58_format=settings.SUBSTRATE_ADDRESS_TYPE, cache_region=cache_region)
