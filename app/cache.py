from dogpile.cache import make_region

from app.settings import DOGPILE_CACHE_SETTINGS


def create_cache_region(backend=None):
    backend = backend or DOGPILE_CACHE_SETTINGS['backend']
    if backend == 'dogpile.cache.redis':
        arguments = {
            'host': DOGPILE_CACHE_SETTINGS['host'],
            'port': DOGPILE_CACHE_SETTINGS['port'],
            'db': DOGPILE_CACHE_SETTINGS['db'],
            'redis_expiration_time': DOGPILE_CACHE_SETTINGS['redis_expiration_time'],
            'distributed_lock': True
        }
    else:
        arguments = {}
    return make_region().configure(backend, arguments=arguments)


cache_region = create_cache_region()
