from substrateinterface import SubstrateInterface


def query_storage(pallet_name, storage_name, substrate: SubstrateInterface, block_hash=None, params=None):
    """
    Query a storage function and return the decoded scale object.

    Returns None when the runtime at block_hash has no such storage function, e.g. a chain
    without the Auctions pallet.
    """
    storage_function = substrate.get_metadata_storage_function(pallet_name, storage_name, block_hash=block_hash)
    if storage_function is None:
        return None

    return substrate.query(module=pallet_name, storage_function=storage_name, params=params or [],
                           block_hash=block_hash)


def storage_value(scale_object, default=0):
    if scale_object is None or scale_object.value is None:
        return default
    return scale_object.value


def genesis_hash(substrate: SubstrateInterface) -> str:
    return substrate.get_block_hash(0)
