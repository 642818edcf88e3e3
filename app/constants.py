# Genesis hashes, in the 0x-prefixed lowercase hex form returned by
# SubstrateInterface.get_block_hash(0). Lookups are exact string matches.
KUSAMA_GENESIS = '0xb0a8d493285c2df73290dfb7e61f870f17b41801197a149ca93654499ea3dafe'
POLKADOT_GENESIS = '0x91b171bb158e2d3848fa23a9f1c25182fb8e20313b2c1eb49219da7a70ce90c3'
