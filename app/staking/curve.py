from app.staking.inflation import Inflation, InflationParams

BN_MILLION = 1000000


def calculate_staked_fraction(total_staked, total_issuance) -> float:
    # truncated to 6 decimals, the same precision the explorer front end shows
    if not total_issuance:
        return 0
    return total_staked * BN_MILLION // total_issuance / BN_MILLION


def calculate_inflation(params: InflationParams, total_staked, total_issuance, num_auctions=0) -> Inflation:
    """
    Evaluate the NPoS inflation curve for the observed stake.

    inflation and staked_return are percentages, the other fields are fractions.
    """
    staked_fraction = calculate_staked_fraction(total_staked, total_issuance)
    ideal_stake = params.stake_target - (min(params.auction_max, num_auctions) * params.auction_adjust)
    ideal_interest = params.max_inflation / ideal_stake

    if staked_fraction <= ideal_stake:
        tmp = staked_fraction * (ideal_interest - (params.min_inflation / ideal_stake))
    else:
        tmp = (ideal_interest * ideal_stake - params.min_inflation) * \
              (2 ** ((ideal_stake - staked_fraction) / params.falloff))
    inflation = 100 * (params.min_inflation + tmp)

    return Inflation(
        ideal_stake=ideal_stake,
        ideal_interest=ideal_interest,
        inflation=inflation,
        staked_fraction=staked_fraction,
        staked_return=inflation / staked_fraction if staked_fraction else 0
    )
