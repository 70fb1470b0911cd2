"""
Reproducible pseudo-random helpers for routine generation.

Every draw is a pure function of its seed: the same inputs always produce the
same routine, so regenerating with identical selections never reshuffles.
"""


LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2 ** 31


def next_seed(seed):
    """Advance the linear congruential generator by one step."""
    return (seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS


def seeded_shuffle(items, seed):
    """
    Fisher-Yates shuffle driven by successive generator outputs.

    Returns a new list; the input sequence is left untouched.
    """
    result = list(items)
    state = seed
    for i in range(len(result) - 1, 0, -1):
        state = next_seed(state)
        j = state % (i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def rand_between(low, high, seed):
    """Draw an integer in [low, high] from a single generator step."""
    if high < low:
        low, high = high, low
    return low + (next_seed(seed) % (high - low + 1))


def routine_seed(equipment_ids, frequency, split):
    """
    Derive the base seed for a generation call.

    Only the first character of each id contributes, so the seed does not
    depend on the order the equipment was selected in.
    """
    total = 0
    for equipment_id in equipment_ids:
        if equipment_id:
            total += ord(equipment_id[0]) * 31
    return total + int(frequency) * 7 + int(split) * 13
