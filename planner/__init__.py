"""Net worth planning: cash flows, tracked balances and projections."""
