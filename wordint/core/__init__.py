"""Word primitive, BigInt representation, add/subtract engine and decimal constructor."""
