"""HTTP service exposing the derivation engine."""
