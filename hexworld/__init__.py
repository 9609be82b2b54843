"""Deterministic shape generation on an infinite hex grid."""
