"""Adapters implementing the graph store port."""
