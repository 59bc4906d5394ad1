"""Storefront backend: catalogue, reviews, orders, and legacy catalogue migration."""
