"""Catalog Manager - browse, filter and edit a remote product catalog."""
