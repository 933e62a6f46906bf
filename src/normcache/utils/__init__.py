"""Utilities for normcache."""
