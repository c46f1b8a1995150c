"""Baseline development data for the CMS store."""
