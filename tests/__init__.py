"""Tests for the freenas sdk."""
