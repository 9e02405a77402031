"""Tests for shorthands."""
