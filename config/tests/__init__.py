"""Tests for the environment configuration."""
