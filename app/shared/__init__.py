"""Shared cross-cutting helpers: telemetry and utilities. No business logic."""
