"""Durable key-value stores used to persist the task list."""
