"""Housekeeping commands, run by cron or by the in-process scheduler."""
