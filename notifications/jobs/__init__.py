"""Background jobs executed by RQ workers."""
