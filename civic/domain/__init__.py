"""Entity records, builders and pure helpers with no I/O."""
