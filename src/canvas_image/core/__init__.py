"""Qt-free gesture and viewport logic."""
