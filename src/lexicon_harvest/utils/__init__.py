# ABOUTME: Shared utilities for logging, retries and console tables
# ABOUTME: Used by the CLI and the service shells around the extraction core
