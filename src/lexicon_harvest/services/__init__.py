"""External services: delivery of finished records to the storage backend."""
