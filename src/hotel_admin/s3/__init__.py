"""Single-call wrappers around the S3 API used by the storage adapter."""
